"""Tab extensions - full pages added to host object views."""

from dataclasses import dataclass
from typing import List, Optional

from extensibility.context.keys import (
    AccountContextKeys,
    ClientContextKeys,
    OpportunityContextKeys,
    ProspectContextKeys,
    UserContextKeys,
    key_values,
)
from extensibility.manifest.extensions.base import Extension, ExtensionType, register_extension

# Context a tab may request depends on the object view it is added to
TAB_CONTEXT_KEYS = {
    ExtensionType.ACCOUNT_TAB.value: key_values(
        AccountContextKeys, UserContextKeys, ClientContextKeys
    ),
    ExtensionType.OPPORTUNITY_TAB.value: key_values(
        OpportunityContextKeys, AccountContextKeys, UserContextKeys, ClientContextKeys
    ),
    ExtensionType.PROSPECT_TAB.value: key_values(
        ProspectContextKeys, AccountContextKeys, UserContextKeys, ClientContextKeys
    ),
}


@register_extension(
    ExtensionType.ACCOUNT_TAB,
    ExtensionType.OPPORTUNITY_TAB,
    ExtensionType.PROSPECT_TAB,
)
@dataclass
class TabExtension(Extension):
    """Tab added to an account, opportunity or prospect page."""

    type: Optional[str] = ExtensionType.ACCOUNT_TAB.value

    def validate(self) -> List[str]:
        issues = super().validate()

        allowed = TAB_CONTEXT_KEYS.get(self.type) if isinstance(self.type, str) else None
        if allowed is None:
            if self.type:
                issues.append(
                    f"Tab extension type must be one of {sorted(TAB_CONTEXT_KEYS)}. Value: {self.type}"
                )
            return issues

        issues.extend(self._context_key_issues(allowed, f"{self.type} extension"))
        return issues
