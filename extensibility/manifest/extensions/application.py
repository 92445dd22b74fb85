"""Application extension - a standalone addon page in the host navigation."""

from dataclasses import dataclass
from typing import List, Optional

from extensibility.context.keys import ClientContextKeys, UserContextKeys, key_values
from extensibility.manifest.extensions.base import Extension, ExtensionType, register_extension

APPLICATION_CONTEXT_KEYS = key_values(UserContextKeys, ClientContextKeys)


@register_extension(ExtensionType.APPLICATION)
@dataclass
class ApplicationExtension(Extension):
    """Addon page reachable from the host's left side menu."""

    type: Optional[str] = ExtensionType.APPLICATION.value

    def validate(self) -> List[str]:
        issues = super().validate()
        issues.extend(self._context_key_issues(APPLICATION_CONTEXT_KEYS, "application extension"))
        return issues
