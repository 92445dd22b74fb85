"""Extension base class and the extension type registry."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Type, Union

from extensibility.context.keys import invalid_keys
from extensibility.utils.validation import url_validation

logger = logging.getLogger(__name__)

# Marks an extension built from a definition that was not an object
_NO_RAW = object()


class ExtensionType(str, Enum):
    """Built-in extension types (where the extension is loaded in the host)."""

    HOME_TILE = "tile-home"
    ACCOUNT_TAB = "tab-account"
    OPPORTUNITY_TAB = "tab-opportunity"
    PROSPECT_TAB = "tab-prospect"
    APPLICATION = "application"


# type value -> extension class
_EXTENSION_CLASSES: Dict[str, Type[Extension]] = {}


def register_extension(
    *extension_types: Union[ExtensionType, str],
) -> Callable[[Type[Extension]], Type[Extension]]:
    """Class decorator binding extension type values to an extension class.

    Example:
        @register_extension(ExtensionType.HOME_TILE)
        class HomeTileExtension(TileExtension):
            ...
    """

    def decorator(cls: Type[Extension]) -> Type[Extension]:
        for extension_type in extension_types:
            value = _type_value(extension_type)
            if value in _EXTENSION_CLASSES:
                logger.warning(
                    f"Extension type '{value}' already registered to "
                    f"{_EXTENSION_CLASSES[value].__name__}, overwriting"
                )
            _EXTENSION_CLASSES[value] = cls
        return cls

    return decorator


def registered_types() -> List[str]:
    """Get all registered extension type values."""
    return list(_EXTENSION_CLASSES)


def extension_class(extension_type: Any) -> Optional[Type[Extension]]:
    """Get the extension class registered for a type value."""
    value = _type_value(extension_type)
    if not isinstance(value, str):
        return None
    return _EXTENSION_CLASSES.get(value)


def parse_extension(data: Any) -> Extension:
    """Build an extension from its manifest definition.

    Never raises for malformed definitions: an unknown type gives a base
    ``Extension`` and anything that is not an object is kept as the raw value
    of an ``Extension``. Both report their problem from ``validate()``.
    """
    if isinstance(data, Extension):
        return data
    if not isinstance(data, Mapping):
        return Extension(raw=data)

    cls = extension_class(data.get("type")) or Extension
    return cls.from_dict(data)


def _type_value(extension_type: Any) -> Any:
    if isinstance(extension_type, Enum):
        return extension_type.value
    return extension_type


@dataclass
class Extension:
    """Base extension definition.

    Holds the definition as written in the manifest, without coercion, so
    wrongly typed values survive until ``validate()`` reports them.
    """

    type: Optional[str] = None
    identifier: Optional[str] = None
    version: Optional[str] = None
    # {"url": ..., "icon": ...}
    host: Optional[Dict[str, Any]] = None
    # context keys the extension needs from the host
    context: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)
    raw: Any = field(default=_NO_RAW, repr=False)

    def __post_init__(self):
        self.type = _type_value(self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Extension:
        """Create an extension from a manifest mapping, keeping unknown keys in ``extra``."""
        names = {f.name for f in fields(cls)} - {"extra", "raw"}
        known = {k: v for k, v in data.items() if k in names}
        extra = {k: v for k, v in data.items() if k not in names}
        if known.get("context", []) is None:
            known["context"] = []
        return cls(**known, extra=extra)

    def to_dict(self) -> Any:
        """Serialize back to the manifest form (a non-object definition is returned as is)."""
        if self.raw is not _NO_RAW:
            return self.raw
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name not in ("extra", "raw")}
        data = {k: v for k, v in data.items() if v is not None}
        data.update(self.extra)
        return data

    def validate(self) -> List[str]:
        """Validate the checks shared by every extension.

        Returns:
            List of validation issues (empty if none)
        """
        issues: List[str] = []

        if self.raw is not _NO_RAW:
            issues.append(f"Extension definition is not an object. Value: {self.raw}")
            return issues

        if not self.type:
            issues.append("Extension type is missing.")
        else:
            registered = extension_class(self.type)
            if registered is None:
                issues.append(f"Extension type is invalid. Value: {self.type}")
            elif not issubclass(registered, type(self)):
                issues.append(
                    f"Extension type does not match {type(self).__name__}. Value: {self.type}"
                )

        if not self.identifier:
            issues.append(f"Extension identifier is missing. Type: {self.type}")

        if not self.version:
            issues.append(f"Extension version is missing. Identifier: {self.identifier}")

        if self.host is None:
            issues.append(f"Extension host section is missing. Identifier: {self.identifier}")
        elif not isinstance(self.host, Mapping):
            issues.append(f"Extension host section is not an object. Value: {self.host}")
        else:
            if not self.host.get("url"):
                issues.append(f"Extension host url is missing. Identifier: {self.identifier}")
            elif not url_validation(self.host["url"]):
                issues.append(f"Extension host url is invalid url. Value: {self.host['url']}")
            icon = self.host.get("icon")
            if icon and not url_validation(icon):
                issues.append(f"Extension host icon is invalid url. Value: {icon}")

        if not isinstance(self.context, list):
            issues.append(f"Extension context value is not an array. Value: {self.context}")

        return issues

    def _context_key_issues(self, allowed: FrozenSet[str], label: str) -> List[str]:
        """One issue per declared context key outside ``allowed``."""
        if not isinstance(self.context, list):
            return []
        return [
            f"Context key is not one of the valid values for the {label}. Key: {key}"
            for key in invalid_keys(self.context, allowed)
        ]
