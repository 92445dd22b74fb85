"""Tile extensions - small surfaces rendered on host pages."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from extensibility.context.keys import (
    AccountContextKeys,
    ClientContextKeys,
    UserContextKeys,
    key_values,
)
from extensibility.manifest.extensions.base import Extension, ExtensionType, register_extension

HOME_TILE_CONTEXT_KEYS = key_values(AccountContextKeys, UserContextKeys, ClientContextKeys)


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass
class TileExtension(Extension):
    """Base for tile extensions.

    ``settings`` optionally sets the tile size in pixels: {"width": .., "height": ..}
    """

    settings: Optional[Dict[str, Any]] = None

    def validate(self) -> List[str]:
        issues = super().validate()

        if self.settings is None:
            return issues
        if not isinstance(self.settings, Mapping):
            issues.append(f"Tile settings section is not an object. Value: {self.settings}")
            return issues

        for dimension in ("width", "height"):
            value = self.settings.get(dimension)
            if value is not None and not _positive_int(value):
                issues.append(f"Tile {dimension} must be a positive integer. Value: {value}")

        return issues


@register_extension(ExtensionType.HOME_TILE)
@dataclass
class HomeTileExtension(TileExtension):
    """Tile loaded on the host home page.

    A home page has no account, opportunity or prospect of its own, so the
    tile may only ask for account, user and client context.
    """

    type: Optional[str] = ExtensionType.HOME_TILE.value

    def validate(self) -> List[str]:
        issues = super().validate()
        issues.extend(self._context_key_issues(HOME_TILE_CONTEXT_KEYS, "home tile extension"))
        return issues
