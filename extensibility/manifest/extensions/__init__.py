"""Extension definitions declared in the manifest's ``extensions`` section.

Importing this package registers the built-in extension types.
"""

from .base import (
    Extension,
    ExtensionType,
    extension_class,
    parse_extension,
    register_extension,
    registered_types,
)
from .application import ApplicationExtension
from .tab import TabExtension
from .tile import HomeTileExtension, TileExtension

__all__ = [
    'ApplicationExtension',
    'Extension',
    'ExtensionType',
    'HomeTileExtension',
    'TabExtension',
    'TileExtension',
    'extension_class',
    'parse_extension',
    'register_extension',
    'registered_types',
]
