"""Application manifest: models, extensions and validation."""

from .extensions import (
    ApplicationExtension,
    Extension,
    ExtensionType,
    HomeTileExtension,
    TabExtension,
    TileExtension,
    parse_extension,
    register_extension,
)
from .loader import ManifestLoadError, load_application, load_manifest
from .models import (
    ApiClient,
    Application,
    Author,
    ManifestApi,
    Media,
    MediaType,
    Store,
    StoreType,
)
from .oauth import build_authorize_url
from .scopes import Scopes
from .validator import validate

__all__ = [
    'ApiClient',
    'Application',
    'ApplicationExtension',
    'Author',
    'Extension',
    'ExtensionType',
    'HomeTileExtension',
    'ManifestApi',
    'ManifestLoadError',
    'Media',
    'MediaType',
    'Scopes',
    'Store',
    'StoreType',
    'TabExtension',
    'TileExtension',
    'build_authorize_url',
    'load_application',
    'load_manifest',
    'parse_extension',
    'register_extension',
    'validate',
]
