"""Manifest loading - reads manifest files from disk."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from extensibility.manifest.models import Application

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class ManifestLoadError(Exception):
    """Raised when a manifest file cannot be read or parsed."""


def load_manifest(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a manifest file as a raw mapping.

    The result is not coerced to models, so it can be handed to
    ``validate()`` to report wrongly typed values.

    Args:
        path: Path to a .json, .yaml or .yml manifest

    Returns:
        Manifest document

    Raises:
        ManifestLoadError: If the file is missing, unparsable or not an object
    """
    manifest_file = Path(path)
    try:
        with open(manifest_file, "r", encoding="utf-8") as f:
            if manifest_file.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ManifestLoadError(f"Invalid manifest syntax in {manifest_file}: {e}") from e
    except OSError as e:
        raise ManifestLoadError(f"Cannot read manifest {manifest_file}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestLoadError(f"Manifest {manifest_file} is not an object")

    logger.debug(f"Loaded manifest from {manifest_file}")
    return data


def load_application(path: Union[str, Path]) -> Application:
    """Load a manifest file into an ``Application`` model.

    Raises:
        ManifestLoadError: If the file cannot be loaded or does not match the
            manifest models
    """
    data = load_manifest(path)
    try:
        return Application.model_validate(data)
    except ValidationError as e:
        raise ManifestLoadError(f"Invalid manifest in {path}: {e}") from e
