from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

logger = logging.getLogger(__name__)

EMPTY_PROPERTIES: Mapping[str, str] = MappingProxyType({})


class ConfigurationError(RuntimeError):
    pass


class PropertyFileError(ConfigurationError):
    pass


def load_property_file(path: Path | None) -> Mapping[str, str]:
    """Read the persisted archetype properties.

    The file holds one flat YAML mapping. Scalars are kept as written, so
    `1.10` stays `"1.10"`. A missing path or file yields an empty, read-only
    bag; anything that is not a mapping is rejected.
    """
    if path is None or not path.exists():
        return EMPTY_PROPERTIES

    try:
        data = yaml.load(path.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)
    except yaml.YAMLError as error:
        raise PropertyFileError(f"Malformed property file {path}: {error}") from error

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PropertyFileError(f"Property file {path} must hold a mapping of keys to values")

    properties = {str(key): "" if value is None else str(value) for key, value in data.items()}
    logger.debug("Loaded %d properties from %s", len(properties), path.name)
    return MappingProxyType(properties)
