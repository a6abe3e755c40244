from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from .config import (
    ARCHETYPE_EXCLUDED_EXTENSIONS,
    ARCHETYPE_FILTERED_EXTENSIONS,
    ARCHETYPE_LANGUAGES,
    DEFAULT_EXCLUDED_EXTENSIONS,
    DEFAULT_FILTERED_EXTENSIONS,
    DEFAULT_LANGUAGES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigurationDimension:
    name: str
    property_key: str
    defaults: tuple[str, ...]


LANGUAGES = ConfigurationDimension("languages", ARCHETYPE_LANGUAGES, DEFAULT_LANGUAGES)
FILTERED_EXTENSIONS = ConfigurationDimension(
    "filtered extensions", ARCHETYPE_FILTERED_EXTENSIONS, DEFAULT_FILTERED_EXTENSIONS
)
EXCLUDED_EXTENSIONS = ConfigurationDimension(
    "excluded extensions", ARCHETYPE_EXCLUDED_EXTENSIONS, DEFAULT_EXCLUDED_EXTENSIONS
)


@dataclass(frozen=True)
class ResolvedDimensions:
    languages: tuple[str, ...]
    filtered_extensions: tuple[str, ...]
    excluded_extensions: tuple[str, ...]


def split_values(raw: str | None) -> tuple[str, ...]:
    """Split a comma-delimited setting, keeping order and dropping empty tokens."""
    if not raw:
        return ()
    return tuple(token for token in raw.split(",") if token)


def resolve_dimension(
    dimension: ConfigurationDimension,
    override: str | None = None,
    properties: Mapping[str, str] | None = None,
) -> tuple[str, ...]:
    """Resolve one list setting: explicit override, then property file, then defaults.

    A tier that yields no values does not apply, so resolution falls through
    to the next one.
    """
    values = split_values(override)
    if values:
        logger.debug("Found in command line %s = %s", dimension.name, list(values))
        return values

    if properties is not None:
        values = split_values(properties.get(dimension.property_key))
        if values:
            logger.debug("Found in property file %s = %s", dimension.name, list(values))
            return values

    logger.debug("Using default %s = %s", dimension.name, list(dimension.defaults))
    return dimension.defaults


def resolve_dimensions(
    languages: str | None = None,
    filtered_extensions: str | None = None,
    excluded_extensions: str | None = None,
    properties: Mapping[str, str] | None = None,
) -> ResolvedDimensions:
    return ResolvedDimensions(
        languages=resolve_dimension(LANGUAGES, languages, properties),
        filtered_extensions=resolve_dimension(FILTERED_EXTENSIONS, filtered_extensions, properties),
        excluded_extensions=resolve_dimension(EXCLUDED_EXTENSIONS, excluded_extensions, properties),
    )
