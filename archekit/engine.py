from __future__ import annotations

import importlib
import logging
from typing import Protocol

import yaml

from .config import MANIFEST_FILE
from .request import CreationRequest, CreationResult

logger = logging.getLogger(__name__)


class EngineLoadError(RuntimeError):
    pass


class ArchetypeEngine(Protocol):
    def create_archetype(self, request: CreationRequest) -> CreationResult:
        """Generate the archetype; processing errors come back as a failed result."""
        ...


class ManifestEngine:
    """Writes the resolved creation request as a YAML manifest in the output directory.

    It does not render templates; a real generator can pick the manifest up
    or be plugged in through ``load_engine``.
    """

    def create_archetype(self, request: CreationRequest) -> CreationResult:
        target = request.output_directory / MANIFEST_FILE
        try:
            request.output_directory.mkdir(parents=True, exist_ok=True)
            target.write_text(yaml.safe_dump(request.to_dict(), sort_keys=False), encoding="utf-8")
        except OSError as error:
            return CreationResult.failed(error)

        logger.debug("Wrote creation manifest %s", target)
        return CreationResult.succeeded(request.output_directory)


def load_engine(path: str) -> ArchetypeEngine:
    """Import an engine from ``package.module:attribute``; classes are instantiated."""
    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise EngineLoadError(f"Engine path must look like 'package.module:attribute', got: {path}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as error:
        raise EngineLoadError(f"Cannot import engine module {module_name}: {error}") from error

    try:
        engine = getattr(module, attribute)
    except AttributeError as error:
        raise EngineLoadError(f"Module {module_name} has no attribute {attribute}") from error

    if isinstance(engine, type):
        engine = engine()
    if not callable(getattr(engine, "create_archetype", None)):
        raise EngineLoadError(f"{path} does not provide create_archetype()")
    return engine
