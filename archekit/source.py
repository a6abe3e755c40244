from __future__ import annotations

import logging
from pathlib import Path

from .config import DESCRIPTOR_FILE
from .descriptor import DescriptorLoader, ProjectDescriptor

logger = logging.getLogger(__name__)


def resolve_source_project(
    source_directory: Path | None,
    current_project: ProjectDescriptor | None,
    loader: DescriptorLoader,
    local_repository: Path | None = None,
) -> ProjectDescriptor:
    """Pick the project the archetype is created from.

    An alternate source directory always wins and its load errors propagate;
    there is no fallback to the current project.
    """
    if source_directory is not None:
        descriptor_file = Path(source_directory) / DESCRIPTOR_FILE
        logger.debug("Loading source project from %s", descriptor_file)
        return loader.load(descriptor_file, local_repository)

    if current_project is None:
        raise ValueError("A current project is required when no source directory is given")
    return current_project
