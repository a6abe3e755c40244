from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping, Protocol, Sequence

import typer

from .config import REQUIRED_PROPERTIES
from .descriptor import ProjectDescriptor
from .properties import ConfigurationError, load_property_file

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigurationError",
    "CreationConfigurator",
    "PropertyConfigurator",
    "guess_package",
]


class CreationConfigurator(Protocol):
    def configure(
        self,
        project: ProjectDescriptor,
        interactive: bool,
        execution_properties: Mapping[str, str],
        property_file: Path | None,
        languages: Sequence[str],
    ) -> Mapping[str, str]:
        ...


def _single_package_path(root: Path) -> list[str]:
    parts: list[str] = []
    current = root
    while True:
        entries = list(current.iterdir())
        directories = [entry for entry in entries if entry.is_dir()]
        if len(directories) != 1 or len(entries) != 1:
            return parts
        current = directories[0]
        parts.append(current.name)


def guess_package(project: ProjectDescriptor, languages: Sequence[str]) -> str:
    """Guess the main package from the first language source tree with a single-path prefix."""
    for language in languages:
        source_root = project.basedir / "src" / "main" / language
        if not source_root.is_dir():
            continue
        parts = _single_package_path(source_root)
        if parts:
            return ".".join(parts)
    return project.group_id


def _project_defaults(project: ProjectDescriptor, languages: Sequence[str]) -> dict[str, str]:
    return {
        "archetype.groupId": project.group_id,
        "archetype.artifactId": f"{project.artifact_id}-archetype",
        "archetype.version": project.version,
        "groupId": project.group_id,
        "artifactId": project.artifact_id,
        "version": project.version,
        "package": guess_package(project, languages),
    }


class PropertyConfigurator:
    """Builds the archetype properties from the property file, execution properties and the project.

    Execution properties override the property file; values still missing
    are derived from the project. In interactive mode every required value is
    prompted for and the whole set confirmed before it is returned.
    """

    def __init__(
        self,
        prompt: Callable[..., str] = typer.prompt,
        confirm: Callable[..., bool] = typer.confirm,
    ) -> None:
        self._prompt = prompt
        self._confirm = confirm

    def configure(
        self,
        project: ProjectDescriptor,
        interactive: bool,
        execution_properties: Mapping[str, str],
        property_file: Path | None,
        languages: Sequence[str],
    ) -> Mapping[str, str]:
        properties = dict(load_property_file(property_file))
        properties.update(execution_properties)

        for key, value in _project_defaults(project, languages).items():
            if not properties.get(key) and value:
                properties[key] = value

        if interactive:
            try:
                self._ask(properties)
            except typer.Abort as error:
                raise ConfigurationError("Archetype configuration aborted") from error

        missing = [key for key in REQUIRED_PROPERTIES if not properties.get(key)]
        if missing:
            raise ConfigurationError(f"Missing archetype properties: {', '.join(missing)}")

        logger.debug("Archetype properties: %s", properties)
        return MappingProxyType(properties)

    def _ask(self, properties: dict[str, str]) -> None:
        while True:
            for key in REQUIRED_PROPERTIES:
                answer = self._prompt(f"Define value for property '{key}'", default=properties.get(key) or None)
                properties[key] = str(answer)
            summary = "\n".join(f"{key}: {properties[key]}" for key in REQUIRED_PROPERTIES)
            if self._confirm(f"Confirm archetype configuration:\n{summary}\n", default=True):
                return
