from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class InputResolutionError(RuntimeError):
    pass


class DescriptorReadError(InputResolutionError):
    pass


class DescriptorParseError(InputResolutionError):
    pass


class ComponentResolutionError(InputResolutionError):
    pass


@dataclass(frozen=True)
class ParentReference:
    group_id: str
    artifact_id: str
    version: str


@dataclass(frozen=True)
class ProjectDescriptor:
    group_id: str
    artifact_id: str
    version: str
    file: Path
    packaging: str = "jar"
    name: str = ""
    parent: ParentReference | None = None

    @property
    def basedir(self) -> Path:
        return self.file.parent

    @property
    def build_directory(self) -> Path:
        return self.basedir / "target"

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


class DescriptorLoader(Protocol):
    def load(self, descriptor_file: Path, local_repository: Path | None) -> ProjectDescriptor:
        """Load a project descriptor, raising an ``InputResolutionError`` on failure."""
        ...


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> str:
    for child in element:
        if _local_name(child.tag) == name:
            return (child.text or "").strip()
    return ""


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


class PomDescriptorLoader:
    """Reads project coordinates from a ``pom.xml``.

    ``groupId`` and ``version`` fall back to the ``<parent>`` block, as a
    child module usually inherits them. The local repository is accepted as
    loading context only; parents are not fetched from it.
    """

    def load(self, descriptor_file: Path, local_repository: Path | None = None) -> ProjectDescriptor:
        logger.debug("Loading project descriptor %s (repository: %s)", descriptor_file, local_repository)
        try:
            content = descriptor_file.read_bytes()
        except OSError as error:
            raise DescriptorReadError(f"Cannot read project descriptor {descriptor_file}: {error}") from error

        try:
            root = ET.fromstring(content)
        except ET.ParseError as error:
            raise DescriptorParseError(f"Malformed project descriptor {descriptor_file}: {error}") from error

        if _local_name(root.tag) != "project":
            raise ComponentResolutionError(
                f"Expected <project> root in {descriptor_file}, found <{_local_name(root.tag)}>"
            )

        parent = None
        parent_element = _child(root, "parent")
        if parent_element is not None:
            parent = ParentReference(
                group_id=_child_text(parent_element, "groupId"),
                artifact_id=_child_text(parent_element, "artifactId"),
                version=_child_text(parent_element, "version"),
            )

        group_id = _child_text(root, "groupId") or (parent.group_id if parent else "")
        artifact_id = _child_text(root, "artifactId")
        version = _child_text(root, "version") or (parent.version if parent else "")

        missing = [
            label
            for label, value in (("groupId", group_id), ("artifactId", artifact_id), ("version", version))
            if not value
        ]
        if missing:
            raise ComponentResolutionError(
                f"Cannot resolve {', '.join(missing)} for project descriptor {descriptor_file}"
            )

        return ProjectDescriptor(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            file=descriptor_file.resolve(),
            packaging=_child_text(root, "packaging") or "jar",
            name=_child_text(root, "name"),
            parent=parent,
        )
