from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .config import DEFAULT_ENCODING, DEFAULT_POST_PHASE, default_local_repository, default_registry_file
from .descriptor import ProjectDescriptor
from .parameters import ResolvedDimensions


@dataclass(frozen=True)
class ArchetypeOptions:
    """Invocation settings for creating an archetype from a project.

    The three list settings stay raw comma-delimited strings here; they are
    resolved against the property file and defaults at creation time.
    """

    interactive: bool = False
    filtered_extensions: str | None = None
    excluded_extensions: str | None = None
    source_directory: Path | None = None
    languages: str | None = None
    registry_file: Path = field(default_factory=default_registry_file)
    encoding: str = DEFAULT_ENCODING
    partial_archetype: bool = False
    preserve_cdata: bool = False
    local_repository: Path | None = field(default_factory=default_local_repository)
    keep_parent: bool = True
    property_file: Path | None = None
    post_phase: str = DEFAULT_POST_PHASE
    output_directory: Path | None = None
    test_mode: bool = False
    package_name: str | None = None
    execution_properties: Mapping[str, str] = field(default_factory=dict)

    def output_directory_for(self, project: ProjectDescriptor) -> Path:
        if self.output_directory is not None:
            return self.output_directory
        return project.build_directory / "generated-sources" / "archetype"


@dataclass(frozen=True)
class CreationRequest:
    project: ProjectDescriptor
    interactive: bool
    properties: Mapping[str, str]
    languages: tuple[str, ...]
    filtered_extensions: tuple[str, ...]
    excluded_extensions: tuple[str, ...]
    preserve_cdata: bool
    keep_parent: bool
    partial_archetype: bool
    registry_file: Path
    local_repository: Path | None
    package_name: str | None
    post_phase: str
    output_directory: Path

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": {
                "group_id": self.project.group_id,
                "artifact_id": self.project.artifact_id,
                "version": self.project.version,
                "descriptor": str(self.project.file),
            },
            "interactive": self.interactive,
            "properties": dict(self.properties),
            "languages": list(self.languages),
            "filtered_extensions": list(self.filtered_extensions),
            "excluded_extensions": list(self.excluded_extensions),
            "preserve_cdata": self.preserve_cdata,
            "keep_parent": self.keep_parent,
            "partial_archetype": self.partial_archetype,
            "registry_file": str(self.registry_file),
            "local_repository": str(self.local_repository) if self.local_repository else None,
            "package_name": self.package_name,
            "post_phase": self.post_phase,
            "output_directory": str(self.output_directory),
        }


@dataclass(frozen=True)
class CreationResult:
    output_directory: Path | None = None
    cause: BaseException | None = None

    def __post_init__(self) -> None:
        if (self.output_directory is None) == (self.cause is None):
            raise ValueError("A creation result carries either an output directory or a cause")

    @classmethod
    def succeeded(cls, output_directory: Path) -> "CreationResult":
        return cls(output_directory=output_directory)

    @classmethod
    def failed(cls, cause: BaseException) -> "CreationResult":
        return cls(cause=cause)

    @property
    def ok(self) -> bool:
        return self.cause is None


def build_creation_request(
    *,
    project: ProjectDescriptor,
    interactive: bool,
    properties: Mapping[str, str],
    dimensions: ResolvedDimensions,
    options: ArchetypeOptions,
    output_directory: Path,
) -> CreationRequest:
    """Aggregate resolved inputs and pass-through settings into one request.

    Inputs are referenced as given; nothing is copied, validated or altered.
    """
    return CreationRequest(
        project=project,
        interactive=interactive,
        properties=properties,
        languages=dimensions.languages,
        filtered_extensions=dimensions.filtered_extensions,
        excluded_extensions=dimensions.excluded_extensions,
        preserve_cdata=options.preserve_cdata,
        keep_parent=options.keep_parent,
        partial_archetype=options.partial_archetype,
        registry_file=options.registry_file,
        local_repository=options.local_repository,
        package_name=options.package_name,
        post_phase=options.post_phase,
        output_directory=output_directory,
    )
