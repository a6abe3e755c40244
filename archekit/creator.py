from __future__ import annotations

import logging
from pathlib import Path

from .configurator import CreationConfigurator, PropertyConfigurator
from .descriptor import DescriptorLoader, PomDescriptorLoader, ProjectDescriptor
from .engine import ArchetypeEngine, ManifestEngine
from .parameters import resolve_dimensions
from .properties import load_property_file
from .request import ArchetypeOptions, build_creation_request
from .source import resolve_source_project

logger = logging.getLogger(__name__)


class CreationFailure(RuntimeError):
    """The single failure reported for an archetype creation.

    ``message`` doubles as the short summary and the long description; both
    come from the underlying cause.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        self.message = str(cause)
        super().__init__(self.message)

    @property
    def long_message(self) -> str:
        return self.message


class ArchetypeCreator:
    """Creates an archetype from a project.

    Resolves the source project and the archetype settings, assembles the
    creation request and hands it to the engine. Every failure, whichever
    stage raised it, surfaces as one ``CreationFailure``.
    """

    def __init__(
        self,
        loader: DescriptorLoader | None = None,
        configurator: CreationConfigurator | None = None,
        engine: ArchetypeEngine | None = None,
    ) -> None:
        self.loader = loader or PomDescriptorLoader()
        self.configurator = configurator or PropertyConfigurator()
        self.engine = engine or ManifestEngine()

    def create(self, options: ArchetypeOptions, current_project: ProjectDescriptor | None = None) -> Path:
        try:
            return self._create(options, current_project)
        except CreationFailure:
            raise
        except Exception as error:
            raise CreationFailure(error) from error

    def _create(self, options: ArchetypeOptions, current_project: ProjectDescriptor | None) -> Path:
        if options.property_file is not None:
            try:
                options.property_file.parent.mkdir(parents=True, exist_ok=True)
            except OSError as error:
                logger.debug("Cannot create property file directory %s: %s", options.property_file.parent, error)

        project = resolve_source_project(
            options.source_directory,
            current_project,
            self.loader,
            options.local_repository,
        )
        logger.debug("Creating archetype from %s", project.coordinates)

        persisted = load_property_file(options.property_file)
        dimensions = resolve_dimensions(
            languages=options.languages,
            filtered_extensions=options.filtered_extensions,
            excluded_extensions=options.excluded_extensions,
            properties=persisted,
        )

        properties = self.configurator.configure(
            project,
            options.interactive,
            options.execution_properties,
            options.property_file,
            dimensions.languages,
        )

        output_directory = options.output_directory_for(project)
        request = build_creation_request(
            project=project,
            interactive=options.interactive,
            properties=properties,
            dimensions=dimensions,
            options=options,
            output_directory=output_directory,
        )

        result = self.engine.create_archetype(request)
        if result.cause is not None:
            raise CreationFailure(result.cause) from result.cause

        logger.info("Archetype created in %s", output_directory)

        if options.test_mode:
            # No post-creation hook is defined for test mode yet.
            logger.debug("Test mode enabled; nothing to run after creation")

        return output_directory
