from __future__ import annotations

from pathlib import Path

DESCRIPTOR_FILE = "pom.xml"
MANIFEST_FILE = "archetype-request.yml"

ARCHETYPE_LANGUAGES = "archetype.languages"
ARCHETYPE_FILTERED_EXTENSIONS = "archetype.filteredExtensions"
ARCHETYPE_EXCLUDED_EXTENSIONS = "archetype.excludedExtensions"

DEFAULT_LANGUAGES = ("java", "groovy", "csharp", "aspectj")
DEFAULT_FILTERED_EXTENSIONS = (
    "java",
    "xml",
    "txt",
    "groovy",
    "cs",
    "mdo",
    "aj",
    "jsp",
    "gsp",
    "vm",
    "html",
    "xhtml",
    "properties",
    ".classpath",
    ".project",
)
DEFAULT_EXCLUDED_EXTENSIONS: tuple[str, ...] = ()

REQUIRED_PROPERTIES = (
    "archetype.groupId",
    "archetype.artifactId",
    "archetype.version",
    "groupId",
    "artifactId",
    "version",
    "package",
)

DEFAULT_ENCODING = "UTF-8"
DEFAULT_POST_PHASE = "package"


def m2_root() -> Path:
    return Path.home() / ".m2"


def default_registry_file() -> Path:
    return m2_root() / "archetype.xml"


def default_local_repository() -> Path:
    return m2_root() / "repository"
