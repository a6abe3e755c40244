from pathlib import Path

import pytest

from archekit.descriptor import DescriptorReadError, PomDescriptorLoader, ProjectDescriptor
from archekit.source import resolve_source_project


class RecordingLoader:
    def __init__(self):
        self.calls = []
        self.inner = PomDescriptorLoader()

    def load(self, descriptor_file, local_repository):
        self.calls.append((descriptor_file, local_repository))
        return self.inner.load(descriptor_file, local_repository)


def _current(tmp_path: Path) -> ProjectDescriptor:
    return ProjectDescriptor(group_id="com.current", artifact_id="current", version="1", file=tmp_path / "pom.xml")


def test_without_source_directory_returns_current_project(tmp_path: Path):
    current = _current(tmp_path)
    loader = RecordingLoader()

    assert resolve_source_project(None, current, loader) is current
    assert loader.calls == []


def test_source_directory_wins_over_current_project(pom_writer, tmp_path: Path):
    pom_writer(tmp_path / "other", group_id="org.other", artifact_id="other")
    loader = RecordingLoader()
    repository = tmp_path / "repo"

    project = resolve_source_project(tmp_path / "other", _current(tmp_path), loader, repository)

    assert project.artifact_id == "other"
    assert project.basedir == (tmp_path / "other").resolve()
    assert loader.calls == [(tmp_path / "other" / "pom.xml", repository)]


def test_load_failure_does_not_fall_back(tmp_path: Path):
    (tmp_path / "empty").mkdir()

    with pytest.raises(DescriptorReadError):
        resolve_source_project(tmp_path / "empty", _current(tmp_path), PomDescriptorLoader())


def test_requires_some_project():
    with pytest.raises(ValueError):
        resolve_source_project(None, None, PomDescriptorLoader())
