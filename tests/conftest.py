from pathlib import Path

import pytest

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>{group_id}</groupId>
  <artifactId>{artifact_id}</artifactId>
  <version>{version}</version>
</project>
"""


def _write_pom(directory: Path, group_id: str = "com.example", artifact_id: str = "demo", version: str = "1.0") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    pom = directory / "pom.xml"
    pom.write_text(
        POM_TEMPLATE.format(group_id=group_id, artifact_id=artifact_id, version=version),
        encoding="utf-8",
    )
    return pom


@pytest.fixture
def pom_writer():
    return _write_pom


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "demo"
    _write_pom(root)
    package = root / "src" / "main" / "java" / "com" / "example" / "demo"
    package.mkdir(parents=True)
    (package / "App.java").write_text("package com.example.demo;\n", encoding="utf-8")
    return root
