from pathlib import Path

import pytest

from archekit.properties import ConfigurationError, PropertyFileError, load_property_file


def test_missing_file_gives_empty_bag(tmp_path: Path):
    assert dict(load_property_file(tmp_path / "missing.yml")) == {}
    assert dict(load_property_file(None)) == {}


def test_values_are_strings(tmp_path: Path):
    path = tmp_path / "archetype.yml"
    path.write_text("archetype.languages: java,groovy\nversion: 1.0\nempty:\n", encoding="utf-8")

    properties = load_property_file(path)

    assert properties["archetype.languages"] == "java,groovy"
    assert properties["version"] == "1.0"
    assert properties["empty"] == ""


def test_bag_is_read_only(tmp_path: Path):
    path = tmp_path / "archetype.yml"
    path.write_text("groupId: com.example\n", encoding="utf-8")

    properties = load_property_file(path)

    with pytest.raises(TypeError):
        properties["groupId"] = "other"  # type: ignore[index]


def test_non_mapping_is_rejected(tmp_path: Path):
    path = tmp_path / "archetype.yml"
    path.write_text("- java\n- groovy\n", encoding="utf-8")

    with pytest.raises(PropertyFileError):
        load_property_file(path)


def test_malformed_yaml_is_a_configuration_error(tmp_path: Path):
    path = tmp_path / "archetype.yml"
    path.write_text("key: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_property_file(path)


def test_scalars_are_kept_as_written(tmp_path: Path):
    path = tmp_path / "archetype.yml"
    path.write_text("version: 1.10\nx: 010\npackage: on\n", encoding="utf-8")

    properties = load_property_file(path)

    assert properties["version"] == "1.10"
    assert properties["x"] == "010"
    assert properties["package"] == "on"
