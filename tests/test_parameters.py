import pytest

from archekit.parameters import (
    EXCLUDED_EXTENSIONS,
    FILTERED_EXTENSIONS,
    LANGUAGES,
    resolve_dimension,
    resolve_dimensions,
    split_values,
)

DIMENSIONS = [LANGUAGES, FILTERED_EXTENSIONS, EXCLUDED_EXTENSIONS]


def test_split_values_keeps_order():
    assert split_values("a,b,c") == ("a", "b", "c")


def test_split_values_does_not_trim_and_drops_empty_tokens():
    assert split_values(" a,,b ") == (" a", "b ")
    assert split_values("") == ()
    assert split_values(None) == ()
    assert split_values(",,") == ()


@pytest.mark.parametrize("dimension", DIMENSIONS, ids=lambda d: d.name)
def test_override_wins_over_property_file(dimension):
    properties = {dimension.property_key: "from,file"}

    assert resolve_dimension(dimension, "x,y", properties) == ("x", "y")


@pytest.mark.parametrize("dimension", DIMENSIONS, ids=lambda d: d.name)
def test_property_file_wins_over_defaults(dimension):
    properties = {dimension.property_key: "from,file"}

    assert resolve_dimension(dimension, None, properties) == ("from", "file")


@pytest.mark.parametrize("dimension", DIMENSIONS, ids=lambda d: d.name)
def test_empty_override_falls_through(dimension):
    properties = {dimension.property_key: "from,file"}

    assert resolve_dimension(dimension, "", properties) == ("from", "file")
    assert resolve_dimension(dimension, ",", properties) == ("from", "file")


@pytest.mark.parametrize("dimension", DIMENSIONS, ids=lambda d: d.name)
def test_defaults_when_nothing_applies(dimension):
    assert resolve_dimension(dimension) == dimension.defaults
    assert resolve_dimension(dimension, "", {dimension.property_key: ""}) == dimension.defaults
    assert resolve_dimension(dimension, None, {"unrelated": "value"}) == dimension.defaults


def test_default_sequences():
    assert LANGUAGES.defaults == ("java", "groovy", "csharp", "aspectj")
    assert FILTERED_EXTENSIONS.defaults
    assert EXCLUDED_EXTENSIONS.defaults == ()


def test_resolve_dimensions_uses_distinct_keys():
    properties = {
        "archetype.languages": "kotlin",
        "archetype.filteredExtensions": "kt",
        "archetype.excludedExtensions": "class,jar",
    }

    resolved = resolve_dimensions(languages="java,groovy", properties=properties)

    assert resolved.languages == ("java", "groovy")
    assert resolved.filtered_extensions == ("kt",)
    assert resolved.excluded_extensions == ("class", "jar")
