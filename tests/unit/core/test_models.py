"""Unit tests for core/models.py"""

from datetime import date, datetime

import pytest

from octopub.core.models import (
    ExportOptions,
    PublishState,
    ScalarValue,
    SequenceValue,
    first_value,
)


def test_first_value_scalar():
    """first_value returns a scalar unchanged."""
    assert first_value(ScalarValue("post")) == "post"


def test_first_value_sequence_takes_first():
    """first_value takes the first element of a sequence."""
    assert first_value(SequenceValue(("a", "b"))) == "a"


@pytest.mark.parametrize("value", [None, SequenceValue(())])
def test_first_value_unset(value):
    """first_value is None for unset fields and empty sequences."""
    assert first_value(value) is None


def test_from_frontmatter_stringifies_yaml_scalars():
    """Booleans, dates and numbers become the strings a user would have typed."""
    opts = ExportOptions.from_frontmatter({
        "published": True,
        "comments": False,
        "date": date(2023, 5, 1),
        "updated": datetime(2023, 5, 1, 10, 30),
        "with-toc": 2,
    })
    assert opts["published"] == ScalarValue("true")
    assert opts["comments"] == ScalarValue("false")
    assert opts["date"] == ScalarValue("2023-05-01")
    assert opts["updated"] == ScalarValue("2023-05-01 10:30:00")
    assert opts["with-toc"] == ScalarValue("2")


def test_from_frontmatter_list_fields_flattened():
    """categories and tags lists become one space-separated scalar."""
    opts = ExportOptions.from_frontmatter({"tags": ["python", "org"], "categories": ["blog"]})
    assert opts["tags"] == ScalarValue("python org")
    assert opts["categories"] == ScalarValue("blog")


def test_from_frontmatter_other_lists_are_sequences():
    """Lists on other fields keep their items as a sequence."""
    opts = ExportOptions.from_frontmatter({"title": ["First", "Second"]})
    assert opts["title"] == SequenceValue(("First", "Second"))


def test_from_frontmatter_normalizes_keys_and_drops_none():
    """Keys are lower-cased with underscores as hyphens; None values are unset."""
    opts = ExportOptions.from_frontmatter({"With_TOC": 3, "lang": None})
    assert "with-toc" in opts
    assert "lang" not in opts


def test_export_options_read_only():
    """ExportOptions does not support item assignment."""
    opts = ExportOptions.from_frontmatter({"title": "x"})
    with pytest.raises(TypeError):
        opts["title"] = ScalarValue("y")


@pytest.mark.parametrize("value,expected", [
    ("true", PublishState.published),
    ("false", PublishState.preview),
    ("", PublishState.preview),
    ("draft", PublishState.preview),
    ("True", PublishState.preview),
    ("true ", PublishState.preview),
])
def test_publish_state_exact_match(value, expected):
    """Only the exact string 'true' counts as published."""
    assert PublishState.parse(value) is expected
