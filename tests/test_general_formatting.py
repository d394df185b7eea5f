# tests/test_general_formatting.py
"""Tests for the template formatting helpers (doc comments, pretty JSON, ids, filters)."""

from __future__ import annotations

import json
from datetime import date

import pytest

from token_theme_index.indexing.color.types import ColorEntry, ColorStyle, ColorValue
from token_theme_index.indexing.general.formatting import (
    CIRCULAR_MARKER,
    create_documentation_comment,
    current_date_stamp,
    is_color_allowed,
    object_to_pretty_json,
    token_group_ids,
)


# ---------- documentation comments ----------
def test_doc_comment_indents_all_but_first_line():
    out = create_documentation_comment("  first\nsecond\nthird \n", "    ")
    assert out == "/// first\n    /// second\n    /// third"


def test_doc_comment_single_line():
    assert create_documentation_comment("only", "\t") == "/// only"


# ---------- pretty JSON ----------
def test_pretty_json_indents_two_spaces():
    out = object_to_pretty_json({"a": [1, 2]})
    assert out == '{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_pretty_json_marks_cycles():
    node: dict = {"name": "root"}
    node["self"] = node
    node["children"] = [node]
    parsed = json.loads(object_to_pretty_json(node))
    assert parsed == {"name": "root", "self": CIRCULAR_MARKER, "children": [CIRCULAR_MARKER]}


def test_pretty_json_shared_non_cyclic_reference_is_kept():
    shared = {"hex": "#000000"}
    parsed = json.loads(object_to_pretty_json({"a": shared, "b": shared}))
    assert parsed == {"a": shared, "b": shared}


def test_pretty_json_serializes_entries():
    entry = ColorEntry("Dark", ColorValue(hex="#000000"), ColorStyle.COLOR_STYLES, "Primary")
    parsed = json.loads(object_to_pretty_json([entry]))
    assert parsed[0]["theme_id"] == "Dark"
    assert parsed[0]["style"] == "Color Styles"
    assert parsed[0]["value"]["hex"] == "#000000"


# ---------- misc ----------
def test_current_date_stamp():
    assert current_date_stamp(date(2024, 3, 9)) == "2024-03-09"
    assert len(current_date_stamp()) == 10


@pytest.mark.parametrize(
    "group,expected",
    [
        ({"tokenIds": ["t1", "t2"], "childrenIds": ["g1"]}, ["t1", "t2", "g1"]),
        ({"tokenIds": ["t1"]}, ["t1"]),
        ({"tokenIds": "t1", "childrenIds": ["g1"]}, ["g1"]),
        ({}, []),
        (None, []),
    ],
)
def test_token_group_ids(group, expected):
    assert token_group_ids(group) == expected


@pytest.mark.parametrize(
    "color,allowed",
    [
        ({"name": "Black"}, False),
        ({"name": "White"}, False),
        ({"name": "white"}, True),
        ({"name": "Primary"}, True),
    ],
)
def test_is_color_allowed(color, allowed):
    assert is_color_allowed(color) is allowed


def test_is_color_allowed_reads_attributes():
    entry = ColorEntry("Dark", ColorValue(hex="#000000"), ColorStyle.COLOR_STYLES, "Black")
    assert is_color_allowed(entry) is False
    assert is_color_allowed(entry, reserved={"Primary"}) is True
