# tests/test_orchestrator.py
from __future__ import annotations

"""
orchestrator tests
==================

Does: Check the process-wide index wrappers (accumulating builds, reset) and the
      template function table bound to an explicit index.
"""

import importlib

import pytest

from token_theme_index.indexing.color.token_index import TokenIndex

orch = importlib.import_module("token_theme_index.indexing.orchestrator")

_OPTIONS = [{"id": "c1", "name": "Color Styles"}, {"id": "c2", "name": "Brand Color Styles"}]


def _token(name, hex_, collection="c1", origin=None):
    rec = {
        "name": name,
        "value": {"hex": hex_},
        "propertyValues": {"collection": collection},
        "properties": [{"codeName": "collection", "options": _OPTIONS}],
    }
    if origin:
        rec["origin"] = {"name": origin}
    return rec


DATASET = {
    "k1": {
        "name": "Dark",
        "overriddenTokens": {
            "a": _token("Primary", "#000000"),
            "b": _token("Surface", "#333333"),
        },
    },
    "k2": {
        "name": "Light",
        "overriddenTokens": {
            "a": _token("Primary", "#FFFFFF"),
            "b": _token("Surface", "#333333"),
        },
    },
}


@pytest.fixture(autouse=True)
def fresh_default_index(monkeypatch):
    """Does: Give every test its own process-wide index."""
    monkeypatch.setattr(orch, "_DEFAULT_INDEX", TokenIndex(), raising=True)


def test_default_index_wrappers():
    assert orch.group_tokens_by_name(DATASET) == ""
    assert orch.get_colors_for("Primary", "Light").value.hex == "#FFFFFF"
    assert orch.is_color_themed("Primary") is True
    assert orch.is_color_themed("Surface") is False
    assert orch.get_name_for_color("#333333") == "Surface"
    assert list(orch.get_color_map()) == ["Primary", "Surface"]


def test_builds_accumulate_until_reset():
    orch.group_tokens_by_name(DATASET)
    orch.group_tokens_from_path(
        [_token("Accent", "#ABCDEF", collection="c2", origin="Brand/Accent")],
        "brands/acme/LightUI.json",
        "Acme",
    )
    assert set(orch.get_color_map()) == {"Primary", "Surface", "AcmeBrandAccent"}

    orch.reset_index()
    assert orch.get_color_map() == {}
    assert orch.get_colors_for("Primary", "Dark") is None


def test_get_color_map_is_a_copy():
    orch.group_tokens_by_name(DATASET)
    snapshot = orch.get_color_map()
    snapshot["Primary"].clear()
    assert len(orch.get_color_map()["Primary"]) == 2


def test_get_default_index_is_stable():
    assert orch.get_default_index() is orch.get_default_index()


def test_template_functions_bind_explicit_index():
    own = TokenIndex()
    fns = orch.template_functions(own)
    assert {
        "createDocumentationComment",
        "isColorStylesToken",
        "groupTokensByName",
        "getColorsFor",
        "isColorThemed",
        "getNameForColor",
        "getColorMap",
        "isColorAllowed",
    } <= set(fns)

    assert fns["groupTokensByName"](DATASET) == ""
    assert fns["getColorsFor"]("Primary", "Dark").value.hex == "#000000"
    assert fns["isColorThemed"]("Primary") is True
    assert fns["getNameForColor"]("#333333") == "Surface"
    assert fns["isColorStylesToken"](_token("X", "#000000")) is True
    assert fns["isColorStylesToken"](_token("B", "#000000", collection="c2")) is False
    assert fns["isColorAllowed"]({"name": "Black"}) is False
    assert fns["getTokenGroupIds"]({"tokenIds": ["t"], "childrenIds": ["g"]}) == ["t", "g"]
    assert fns["createDocumentationComment"]("a\nb", "  ") == "/// a\n  /// b"
    # the process-wide index stayed untouched
    assert orch.get_color_map() == {}
