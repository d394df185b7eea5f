import json
import runpy
import sys

import pytest

from token_theme_index.demo import main
from token_theme_index.indexing.general.utils import clear_config_cache

_OPTIONS = [{"id": "c1", "name": "Color Styles"}]


def _token(name, hex_):
    return {
        "name": name,
        "value": {"hex": hex_},
        "propertyValues": {"collection": "c1"},
        "properties": [{"codeName": "collection", "options": _OPTIONS}],
    }


@pytest.fixture
def dataset(tmp_path):
    p = tmp_path / "themes.json"
    p.write_text(
        json.dumps(
            {
                "d": {"name": "Dark", "overriddenTokens": {"p": _token("Primary", "#000000")}},
                "l": {"name": "Light", "overriddenTokens": {"p": _token("Primary", "#FFFFFF"),
                                                          "s": _token("Surface", "#EEEEEE")}},
            }
        ),
        encoding="utf-8",
    )
    return p


def test_smoke_resolve(dataset, capsys):
    assert main([str(dataset), "--name", "Primary", "--theme", "Light"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["entry"]["value"]["hex"] == "#FFFFFF"


def test_smoke_split_and_reverse(dataset, capsys):
    main([str(dataset), "--split"])
    out = json.loads(capsys.readouterr().out)
    assert out == {"themed": ["Primary"], "unthemed": ["Surface"]}

    main([str(dataset), "--hex", "#EEEEEE"])
    assert json.loads(capsys.readouterr().out)["name"] == "Surface"

    main([str(dataset), "--hex", "#eee"])
    assert json.loads(capsys.readouterr().out)["name"] is None

    main([str(dataset), "--hex", "#eee", "--lenient"])
    assert json.loads(capsys.readouterr().out)["name"] == "Surface"


def test_smoke_full_map(dataset, capsys):
    main([str(dataset)])
    out = json.loads(capsys.readouterr().out)
    assert out["report"]["indexed"] == 3
    assert set(out["colors"]) == {"Primary", "Surface"}


def test_smoke_unreadable_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.json")])
    assert exc.value.code == 1
    assert "cannot read" in capsys.readouterr().err


@pytest.mark.parametrize("payload", ['{"dark_theme_id": ""}', "[1, 2]"])
def test_smoke_invalid_settings(dataset, tmp_path, monkeypatch, capsys, payload):
    data = tmp_path / "data"
    data.mkdir()
    (data / "index_settings.json").write_text(payload, encoding="utf-8")
    monkeypatch.setenv("TOKEN_INDEX_DATA_DIR", str(data))
    clear_config_cache()

    with pytest.raises(SystemExit) as exc:
        main([str(dataset)])
    assert exc.value.code == 1
    assert "invalid index settings" in capsys.readouterr().err
    clear_config_cache()


def test_smoke_module_exit_code(dataset, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["tti-demo", str(dataset), "--split"])
    with pytest.raises(SystemExit) as exc:
        runpy.run_module("token_theme_index.demo", run_name="__main__")
    assert exc.value.code == 0
    assert json.loads(capsys.readouterr().out)["themed"] == ["Primary"]
