from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from phonefield.cli import main
from phonefield.config import _ENV_MAP


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PHONEFIELD_CONFIG", raising=False)
    for key in _ENV_MAP:
        monkeypatch.delenv(key, raising=False)


def test_resolve_json() -> None:
    result = CliRunner().invoke(main, ["resolve", "+1 242 555 0100", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["digits"] == "12425550100"
    assert payload["country"]["iso2"] == "bs"


def test_resolve_text() -> None:
    result = CliRunner().invoke(main, ["resolve", "15551234567"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "+1 (555) 123-4567",
        "Country: United States (us, +1)",
    ]


def test_resolve_uses_config(tmp_path: Path) -> None:
    config = tmp_path / "phonefield.yaml"
    config.write_text("catalog:\n  masks:\n    fr: '(...) ..-..-..'\n", encoding="utf-8")
    result = CliRunner().invoke(main, ["resolve", "33123456789", "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "+33 (123) 45-67-89"


def test_catalog_json() -> None:
    result = CliRunner().invoke(main, ["catalog", "--format", "json"])
    assert result.exit_code == 0
    rows = json.loads(result.output)
    assert any(r["iso2"] == "fr" and r["section"] == "countries" for r in rows)


def test_catalog_csv_needs_output(tmp_path: Path) -> None:
    result = CliRunner().invoke(main, ["catalog", "--format", "csv"])
    assert result.exit_code != 0

    out = tmp_path / "catalog.csv"
    result = CliRunner().invoke(main, ["catalog", "--format", "csv", "--output", str(out)])
    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8").startswith("row_index,section,iso2")


def test_check_table() -> None:
    result = CliRunner().invoke(main, ["check-table", "--territories"])
    assert result.exit_code == 0, result.output
    assert result.output.strip().endswith("entries OK")
