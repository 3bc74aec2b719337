"""Tests for JSON I/O helpers."""

from __future__ import annotations

from pathlib import Path

from leadscore.io import load_json_file, write_json_atomic, write_text_atomic


def test_write_json_atomic_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "report.json"

    write_json_atomic(path=path, payload={"b": 1, "a": [1, 2]}, temp_prefix=".tmp-", temp_suffix=".json")

    assert load_json_file(path) == {"a": [1, 2], "b": 1}
    assert path.read_text(encoding="utf-8").startswith('{\n  "a"')


def test_write_text_atomic_replaces_existing(tmp_path: Path) -> None:
    path = tmp_path / "issues.csv"
    path.write_text("old", encoding="utf-8")

    write_text_atomic(path=path, content="new\n", temp_prefix=".csv_tmp_", temp_suffix=".csv")

    assert path.read_text(encoding="utf-8") == "new\n"
    assert [p.name for p in tmp_path.iterdir()] == ["issues.csv"]

