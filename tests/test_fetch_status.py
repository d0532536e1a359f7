# tests/test_fetch_status.py

from __future__ import annotations

import json
from pathlib import Path

from todolist.tasks.fetch_status import FetchStatusStore


def test_defaults_to_false_when_file_missing(tmp_path: Path) -> None:
    assert FetchStatusStore(tmp_path / "fetch_status.json").get_fetch_status() is False


def test_set_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "fetch_status.json"
    FetchStatusStore(path).set_fetch_status(True)

    assert json.loads(path.read_text("utf-8")) == {"has_fetched_data": True}
    assert FetchStatusStore(path).get_fetch_status() is True
    assert not path.with_suffix(".tmp").exists()


def test_corrupt_file_reads_as_false(tmp_path: Path) -> None:
    path = tmp_path / "fetch_status.json"
    path.write_text("{not json", "utf-8")
    assert FetchStatusStore(path).get_fetch_status() is False
