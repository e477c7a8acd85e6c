"""Tests for last-run persistence and export-to-file."""

import json
import os

from pagesim.serializers import to_record
from pagesim.storage import (
    LAST_RUN_FILE,
    export_result,
    load_last_run,
    resolve_data_dir,
    save_last_run,
)
from replacement import run_simulation


def _record():
    return to_record(run_simulation("1 2 3 1", "2", "LRU"), timestamp=42)


def test_load_without_saved_run(tmp_path) -> None:
    assert load_last_run(str(tmp_path)) is None


def test_save_then_load(tmp_path) -> None:
    record = _record()
    path = save_last_run(record, str(tmp_path))
    assert os.path.basename(path) == LAST_RUN_FILE
    assert load_last_run(str(tmp_path)) == record


def test_save_overwrites_previous_run(tmp_path) -> None:
    save_last_run(_record(), str(tmp_path))
    newer = to_record(run_simulation("9 9", "1", "FIFO"), timestamp=43)
    save_last_run(newer, str(tmp_path))
    assert load_last_run(str(tmp_path))["timestamp"] == 43
    assert sorted(os.listdir(tmp_path)) == [LAST_RUN_FILE]


def test_export_writes_pretty_json(tmp_path) -> None:
    record = _record()
    path = export_result(record, str(tmp_path))
    assert os.path.basename(path) == "simulation-42.json"
    with open(path, encoding="utf-8") as f:
        text = f.read()
    assert text.startswith('{\n  "timestamp": 42')
    assert json.loads(text) == record


def test_data_dir_from_environment(data_dir) -> None:
    assert resolve_data_dir() == str(data_dir)
    save_last_run(_record())
    assert (data_dir / LAST_RUN_FILE).exists()


def test_explicit_dir_is_created(tmp_path) -> None:
    target = tmp_path / "nested" / "exports"
    export_result(_record(), str(target))
    assert (target / "simulation-42.json").exists()
