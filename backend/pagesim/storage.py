import json
import os
from typing import Any, Dict, Optional

LAST_RUN_FILE = "last_simulation.json"


def _script_dir() -> str:
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def resolve_data_dir(data_dir: Optional[str] = None) -> str:
    """Explicit argument, then $PAGESIM_DATA_DIR, then backend/data."""
    path = data_dir or os.environ.get("PAGESIM_DATA_DIR") or os.path.join(_script_dir(), "data")
    os.makedirs(path, exist_ok=True)
    return path


def _write_json(path: str, payload: Dict[str, Any]) -> str:
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    os.replace(tmp, path)
    return path


def save_last_run(record: Dict[str, Any], data_dir: Optional[str] = None) -> str:
    return _write_json(os.path.join(resolve_data_dir(data_dir), LAST_RUN_FILE), record)


def load_last_run(data_dir: Optional[str] = None) -> Optional[Dict[str, Any]]:
    path = os.path.join(resolve_data_dir(data_dir), LAST_RUN_FILE)
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def export_filename(record: Dict[str, Any]) -> str:
    return f"simulation-{int(record.get('timestamp', 0))}.json"


def export_result(record: Dict[str, Any], directory: Optional[str] = None) -> str:
    """Write the record as pretty JSON and return the file path."""
    target = resolve_data_dir(directory)
    return _write_json(os.path.join(target, export_filename(record)), record)
