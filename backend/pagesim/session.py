import time
from threading import Lock
from typing import Any, Dict, List, Optional

from replacement import (
    SimulationResult,
    TimelineCursor,
    compare_policies,
    find_belady_anomalies,
    normalize_policy,
    parse,
    parse_capacity,
    run_simulation,
)

from pagesim.playback import SPEED_MS, Player, normalize_speed
from pagesim.serializers import (
    from_record,
    share_message,
    step_detail,
    summary,
    to_record,
    trace_lines,
)
from pagesim.storage import export_result, load_last_run, save_last_run

DEFAULT_REFERENCE_STRING = "1 2 3 4 1 2 5 1 2 3 4 5"
MAX_EVENT_LOG = 200

_session_lock = Lock()

settings: Dict[str, Any] = {
    "algorithm": "FIFO",
    "reference_string": DEFAULT_REFERENCE_STRING,
    "frame_count": 3,
    "speed": "NORMAL",
    "persist": True,
}
result: Optional[SimulationResult] = None
cursor: Optional[TimelineCursor] = None
player: Optional[Player] = None
last_record: Optional[Dict[str, Any]] = None
event_log: List[str] = []


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _trim_event_log() -> None:
    global event_log
    if len(event_log) > MAX_EVENT_LOG:
        event_log = event_log[-MAX_EVENT_LOG:]


def _log(message: str) -> None:
    event_log.append(message)
    _trim_event_log()


def _pick(data: Dict[str, Any], keys: List[str], default: Any) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _read_inputs(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "reference_string": _pick(data, ["referenceString", "reference_string", "refs"], settings["reference_string"]),
        "frame_count": _pick(data, ["frameCount", "frame_count", "frames"], settings["frame_count"]),
        "algorithm": _pick(data, ["algorithm", "policy", "algo"], settings["algorithm"]),
    }


def _state() -> Dict[str, Any]:
    state: Dict[str, Any] = {
        "settings": dict(settings),
        "speed": settings["speed"],
        "interval_ms": SPEED_MS[settings["speed"]],
        "playing": bool(player.playing) if player is not None else False,
        "index": cursor.index if cursor is not None else 0,
        "total_steps": len(cursor) if cursor is not None else 0,
        "current": None,
        "result": None,
        "states": [],
        "event_log": list(event_log),
    }
    if result is not None and cursor is not None:
        state["current"] = step_detail(cursor.current())
        state["result"] = summary(result)
        state["states"] = list((last_record or {}).get("states", []))
    return state


def _require_run() -> None:
    if cursor is None or result is None:
        raise ValueError("no simulation has been run yet")


def run_session(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    global result, cursor, player, last_record
    data = payload or {}
    with _session_lock:
        inputs = _read_inputs(data)
        try:
            new_result = run_simulation(inputs["reference_string"], inputs["frame_count"], inputs["algorithm"])
        except ValueError as exc:
            _log(f"Rejected run: {exc}")
            raise

        settings["reference_string"] = str(inputs["reference_string"])
        settings["frame_count"] = new_result.capacity
        settings["algorithm"] = new_result.policy
        if "speed" in data:
            settings["speed"] = normalize_speed(data.get("speed"), settings["speed"])

        result = new_result
        cursor = TimelineCursor(result)
        player = Player(cursor, settings["speed"])
        last_record = to_record(result, reference_string=settings["reference_string"])

        if data.get("autoplay", True):
            player.play(_now_ms())
        if settings.get("persist", True):
            try:
                save_last_run(last_record)
            except OSError as exc:
                _log(f"Last run not saved: {exc}")

        _log(
            f"Run algorithm={result.policy} frames={result.capacity} refs={result.total_references} "
            f"faults={result.page_faults} hit_ratio={result.hit_ratio:.4f}"
        )
        return _state()


def step_session(direction: str) -> Dict[str, Any]:
    with _session_lock:
        _require_run()
        key = str(direction or "forward").strip().lower()
        if key in {"forward", "next", "+1"}:
            moved = cursor.step_forward()
        elif key in {"backward", "back", "prev", "-1"}:
            moved = cursor.step_backward()
        else:
            raise ValueError("direction must be forward or backward")
        player.pause()
        if moved:
            _log(f"Step {key} -> index={cursor.index}")
        return _state()


def jump_session(target: Any) -> Dict[str, Any]:
    with _session_lock:
        _require_run()
        key = str(target).strip().lower()
        if key == "start":
            cursor.jump_to_start()
        elif key == "end":
            cursor.jump_to_end()
        else:
            try:
                cursor.jump_to(int(key))
            except ValueError:
                raise ValueError("jump target must be start, end or a step index")
        player.pause()
        _log(f"Jump {key} -> index={cursor.index}")
        return _state()


def tick_session() -> Dict[str, Any]:
    """Advance one step if auto-play is on. Clients call this every interval_ms."""
    with _session_lock:
        if player is None:
            return _state()
        if player.advance():
            _log(f"Tick -> index={cursor.index}")
            if not player.playing:
                _log("Playback reached the last step")
        return _state()


def play_session() -> Dict[str, Any]:
    with _session_lock:
        _require_run()
        player.play(_now_ms())
        _log("Play")
        return _state()


def pause_session() -> Dict[str, Any]:
    with _session_lock:
        if player is not None:
            player.pause()
            _log("Pause")
        return _state()


def set_speed(speed: Any) -> Dict[str, Any]:
    with _session_lock:
        settings["speed"] = normalize_speed(speed, settings["speed"])
        if player is not None:
            player.set_speed(settings["speed"])
        return _state()


def set_config(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Validate and store inputs for the next run without running it."""
    data = payload or {}
    with _session_lock:
        inputs = _read_inputs(data)
        parse(inputs["reference_string"])
        frame_count = parse_capacity(inputs["frame_count"])
        algorithm = normalize_policy(inputs["algorithm"])

        settings["reference_string"] = str(inputs["reference_string"])
        settings["frame_count"] = frame_count
        settings["algorithm"] = algorithm
        settings["speed"] = normalize_speed(data.get("speed", settings["speed"]), settings["speed"])
        if "persist" in data:
            settings["persist"] = bool(data["persist"])
        if player is not None:
            player.set_speed(settings["speed"])

        _log(
            f"Config algorithm={settings['algorithm']} frames={settings['frame_count']} "
            f"speed={settings['speed']}"
        )
        return {"ok": True, "config": dict(settings)}


def reset_session(clear: bool = False) -> Dict[str, Any]:
    global result, cursor, player, last_record, event_log
    with _session_lock:
        if clear or cursor is None:
            result = None
            cursor = None
            player = None
            last_record = None
            event_log = ["Session cleared"]
            return _state()
        cursor.reset()
        player.pause()
        _log("Reset to first step")
        return _state()


def compare_session(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    data = payload or {}
    with _session_lock:
        inputs = _read_inputs(data)
    pages = parse(inputs["reference_string"])
    capacity = parse_capacity(inputs["frame_count"])
    max_capacity = parse_capacity(data.get("max_frames", max(capacity + 1, 2)))
    # Past one frame per reference the fault counts stop changing.
    max_capacity = max(2, min(max_capacity, len(pages) + 1))

    results = compare_policies(pages, capacity)
    anomalies = find_belady_anomalies(pages, max_capacity, "FIFO")
    return {
        "maxFrames": max_capacity,
        "results": [summary(res) for res in results],
        "belady": [
            {"frameCount": frames, "pageFaults": faults, "nextPageFaults": next_faults}
            for frames, faults, next_faults in anomalies
        ],
    }


def export_session() -> Dict[str, Any]:
    """Export the current run into the configured data directory."""
    with _session_lock:
        _require_run()
        path = export_result(last_record)
        _log(f"Exported {path}")
        return {"ok": True, "path": path, "record": dict(last_record)}


def share_session() -> Dict[str, Any]:
    with _session_lock:
        _require_run()
        return {
            "title": "Page Replacement Simulation Results",
            "message": share_message(result, settings["reference_string"]),
        }


def trace_session() -> List[str]:
    with _session_lock:
        _require_run()
        return trace_lines(result)


def get_last_run() -> Optional[Dict[str, Any]]:
    return load_last_run()


def restore_last_inputs() -> Dict[str, Any]:
    """Load the persisted run's inputs into settings; returns the config."""
    record = load_last_run()
    if record is None:
        raise ValueError("no saved simulation")
    restored = from_record(record)
    with _session_lock:
        settings["reference_string"] = str(record["referenceString"])
        settings["frame_count"] = restored.capacity
        settings["algorithm"] = restored.policy
        _log("Restored inputs from last saved simulation")
        return {"ok": True, "config": dict(settings)}


def get_state() -> Dict[str, Any]:
    with _session_lock:
        return _state()


def get_settings() -> Dict[str, Any]:
    with _session_lock:
        return dict(settings)
