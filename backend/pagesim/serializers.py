import time
from typing import Any, Dict, List, Optional

from replacement import SimulationError, SimulationResult, SimulationStep, run_simulation


def _now_ms() -> int:
    return int(time.time() * 1000)


def _labels(pages: Any) -> List[str]:
    return [str(page) for page in list(pages or [])]


def step_to_state(step: SimulationStep) -> Dict[str, Any]:
    return {
        "frames": _labels(step.frames),
        "pageFault": bool(step.page_fault),
        "referenceIndex": int(step.reference_index),
    }


def step_detail(step: SimulationStep) -> Dict[str, Any]:
    detail = step_to_state(step)
    detail["page"] = str(step.page)
    detail["evicted"] = None if step.evicted is None else str(step.evicted)
    return detail


def reference_text(result: SimulationResult) -> str:
    return " ".join(_labels(result.references))


def to_record(
    result: SimulationResult,
    reference_string: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> Dict[str, Any]:
    """Build the record that is persisted as the last run and written on export."""
    return {
        "timestamp": int(timestamp if timestamp is not None else _now_ms()),
        "algorithm": result.policy,
        "referenceString": reference_string if reference_string is not None else reference_text(result),
        "frameCount": int(result.capacity),
        "pageFaults": int(result.page_faults),
        "hitRatio": float(result.hit_ratio),
        "states": [step_to_state(step) for step in result.steps],
    }


def from_record(record: Dict[str, Any]) -> SimulationResult:
    """Re-run a stored record and make sure it still describes the same outcome."""
    if not isinstance(record, dict):
        raise SimulationError("record must be an object")

    result = run_simulation(
        record.get("referenceString", ""),
        record.get("frameCount"),
        record.get("algorithm", ""),
    )

    stored_faults = record.get("pageFaults")
    if stored_faults is not None and int(stored_faults) != result.page_faults:
        raise SimulationError(
            f"record reports {stored_faults} page faults but the inputs produce {result.page_faults}"
        )
    stored_states = record.get("states")
    if isinstance(stored_states, list) and stored_states:
        if stored_states != [step_to_state(step) for step in result.steps]:
            raise SimulationError("record states do not match its inputs")
    return result


def summary(result: SimulationResult) -> Dict[str, Any]:
    return {
        "algorithm": result.policy,
        "frameCount": int(result.capacity),
        "totalReferences": int(result.total_references),
        "pageFaults": int(result.page_faults),
        "hits": int(result.hits),
        "hitRatio": float(result.hit_ratio),
        "faultRatio": float(result.fault_ratio),
    }


def share_message(result: SimulationResult, reference_string: Optional[str] = None) -> str:
    refs = reference_string if reference_string is not None else reference_text(result)
    lines = [
        "Page Replacement Simulation Results",
        "--------------------------------",
        f"Algorithm: {result.policy}",
        f"Reference String: {refs}",
        f"Frame Count: {result.capacity}",
        f"Page Faults: {result.page_faults}",
        f"Hit Ratio: {result.hit_ratio * 100:.2f}%",
        f"Fault Ratio: {result.fault_ratio * 100:.2f}%",
        "",
        "Generated by Page Replacement Simulator",
    ]
    return "\n".join(lines)


def trace_lines(result: SimulationResult) -> List[str]:
    out: List[str] = []
    for step in result.steps:
        frames = " ".join(_labels(step.frames))
        if step.page_fault:
            evicted_txt = "" if step.evicted is None else f" evict={step.evicted}"
            out.append(f"t={step.reference_index}: ref={step.page} -> FAULT{evicted_txt} frames=[{frames}]")
        else:
            out.append(f"t={step.reference_index}: ref={step.page} -> HIT frames=[{frames}]")
    return out
