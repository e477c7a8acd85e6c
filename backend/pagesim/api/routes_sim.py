from typing import Any, Dict, List

from fastapi import APIRouter, Body, HTTPException

from pagesim.session import (
    compare_session,
    export_session,
    get_last_run,
    get_state,
    jump_session,
    pause_session,
    play_session,
    reset_session,
    restore_last_inputs,
    run_session,
    set_config,
    set_speed,
    share_session,
    step_session,
    tick_session,
    trace_session,
)

router = APIRouter()


@router.get("/health")
def health() -> Dict[str, bool]:
    return {"ok": True}


@router.get("/sim/state")
def sim_state() -> Dict[str, Any]:
    return get_state()


@router.post("/sim/run")
def sim_run(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    try:
        return run_session(payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/step")
def sim_step(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    try:
        return step_session(str(payload.get("direction", "forward")))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/jump")
def sim_jump(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    try:
        return jump_session(payload.get("to", "start"))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/tick")
def sim_tick() -> Dict[str, Any]:
    return tick_session()


@router.post("/sim/play")
def sim_play() -> Dict[str, Any]:
    try:
        return play_session()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/pause")
def sim_pause() -> Dict[str, Any]:
    return pause_session()


@router.post("/sim/speed")
def sim_speed(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    return set_speed(payload.get("speed", "NORMAL"))


@router.post("/sim/reset")
def sim_reset(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    return reset_session(clear=bool(payload.get("clear", False)))


@router.post("/sim/config")
def sim_config(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    try:
        return set_config(payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/compare")
def sim_compare(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    try:
        return compare_session(payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/export")
def sim_export() -> Dict[str, Any]:
    try:
        return export_session()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.get("/sim/share")
def sim_share() -> Dict[str, Any]:
    try:
        return share_session()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.get("/sim/trace")
def sim_trace() -> Dict[str, List[str]]:
    try:
        return {"lines": trace_session()}
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.get("/sim/last")
def sim_last() -> Dict[str, Any]:
    record = get_last_run()
    if record is None:
        raise HTTPException(status_code=404, detail="no saved simulation")
    return record


@router.post("/sim/restore")
def sim_restore() -> Dict[str, Any]:
    try:
        return restore_last_inputs()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
