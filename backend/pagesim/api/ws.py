from typing import Any, Dict

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from pagesim.session import (
    get_state,
    jump_session,
    pause_session,
    play_session,
    reset_session,
    run_session,
    set_speed,
    step_session,
    tick_session,
)

router = APIRouter()


async def _send_state(ws: WebSocket) -> None:
    await ws.send_json({"type": "state", "data": get_state()})


@router.websocket("/ws/state")
async def ws_state(websocket: WebSocket) -> None:
    await websocket.accept()
    await _send_state(websocket)

    try:
        while True:
            msg: Dict[str, Any] = await websocket.receive_json()
            mtype = str(msg.get("type", "")).lower()

            try:
                if mtype == "run":
                    payload = dict(msg)
                    payload.pop("type", None)
                    run_session(payload)
                elif mtype == "forward":
                    step_session("forward")
                elif mtype == "backward":
                    step_session("backward")
                elif mtype == "start":
                    jump_session("start")
                elif mtype == "end":
                    jump_session("end")
                elif mtype == "reset":
                    reset_session(clear=bool(msg.get("clear", False)))
                elif mtype == "play":
                    play_session()
                elif mtype == "pause":
                    pause_session()
                elif mtype == "tick":
                    tick_session()
                elif mtype == "set_speed":
                    set_speed(msg.get("speed", "NORMAL"))
            except ValueError as exc:
                await websocket.send_json({"type": "error", "detail": str(exc)})
                continue

            await _send_state(websocket)
    except WebSocketDisconnect:
        return
