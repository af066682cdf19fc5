from __future__ import annotations

# --- design_bridge/routers/plugin_ws.py ---
# WebSocket channel for the plugin UI.  Every text frame is one JSON message
# (``{"type": "render", "json": ...}`` or ``{"type": "save"}``) handed to the
# application's PluginBridge.  Render results are visible on the host document,
# so nothing is sent back; save responses are echoed to the UI.
#
#   Route:  /ws/plugin

import json
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from design_bridge.bridge import PluginBridge
from design_bridge.dependencies import get_plugin_bridge

log = logging.getLogger(__name__)

router = APIRouter(prefix="/ws")


@router.websocket("/plugin")
async def plugin_stream(ws: WebSocket, bridge: PluginBridge = Depends(get_plugin_bridge)):
    await ws.accept()
    log.info("[plugin_ws] Plugin UI connected")

    while True:
        try:
            raw = await ws.receive_text()
        except WebSocketDisconnect:
            break

        try:
            message = json.loads(raw)
        except json.JSONDecodeError as exc:
            log.warning("[plugin_ws] Skipping undecodable frame: %s", exc)
            continue

        result = await bridge.handle_message(message)
        if isinstance(message, dict) and message.get("type") == "save" and result is not None:
            await ws.send_json({"type": "saved", "response": result})

    log.info("[plugin_ws] Plugin UI disconnected")
