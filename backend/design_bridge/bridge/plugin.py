from __future__ import annotations

# --- design_bridge/bridge/plugin.py ---
# Message bridge between the plugin UI and the host runtime.  The UI posts two
# kinds of messages:
#
#   {"type": "render", "json": "<scene JSON text>"}   build the scene into a new frame
#   {"type": "save"}                                   post the current selection to the store
#
# Anything else is ignored.  Messages are processed strictly one at a time per
# bridge so a second render cannot interleave with the frame a first render is
# still filling.

import asyncio
from typing import Any, Dict, Optional

import httpx
import structlog

from design_bridge.exceptions import HostContractError, SceneInputError, UpstreamError
from design_bridge.host import DesignHost, FrameNode
from design_bridge.scene.builder import build_scene
from design_bridge.scene.models import dump_scene, parse_scene
from design_bridge.scene.serializer import serialize_nodes
from design_bridge.services.scene_store_client import SceneStoreClient

log = structlog.get_logger(__name__)

RENDER_FRAME_NAME = "Generated scene"


class PluginBridge:
    """Dispatches plugin UI messages onto a ``DesignHost``."""

    def __init__(self, host: DesignHost, store_client: Optional[SceneStoreClient] = None) -> None:
        self.host = host
        self.store_client = store_client
        self.state = "idle"
        self._lock = asyncio.Lock()

    async def handle_message(self, message: Any) -> Any:
        """Process one UI message; returns the render frame or the save response, else ``None``."""
        if not isinstance(message, dict):
            log.warning("plugin_message_ignored", reason="not_an_object")
            return None

        msg_type = message.get("type")
        if msg_type == "render":
            handler = self._render
        elif msg_type == "save":
            handler = self._save
        else:
            log.debug("plugin_message_ignored", msg_type=msg_type)
            return None

        async with self._lock:
            self.state = "processing"
            try:
                return await handler(message)
            finally:
                self.state = "idle"

    # ------------------------------------------------------------------ #
    # Handlers
    # ------------------------------------------------------------------ #

    async def _render(self, message: Dict[str, Any]) -> Optional[FrameNode]:
        frame = self.host.create_frame()
        frame.name = RENDER_FRAME_NAME
        try:
            scene = parse_scene(message.get("json"))
            await build_scene(self.host, scene, frame)
        except (SceneInputError, HostContractError) as exc:
            frame.remove()
            log.error("render_failed", error=str(exc))
            self.host.notify(f"Could not render scene: {exc}", error=True)
            return None

        self.host.current_page.append_child(frame)
        self.host.scroll_and_zoom_into_view([frame])
        log.info("render_completed", frame_id=frame.id, top_level=len(frame.children))
        return frame

    async def _save(self, message: Dict[str, Any]) -> Any:
        selection = list(self.host.current_page.selection)
        if not selection:
            self.host.notify("Select at least one layer to save", error=True)
            return None
        if self.store_client is None:
            self.host.notify("No scene store is configured", error=True)
            return None

        try:
            scene = dump_scene(serialize_nodes(selection))
        except SceneInputError as exc:
            log.error("save_failed", reason="serialize", error=str(exc))
            self.host.notify(f"Could not save selection: {exc}", error=True)
            return None

        try:
            response = await self.store_client.save_scene(scene)
        except (httpx.HTTPError, UpstreamError) as exc:
            log.error("save_failed", reason="store", error=str(exc))
            self.host.notify(f"Saving failed: {exc}", error=True)
            return None

        log.info("save_completed", nodes=len(scene), response=response)
        return response
