import logging
from typing import Any, Dict, List, Optional

import httpx

log = logging.getLogger(__name__)


class SceneStoreClient:
    """Minimal async HTTP client for the save-scene endpoint."""

    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.token = token
        self.timeout = timeout
        self._transport = transport

    async def save_scene(self, scene: List[Dict[str, Any]]) -> Any:
        """POST ``{"scene": [...]}`` and return the decoded response body as-is."""
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(self.url, json={"scene": scene}, headers=headers)
            resp.raise_for_status()
            try:
                return resp.json()
            except ValueError:
                log.debug("Save endpoint answered with a non-JSON body (%d bytes)", len(resp.content))
                return resp.text
