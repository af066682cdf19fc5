"""Fetch design files from the external design API and validate them against the file schema."""

import logging
from typing import Optional

import httpx

from design_bridge.config import get_settings
from design_bridge.exceptions import MissingAPIKeyError, UpstreamError
from design_bridge.schema.figma_file import FigmaFile, parse_figma_file

log = logging.getLogger(__name__)


async def fetch_figma_file(
    file_id: str,
    token: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FigmaFile:
    """Download file *file_id* and return it validated.

    Raises:
        MissingAPIKeyError: no token given or configured (no request is made).
        UpstreamError: the API answered with a non-200 status or timed out.
        SchemaValidationError: the document does not match the file schema.
    """
    settings = get_settings()
    token = token or settings.figma_api_key
    if not token:
        raise MissingAPIKeyError("FIGMA_API_KEY is not configured")
    base_url = (base_url or settings.figma_api_url).rstrip("/")

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(
                f"{base_url}/files/{file_id}",
                headers={"X-Figma-Token": token},
            )
    except httpx.TimeoutException as exc:
        log.error("[figma_api] Timed out fetching file %s", file_id)
        raise UpstreamError("Design API request timed out", status_code=504) from exc

    if response.status_code != 200:
        log.error("[figma_api] Error fetching file %s: %s %s", file_id, response.status_code, response.text)
        raise UpstreamError(
            f"Design API error {response.status_code}: {response.text}",
            status_code=response.status_code,
        )
    return parse_figma_file(response.json())
