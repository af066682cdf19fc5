from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from design_bridge.api_models import PromptRequest
from design_bridge.dependencies import get_prompt_forwarder
from design_bridge.services.convert_pipeline import PROMPT_TYPES, run_conversion
from design_bridge.services.prompt_forwarder import PromptForwarder

router = APIRouter(tags=["Convert"])


@router.post("/convert/{prompt_type}")
async def convert(
    prompt_type: str,
    body: PromptRequest,
    forwarder: PromptForwarder = Depends(get_prompt_forwarder),
) -> Dict[str, Any]:
    """Run the generation pipeline named by *prompt_type* (``scene`` or ``copy``)."""
    if prompt_type not in PROMPT_TYPES:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown prompt type '{prompt_type}'. Expected one of: {', '.join(PROMPT_TYPES)}",
        )
    return await run_conversion(forwarder, prompt_type, body.prompt)
