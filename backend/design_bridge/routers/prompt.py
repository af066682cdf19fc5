from fastapi import APIRouter, Depends

from design_bridge.api_models import PromptRequest, PromptResponse
from design_bridge.dependencies import get_prompt_forwarder
from design_bridge.services.prompt_forwarder import PromptForwarder

router = APIRouter(tags=["Prompt"])


@router.post("/prompt", response_model=PromptResponse)
async def forward_prompt(
    body: PromptRequest,
    forwarder: PromptForwarder = Depends(get_prompt_forwarder),
):
    """Forward a single prompt to the language model and return its completion.

    Validation and upstream failures propagate as ``PromptValidationError`` /
    ``UpstreamError`` and are mapped to 400/401/429/500 by the app's handlers.
    """
    completion = await forwarder.forward(body.prompt)
    return PromptResponse(completion=completion)
