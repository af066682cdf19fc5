from fastapi import APIRouter

from design_bridge.api_models import HealthResponse

router = APIRouter(tags=["Health"])


@router.post("/healthcheck", response_model=HealthResponse)
async def healthcheck():
    return HealthResponse()
