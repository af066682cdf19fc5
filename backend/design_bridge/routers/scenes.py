"""Scene store endpoint the plugin's save action posts to."""

import logging

from fastapi import APIRouter, HTTPException, status

from design_bridge.api_models import SaveSceneRequest, SaveSceneResponse
from design_bridge.exceptions import SceneInputError
from design_bridge.scene.models import validate_scene

log = logging.getLogger(__name__)

router = APIRouter(tags=["Scenes"])


@router.post("/save-scene", response_model=SaveSceneResponse)
async def save_scene(body: SaveSceneRequest):
    """Validate a serialized scene and acknowledge it."""
    try:
        scene = validate_scene(body.scene)
    except SceneInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    log.info(f"Received scene with {len(scene)} top-level node(s): {[node.name for node in scene]}")
    return SaveSceneResponse(nodes=len(scene))
