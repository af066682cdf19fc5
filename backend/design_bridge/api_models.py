from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

# --- Request Models ---

class PromptRequest(BaseModel):
    # Optional so a missing prompt is reported as 400 by the handler, not as a schema error.
    prompt: Optional[str] = Field(None, description="Prompt text forwarded to the language model.")

class SaveSceneRequest(BaseModel):
    scene: List[Dict[str, Any]] = Field(..., description="Scene nodes as produced by the plugin serializer.")

# --- Response Models ---

class HealthResponse(BaseModel):
    status: str = "ok"

class PromptResponse(BaseModel):
    completion: str

class SaveSceneResponse(BaseModel):
    status: str = "ok"
    nodes: int = Field(..., description="Number of top-level nodes received.")

# --- Error Response Model ---
class ErrorResponse(BaseModel):
    error_message: str
    error_code: Optional[str] = None
