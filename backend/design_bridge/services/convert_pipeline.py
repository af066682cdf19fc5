"""design_bridge/services/convert_pipeline.py

Generation pipelines behind ``POST /convert/{promptType}``.

* ``scene``: ask the model for scene JSON and coerce it into a validated scene,
  retrying when the output does not decode or validate.
* ``copy``: plain completion with the copywriting instruction.
"""

import json
import logging
import re
from typing import Any, Dict, List

from design_bridge.exceptions import SceneInputError, UpstreamError
from design_bridge.prompts import COPY_CONVERT_PROMPT, SCENE_CONVERT_PROMPT
from design_bridge.scene.models import dump_scene, validate_scene
from design_bridge.services.prompt_forwarder import PromptForwarder, validate_prompt
from design_bridge.utils.llm_utils import retry_on_json_error

logger = logging.getLogger(__name__)

PROMPT_TYPES = ("scene", "copy")
SCENE_RETRIES = 3
SCENE_RETRY_DELAY = 1.0

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)


def extract_scene_json(text: str) -> Any:
    """Decode the JSON array in a model reply, tolerating markdown fences and stray prose."""
    candidate = text.strip()
    fenced = _FENCE_RE.search(candidate)
    if fenced:
        candidate = fenced.group(1)
    try:
        return json.loads(candidate)
    except json.JSONDecodeError:
        match = re.search(r"\[.*\]", candidate, re.DOTALL)
        if not match:
            raise
        logger.info("Scene reply was not bare JSON; parsed the array found via regex.")
        return json.loads(match.group(0))


async def _generate_scene(forwarder: PromptForwarder, prompt: str) -> List[Any]:
    completion = await forwarder.forward(prompt, system=SCENE_CONVERT_PROMPT)
    return validate_scene(extract_scene_json(completion))


async def run_conversion(forwarder: PromptForwarder, prompt_type: str, prompt: str) -> Dict[str, Any]:
    """Run the pipeline for *prompt_type* and return the response payload."""
    if prompt_type not in PROMPT_TYPES:
        raise KeyError(prompt_type)
    prompt = validate_prompt(prompt)

    if prompt_type == "scene":
        try:
            scene = await retry_on_json_error(_generate_scene, forwarder, prompt, retries=SCENE_RETRIES, delay=SCENE_RETRY_DELAY)
        except (json.JSONDecodeError, SceneInputError) as e:
            raise UpstreamError(f"Model output could not be coerced into a scene: {e}", status_code=500) from e
        return {"scene": dump_scene(scene)}

    completion = await forwarder.forward(prompt, system=COPY_CONVERT_PROMPT)
    return {"completion": completion}
