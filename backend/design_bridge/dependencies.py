# design_bridge/dependencies.py
from fastapi import Depends, HTTPException, status
from fastapi.requests import HTTPConnection

from design_bridge.bridge import PluginBridge
from design_bridge.core.llm import LLMConfig, load_llm_config
from design_bridge.services.prompt_forwarder import PromptForwarder


def get_llm_config() -> LLMConfig:
    """Upstream configuration, read per request so key changes apply without a restart."""
    return load_llm_config()


def get_prompt_forwarder(config: LLMConfig = Depends(get_llm_config)) -> PromptForwarder:
    """FastAPI dependency returning a forwarder bound to the current configuration."""
    return PromptForwarder(config)


def get_plugin_bridge(conn: HTTPConnection) -> PluginBridge:
    """Return the bridge created at startup (see ``api.lifespan``)."""
    bridge = getattr(conn.app.state, "plugin_bridge", None)
    if bridge is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Plugin bridge is not initialised.",
        )
    return bridge
