"""design_bridge/config.py

Environment-driven configuration.  Values are read from the process environment
(after loading ``.env``) every time ``get_settings()`` is called, so API keys
rotated at runtime are picked up on the next request and tests can override the
FastAPI dependencies instead of mutating module state.
"""

import logging
import os
from typing import List, Optional

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_MODEL_NAME = "gpt-4o-mini"


class Settings(BaseModel):
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])
    save_scene_url: str = "http://localhost:8000/save-scene"
    figma_api_url: str = "https://api.figma.com/v1"
    figma_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model_name: str = DEFAULT_MODEL_NAME
    openai_base_url: Optional[str] = None
    log_level: str = "INFO"


def _env(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_settings() -> Settings:
    """Build a fresh ``Settings`` snapshot from the environment."""
    origins = _env("ALLOWED_ORIGINS")
    return Settings(
        allowed_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else ["*"],
        save_scene_url=_env("SAVE_SCENE_URL") or Settings.model_fields["save_scene_url"].default,
        figma_api_url=_env("FIGMA_API_URL") or Settings.model_fields["figma_api_url"].default,
        figma_api_key=_env("FIGMA_API_KEY"),
        openai_api_key=_env("OPENAI_API_KEY"),
        openai_model_name=_env("OPENAI_MODEL_NAME") or DEFAULT_MODEL_NAME,
        openai_base_url=_env("OPENAI_BASE_URL"),
        log_level=(_env("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Route stdlib and structlog output through the same level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
    )
