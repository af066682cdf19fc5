"""
LLM abstraction for the design bridge: thin wrapper around OpenAI chat completions.
"""
from typing import Optional

import openai
from pydantic import BaseModel, ConfigDict

from design_bridge.config import DEFAULT_MODEL_NAME, Settings, get_settings

# Fixed sampling parameters for every forwarded prompt.
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 512


class LLMConfig(BaseModel):
    """Explicit upstream configuration passed to each client instead of module-level key state."""
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL_NAME
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    base_url: Optional[str] = None


def load_llm_config(settings: Optional[Settings] = None) -> LLMConfig:
    """Read the LLM configuration from the environment at call time."""
    settings = settings or get_settings()
    return LLMConfig(
        api_key=settings.openai_api_key,
        model=settings.openai_model_name,
        base_url=settings.openai_base_url,
    )


class LLMClient:
    """Simple wrapper for OpenAI's chat completions API."""
    def __init__(self, config: LLMConfig):
        self.config = config
        self._client = openai.AsyncOpenAI(api_key=config.api_key, base_url=config.base_url)

    async def complete(self, prompt: str, system: Optional[str] = None, **openai_kwargs) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        params = {
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
            **openai_kwargs,
        }
        response = await self._client.chat.completions.create(
            model=self.config.model,
            messages=messages,
            **params,
        )
        choices = response.choices or []
        if not choices:
            return ""
        return choices[0].message.content or ""

    async def close(self) -> None:
        await self._client.close()
