"""design_bridge/services/prompt_forwarder.py

Stateless prompt forwarding: validate the prompt, fail fast without an API
key, call the language-model API once and translate upstream failures into the
HTTP status codes the handlers surface (401 / 429 / 500).  No retry, no cache.
"""

import time
from typing import Callable, Optional

import openai
import structlog

from design_bridge.core.llm import LLMClient, LLMConfig
from design_bridge.exceptions import MissingAPIKeyError, PromptValidationError, UpstreamError
from design_bridge.metrics import UPSTREAM_CALLS_TOTAL, UPSTREAM_LATENCY
from design_bridge.prompts import SYSTEM_PROMPT

log = structlog.get_logger(__name__)

ClientFactory = Callable[[LLMConfig], LLMClient]


def validate_prompt(prompt: Optional[str]) -> str:
    if prompt is None or not isinstance(prompt, str) or not prompt.strip():
        raise PromptValidationError("Missing required field 'prompt'")
    return prompt


class PromptForwarder:
    """Forwards one prompt per call to the configured language-model API."""

    def __init__(self, config: LLMConfig, client_factory: ClientFactory = LLMClient) -> None:
        self.config = config
        self.client_factory = client_factory

    async def forward(self, prompt: Optional[str], system: str = SYSTEM_PROMPT) -> str:
        """Return the completion text for *prompt*.

        Raises:
            PromptValidationError: prompt missing or blank (nothing is sent).
            MissingAPIKeyError: no API key configured (nothing is sent).
            UpstreamError: the upstream call failed; ``status_code`` is 401, 429 or 500.
        """
        prompt = validate_prompt(prompt)
        if not self.config.api_key:
            log.warning("prompt_rejected", reason="missing_api_key")
            raise MissingAPIKeyError("OPENAI_API_KEY is not configured")

        model = self.config.model
        client = self.client_factory(self.config)
        started = time.perf_counter()
        try:
            completion = await client.complete(prompt, system=system)
        except openai.AuthenticationError as exc:
            self._record(model, 401)
            log.warning("upstream_auth_failed", model=model, error=str(exc))
            raise UpstreamError("Upstream rejected the API key", status_code=401) from exc
        except openai.RateLimitError as exc:
            self._record(model, 429)
            log.warning("upstream_rate_limited", model=model, error=str(exc))
            raise UpstreamError("Upstream rate limit exceeded", status_code=429) from exc
        except Exception as exc:
            self._record(model, 500)
            log.error("upstream_failed", model=model, error=str(exc), exc_info=True)
            raise UpstreamError(f"Upstream request failed: {exc}", status_code=500) from exc
        finally:
            UPSTREAM_LATENCY.labels(model=model).observe(time.perf_counter() - started)
            close = getattr(client, "close", None)
            if close is not None:
                await close()

        self._record(model, 200)
        log.info("upstream_completed", model=model, prompt_chars=len(prompt), completion_chars=len(completion))
        return completion

    @staticmethod
    def _record(model: str, status: int) -> None:
        UPSTREAM_CALLS_TOTAL.labels(model=model, status=str(status)).inc()
