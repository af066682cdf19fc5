import json

import pytest

from design_bridge.exceptions import SceneInputError
from design_bridge.utils.llm_utils import retry_on_json_error


@pytest.mark.asyncio
async def test_returns_first_successful_result():
    attempts = []

    async def _flaky():
        attempts.append(1)
        if len(attempts) < 2:
            raise json.JSONDecodeError("bad", "doc", 0)
        return "ok"

    assert await retry_on_json_error(_flaky, retries=3, delay=0) == "ok"
    assert len(attempts) == 2


@pytest.mark.asyncio
async def test_reraises_last_error_after_all_attempts():
    attempts = []

    async def _always_invalid():
        attempts.append(1)
        raise SceneInputError(f"attempt {len(attempts)}")

    with pytest.raises(SceneInputError, match="attempt 3"):
        await retry_on_json_error(_always_invalid, retries=3, delay=0)


@pytest.mark.asyncio
async def test_other_errors_are_not_retried():
    attempts = []

    async def _boom():
        attempts.append(1)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await retry_on_json_error(_boom, retries=3, delay=0)
    assert len(attempts) == 1


@pytest.mark.asyncio
async def test_retries_must_be_positive():
    async def _noop():
        return None

    with pytest.raises(ValueError):
        await retry_on_json_error(_noop, retries=0)
