import json
import logging
import asyncio
from pydantic import ValidationError

from design_bridge.exceptions import SceneInputError

log = logging.getLogger(__name__)

RETRYABLE_ERRORS = (json.JSONDecodeError, ValidationError, SceneInputError)


async def retry_on_json_error(async_func, *args, retries=3, delay=1.0, **kwargs):
    """
    A wrapper that retries an async function if its output could not be decoded or validated.

    Args:
        async_func: The async function to call.
        *args: Positional arguments for async_func.
        retries: Maximum number of attempts.
        delay: Seconds to wait between attempts.
        **kwargs: Keyword arguments for async_func.

    Returns:
        The result of async_func.

    Raises:
        The last caught exception if all retries fail.
    """
    if retries < 1:
        raise ValueError("retries must be at least 1")

    last_exception = None
    for attempt in range(retries):
        try:
            return await async_func(*args, **kwargs)
        except RETRYABLE_ERRORS as e:
            log.warning(f"Attempt {attempt + 1} of {retries} failed with {type(e).__name__}: {e}. Retrying...")
            last_exception = e
            if attempt + 1 < retries:
                await asyncio.sleep(delay)

    log.error(f"All {retries} retries failed. Re-raising last exception: {last_exception}")
    raise last_exception
