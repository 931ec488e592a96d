"""Run blocking collaborator calls off the event loop with a time bound."""

import asyncio
import functools
import logging
from typing import Any, Callable, TypeVar

from botocore.exceptions import ConnectTimeoutError, ReadTimeoutError
from finreels_shared import DependencyError, DependencyTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_remote(
    operation: str,
    error_cls: type[DependencyError],
    timeout_seconds: float,
    fn: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> T:
    """
    Run fn(*args, **kwargs) in a worker thread, bounded by timeout_seconds.

    Any exception from fn is re-raised as error_cls carrying the underlying detail; a
    timeout (ours or the client's) becomes DependencyTimeoutError. No retries. A call
    that outlives the bound keeps running in its thread; its result is discarded.
    """
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(functools.partial(fn, *args, **kwargs)),
            timeout=timeout_seconds,
        )
    except (asyncio.TimeoutError, ConnectTimeoutError, ReadTimeoutError) as e:
        logger.error("%s timed out after %ss", operation, timeout_seconds)
        raise DependencyTimeoutError(operation, timeout_seconds) from e
    except DependencyError:
        raise
    except Exception as e:
        logger.error("%s failed: %s", operation, e)
        raise error_cls(str(e)) from e
