"""Blocking wait over awaitables."""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from collections.abc import Awaitable

logger = logging.getLogger(__name__)

def run_sync[T](handle: Awaitable[T] | concurrent.futures.Future[T]) -> T:
    """
    Block until handle completes, return its result or re-raise its failure.

    - concurrent.futures.Future: waits on .result()
    - asyncio future or task whose loop runs in another thread: waits on
      that loop through run_coroutine_threadsafe()
    - asyncio future or task on an idle loop: drives that loop with
      run_until_complete()
    - anything else (coroutine, LazyCoroResult): runs on a fresh loop via
      asyncio.run()

    No thread is started. Must not be called from inside a running event
    loop: that loop would deadlock waiting on itself, so RuntimeError is
    raised instead.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError("run_sync() cannot block inside a running event loop")

    if isinstance(handle, concurrent.futures.Future):
        return handle.result()

    async def consume() -> T:
        return await handle

    if asyncio.isfuture(handle):
        if handle.done():
            return handle.result()
        loop = handle.get_loop()
        if loop.is_running():
            logger.debug("run_sync: waiting on future %r owned by another thread's loop", handle)
            return asyncio.run_coroutine_threadsafe(consume(), loop).result()
        logger.debug("run_sync: driving pending future %r on its own loop", handle)
        return loop.run_until_complete(handle)

    logger.debug("run_sync: running %r on a fresh event loop", handle)
    return asyncio.run(consume())

__all__ = ("run_sync",)
