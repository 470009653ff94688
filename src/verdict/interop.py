"""Sync/async bridge.

run_sync executes a coroutine from synchronous code:
    1. No running loop → asyncio.run()
    2. Called from inside a running loop → asyncio.run() on a worker thread
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Coroutine, TypeVar

T = TypeVar("T")


def run_sync(coro: Coroutine[object, object, T]) -> T:
    """Run coroutine to completion from synchronous code.

    Exceptions raised by the coroutine propagate to the caller.

    Example:
        >>> async def answer() -> int:
        ...     return 42
        >>> run_sync(answer())
        42
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    # The running loop can't be re-entered, so the coroutine gets its own loop elsewhere
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="verdict-run-sync") as pool:
        return pool.submit(asyncio.run, coro).result()
