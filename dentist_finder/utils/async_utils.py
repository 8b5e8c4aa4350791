"""
Async utility functions for safe execution of coroutines.

Lets the synchronous CLI run the async report pipeline whether or not an
event loop is already running in the calling thread.
"""

import asyncio
import concurrent.futures
from typing import Any, Coroutine


def run_async_safe(coro: Coroutine) -> Any:
    """
    Execute an async coroutine from synchronous code.

    Handles two scenarios:
    1. No event loop is running - runs the coroutine with asyncio.run()
    2. An event loop is already running - runs it in a separate thread

    Args:
        coro: The coroutine to execute

    Returns:
        The result of the coroutine execution
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, coro)
        return future.result()
