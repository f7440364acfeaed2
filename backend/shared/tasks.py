"""
Detached background work.

Side effects that must never delay a response (such as blob cleanup) are
scheduled here and run on the event loop's default executor. Failures are
logged and never propagate to the caller.
"""

import asyncio
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

# Strong references so pending tasks are not garbage collected mid-flight
_pending: set[asyncio.Task] = set()


def fire_and_forget(func: Callable[..., Any], *args: Any, description: str = "") -> asyncio.Task:
    """
    Run a blocking callable in the background without awaiting it.

    Must be called from inside a running event loop.

    Args:
        func: Blocking callable to run in a worker thread
        *args: Positional arguments for func
        description: Human readable label used in failure logs

    Returns:
        The scheduled task (callers normally ignore it)
    """
    label = description or getattr(func, "__name__", "background task")
    task = asyncio.get_running_loop().create_task(asyncio.to_thread(func, *args))
    _pending.add(task)

    def _on_done(done: asyncio.Task) -> None:
        _pending.discard(done)
        if done.cancelled():
            return
        error = done.exception()
        if error is not None:
            logger.warning("Background %s failed: %s", label, error)

    task.add_done_callback(_on_done)
    return task


async def drain_background_tasks() -> None:
    """Wait for all scheduled background work (used at shutdown and in tests)."""
    while _pending:
        await asyncio.gather(*list(_pending), return_exceptions=True)
