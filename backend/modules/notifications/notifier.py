"""
Post change notifier.

Fans out post mutation events to every currently connected observer on the
single ``posts`` channel. Delivery is best-effort and at-most-once: nothing
is persisted, nothing is acknowledged, and an observer that connects after
an event never sees it.

Exactly one notifier exists per process. It is created by init_notifier()
during application startup; get_notifier() before that is a configuration
error and raises NotInitializedError.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Optional

from shared.exceptions import NotInitializedError

logger = logging.getLogger(__name__)

POSTS_CHANNEL = "posts"


class PostAction(str, Enum):
    """Kinds of post mutation events."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Observer:
    """
    A connected client's inbox.

    Bounded so one slow client cannot grow memory without limit; events that
    do not fit are dropped for that client only.
    """

    def __init__(self, max_pending: int = 100):
        self._queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue(maxsize=max_pending)

    def offer(self, message: dict[str, Any]) -> bool:
        try:
            self._queue.put_nowait(message)
            return True
        except asyncio.QueueFull:
            return False

    async def next_message(self) -> dict[str, Any]:
        return await self._queue.get()

    @property
    def pending(self) -> int:
        return self._queue.qsize()


class PostNotifier:
    """Registry of live observers plus the broadcast operation."""

    def __init__(self, max_pending: int = 100):
        self._max_pending = max_pending
        self._observers: set[Observer] = set()

    @property
    def channel(self) -> str:
        return POSTS_CHANNEL

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(self) -> Observer:
        observer = Observer(self._max_pending)
        self._observers.add(observer)
        logger.debug("Observer attached (%d connected)", len(self._observers))
        return observer

    def unsubscribe(self, observer: Observer) -> None:
        self._observers.discard(observer)
        logger.debug("Observer detached (%d connected)", len(self._observers))

    def publish(self, action: PostAction, post: Any) -> int:
        """
        Broadcast an event to all connected observers.

        Never blocks and never raises for delivery problems. With no
        observers connected this is a no-op.

        Args:
            action: create, update or delete
            post: Serialized post for create/update, post id for delete

        Returns:
            Number of observers the event was delivered to
        """
        message = {"action": PostAction(action).value, "post": post}
        delivered = 0
        # Snapshot: observers may detach while we iterate
        for observer in list(self._observers):
            if observer.offer(message):
                delivered += 1
            else:
                logger.warning("Dropped %s event for a slow observer", message["action"])
        return delivered


# Process-wide instance
_notifier: Optional[PostNotifier] = None


def init_notifier(max_pending: int = 100) -> PostNotifier:
    """
    Create the process-wide notifier.

    Called once at startup; later calls return the existing instance.
    """
    global _notifier
    if _notifier is None:
        _notifier = PostNotifier(max_pending=max_pending)
        logger.info("Post notifier initialized")
    return _notifier


def get_notifier() -> PostNotifier:
    """
    Get the process-wide notifier.

    Raises:
        NotInitializedError: If init_notifier() has not run
    """
    if _notifier is None:
        raise NotInitializedError("Post notifier")
    return _notifier


def reset_notifier() -> None:
    """Drop the process-wide notifier (for testing and shutdown)."""
    global _notifier
    _notifier = None
