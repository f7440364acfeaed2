"""
Notifications module.

Best-effort fan-out of post changes to connected clients.

Public API:
- PostNotifier: Observer registry and broadcast
- PostAction: create / update / delete
- init_notifier / get_notifier / reset_notifier: Process-wide lifecycle
"""

from .notifier import (
    POSTS_CHANNEL,
    Observer,
    PostAction,
    PostNotifier,
    get_notifier,
    init_notifier,
    reset_notifier,
)

__all__ = [
    "POSTS_CHANNEL",
    "Observer",
    "PostAction",
    "PostNotifier",
    "get_notifier",
    "init_notifier",
    "reset_notifier",
]
