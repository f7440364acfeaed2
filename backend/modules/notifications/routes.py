"""
Real-time post channel endpoints.

Two transports attach observers to the same notifier:
- WebSocket at /socket, messages ``{"event": "posts", "data": {...}}``
- Server-Sent Events at /feed/events, event name ``posts``

Both are public; reads need no authentication.
"""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends, WebSocket
from sse_starlette.sse import EventSourceResponse

from api.dependencies import get_post_notifier

from .notifier import POSTS_CHANNEL, Observer, PostNotifier

logger = logging.getLogger(__name__)

router = APIRouter()


async def _forward(websocket: WebSocket, observer: Observer) -> None:
    """Push queued events to one WebSocket client until cancelled."""
    while True:
        message = await observer.next_message()
        await websocket.send_json({"event": POSTS_CHANNEL, "data": message})


async def _stop_sender(sender: asyncio.Task) -> None:
    """Cancel the forwarding task and collect its outcome."""
    sender.cancel()
    try:
        await sender
    except asyncio.CancelledError:
        pass
    except Exception as exc:
        # Sending to a closed socket fails once the client has gone
        logger.debug("WebSocket sender stopped: %s", exc)


@router.websocket("/socket")
async def posts_socket(
    websocket: WebSocket,
    notifier: PostNotifier = Depends(get_post_notifier),
) -> None:
    """
    Subscribe to post changes over a WebSocket.

    The connection is receive-only from the client's perspective; anything
    the client sends is ignored.
    """
    observer = notifier.subscribe()
    sender = None
    try:
        await websocket.accept()
        sender = asyncio.create_task(_forward(websocket, observer))
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        notifier.unsubscribe(observer)
        if sender is not None:
            await _stop_sender(sender)


async def event_generator(notifier: PostNotifier):
    """
    Generate SSE events for the posts channel.

    Yields events in the format:
        event: posts
        data: {"action": "...", "post": ...}
    """
    observer = notifier.subscribe()
    try:
        while True:
            message = await observer.next_message()
            yield {"event": POSTS_CHANNEL, "data": json.dumps(message)}
    finally:
        notifier.unsubscribe(observer)


@router.get("/feed/events")
async def stream_post_events(
    notifier: PostNotifier = Depends(get_post_notifier),
):
    """Subscribe to post changes via SSE."""
    return EventSourceResponse(
        event_generator(notifier),
        media_type="text/event-stream",
    )
