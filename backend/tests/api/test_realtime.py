"""
Tests for the real-time post channel (WebSocket and SSE).
"""

import asyncio
import json

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from api import app
from api.dependencies import get_post_service
from modules.notifications.notifier import PostAction, PostNotifier
from modules.notifications.routes import _stop_sender, event_generator
from modules.posts.service import PostService

from tests.conftest import InMemoryPosts, InMemoryUsers, make_user


@pytest.fixture
def posts():
    return InMemoryPosts()


@pytest.fixture
def client(posts, test_settings):
    users = InMemoryUsers(make_user())
    service = PostService(posts, users, MagicMock(), settings=test_settings)
    app.dependency_overrides[get_post_service] = lambda: service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


class TestWebSocket:
    def test_receives_delete_event(self, client, posts, auth_headers):
        post = posts.create(
            {
                "title": "First post",
                "content": "Hello, world",
                "image_url": "https://cdn.test/a.png",
                "image_key": "a.png",
                "creator_id": "user-123",
            },
            creator=None,
        )

        with client.websocket_connect("/socket") as websocket:
            response = client.delete(f"/feed/post/{post.id}", headers=auth_headers)
            assert response.status_code == 200

            message = websocket.receive_json()

        assert message == {"event": "posts", "data": {"action": "delete", "post": post.id}}


class TestSenderShutdown:
    @pytest.mark.asyncio
    async def test_failed_send_is_collected(self):
        async def broken_send():
            raise RuntimeError("socket closed")

        sender = asyncio.create_task(broken_send())
        await asyncio.wait([sender])

        await _stop_sender(sender)

        assert isinstance(sender.exception(), RuntimeError)

    @pytest.mark.asyncio
    async def test_running_sender_is_cancelled(self):
        sender = asyncio.create_task(asyncio.sleep(60))

        await _stop_sender(sender)

        assert sender.cancelled()


class TestServerSentEvents:
    @pytest.mark.asyncio
    async def test_event_generator_formats_events(self):
        notifier = PostNotifier()
        events = event_generator(notifier)

        pending = asyncio.ensure_future(events.__anext__())
        await asyncio.sleep(0)
        assert notifier.observer_count == 1

        notifier.publish(PostAction.CREATE, {"_id": "p1"})
        event = await pending

        assert event["event"] == "posts"
        assert json.loads(event["data"]) == {"action": "create", "post": {"_id": "p1"}}

        await events.aclose()
        assert notifier.observer_count == 0
