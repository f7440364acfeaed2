"""Tests for modules/notifications/notifier.py."""

import pytest

from modules.notifications.notifier import (
    POSTS_CHANNEL,
    PostAction,
    PostNotifier,
    get_notifier,
    init_notifier,
    reset_notifier,
)
from shared.exceptions import NotInitializedError


class TestPostNotifier:
    def test_publish_without_observers_is_noop(self):
        notifier = PostNotifier()
        assert notifier.publish(PostAction.CREATE, {"_id": "p1"}) == 0

    @pytest.mark.asyncio
    async def test_fans_out_to_every_observer(self):
        notifier = PostNotifier()
        first = notifier.subscribe()
        second = notifier.subscribe()

        delivered = notifier.publish(PostAction.DELETE, "p1")

        assert delivered == 2
        assert await first.next_message() == {"action": "delete", "post": "p1"}
        assert await second.next_message() == {"action": "delete", "post": "p1"}

    def test_late_observer_misses_earlier_events(self):
        notifier = PostNotifier()
        notifier.publish(PostAction.CREATE, {"_id": "p1"})

        observer = notifier.subscribe()

        assert observer.pending == 0

    def test_unsubscribed_observer_receives_nothing(self):
        notifier = PostNotifier()
        observer = notifier.subscribe()
        notifier.unsubscribe(observer)

        notifier.publish(PostAction.UPDATE, {"_id": "p1"})

        assert observer.pending == 0
        assert notifier.observer_count == 0

    def test_unsubscribe_twice_is_harmless(self):
        notifier = PostNotifier()
        observer = notifier.subscribe()
        notifier.unsubscribe(observer)
        notifier.unsubscribe(observer)

    def test_full_observer_drops_without_blocking_others(self):
        notifier = PostNotifier(max_pending=1)
        slow = notifier.subscribe()
        notifier.publish(PostAction.CREATE, {"_id": "p1"})
        fast = notifier.subscribe()

        delivered = notifier.publish(PostAction.CREATE, {"_id": "p2"})

        assert delivered == 1
        assert slow.pending == 1
        assert fast.pending == 1

    def test_accepts_action_strings(self):
        notifier = PostNotifier()
        observer = notifier.subscribe()
        notifier.publish("update", {"_id": "p1"})
        assert observer.pending == 1

    def test_single_channel(self):
        assert PostNotifier().channel == POSTS_CHANNEL == "posts"


class TestNotifierLifecycle:
    def test_get_before_init_fails(self):
        reset_notifier()
        with pytest.raises(NotInitializedError):
            get_notifier()

    def test_init_once(self):
        first = init_notifier()
        second = init_notifier()
        assert first is second
        assert get_notifier() is first

    def test_reset(self):
        init_notifier()
        reset_notifier()
        with pytest.raises(NotInitializedError):
            get_notifier()
