"""Tests for shared/tasks.py."""

import logging
import threading

import pytest

from shared.tasks import drain_background_tasks, fire_and_forget


class TestFireAndForget:
    @pytest.mark.asyncio
    async def test_runs_callable_in_worker_thread(self):
        calls = []

        def work(value):
            calls.append((value, threading.current_thread() is threading.main_thread()))

        fire_and_forget(work, "x")
        await drain_background_tasks()

        assert calls == [("x", False)]

    @pytest.mark.asyncio
    async def test_failure_is_logged_not_raised(self, caplog):
        def explode():
            raise OSError("bucket unavailable")

        with caplog.at_level(logging.WARNING, logger="shared.tasks"):
            fire_and_forget(explode, description="delete of image a.png")
            await drain_background_tasks()

        assert "delete of image a.png failed" in caplog.text

    @pytest.mark.asyncio
    async def test_drain_with_nothing_pending(self):
        await drain_background_tasks()
