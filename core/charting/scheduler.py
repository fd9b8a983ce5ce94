"""Deferred task scheduling for work that must run after the current event.

The rendering engine fires some callbacks (notably legend clicks) before it
has applied their effect. Handlers push follow-up work through a Scheduler so
it runs once the current synchronous handling has unwound.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

Task = Callable[[], None]


class Scheduler(Protocol):
    """Accepts fire-and-forget tasks to run after the current event."""

    def schedule(self, task: Task) -> None: ...


class TaskQueue:
    """Explicit FIFO queue flushed by the host after each event.

    Tasks scheduled while the queue is flushing run in the same flush, after
    the tasks already queued.
    """

    def __init__(self) -> None:
        self._tasks: deque[Task] = deque()

    def __len__(self) -> int:
        return len(self._tasks)

    def schedule(self, task: Task) -> None:
        self._tasks.append(task)

    def flush(self) -> int:
        """Run queued tasks in order until the queue is empty.

        Returns:
            Number of tasks executed.

        Exceptions raised by a task propagate; tasks queued behind it stay
        queued for the next flush.
        """

        executed = 0
        while self._tasks:
            task = self._tasks.popleft()
            task()
            executed += 1
        if executed:
            logger.debug("Flushed %d deferred task(s)", executed)
        return executed


class LoopScheduler:
    """Schedules tasks on an asyncio event loop via `call_soon`."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, task: Task) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(task)
