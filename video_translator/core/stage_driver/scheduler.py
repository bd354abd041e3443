"""
Per-job task scheduler.

Tracks the asyncio tasks started on behalf of each job so they can be
awaited or cancelled by job id.

Dependencies: asyncio
System role: Cancelable timer/task registry for the stage driver
"""

import asyncio
import logging
import uuid
from typing import Coroutine

logger = logging.getLogger(__name__)


class JobScheduler:
    """Registry of running tasks keyed by job id."""

    def __init__(self) -> None:
        self._tasks: dict[uuid.UUID, set[asyncio.Task]] = {}

    def schedule(self, job_id: uuid.UUID, coro: Coroutine, name: str | None = None) -> asyncio.Task:
        """Start `coro` as a task owned by `job_id`. Requires a running loop."""
        task = asyncio.get_running_loop().create_task(coro, name=name or f"job-{job_id}")
        self._tasks.setdefault(job_id, set()).add(task)
        task.add_done_callback(lambda done: self._discard(job_id, done))
        return task

    def cancel(self, job_id: uuid.UUID) -> int:
        """Cancel every pending task of `job_id`. Returns how many were cancelled."""
        tasks = self._tasks.pop(job_id, set())
        cancelled = 0
        for task in tasks:
            if not task.done():
                task.cancel()
                cancelled += 1
        if cancelled:
            logger.debug(
                f"{__name__}:cancel - Cancelled {cancelled} task(s)",
                extra={"job_id": str(job_id)},
            )
        return cancelled

    def has_pending(self, job_id: uuid.UUID) -> bool:
        return any(not task.done() for task in self._tasks.get(job_id, ()))

    async def wait(self, job_id: uuid.UUID) -> None:
        """Wait until `job_id` has no pending tasks, including ones started meanwhile."""
        while True:
            pending = [task for task in self._tasks.get(job_id, ()) if not task.done()]
            if not pending:
                return
            await asyncio.wait(pending)

    async def drain(self) -> None:
        """Wait until no job has pending tasks."""
        while True:
            pending = [task for task in self._all_tasks() if not task.done()]
            if not pending:
                return
            await asyncio.wait(pending)

    async def shutdown(self) -> None:
        """Cancel all tasks and wait for them to finish."""
        pending = self._all_tasks()
        self._tasks.clear()
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def _all_tasks(self) -> list[asyncio.Task]:
        return [task for tasks in self._tasks.values() for task in tasks]

    def _discard(self, job_id: uuid.UUID, task: asyncio.Task) -> None:
        tasks = self._tasks.get(job_id)
        if tasks is None:
            return
        tasks.discard(task)
        if not tasks:
            del self._tasks[job_id]
