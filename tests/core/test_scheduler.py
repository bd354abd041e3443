"""
Tests for the per-job task scheduler.

System role: Verification of task tracking and cancellation by job id
"""

import asyncio
import uuid

import pytest

from video_translator.core.stage_driver import JobScheduler


async def _forever():
    await asyncio.Event().wait()


class TestJobScheduler:
    @pytest.mark.asyncio
    async def test_wait_returns_after_task_finishes(self):
        scheduler = JobScheduler()
        job_id = uuid.uuid4()
        results = []

        async def work():
            await asyncio.sleep(0)
            results.append("done")

        scheduler.schedule(job_id, work())
        await scheduler.wait(job_id)

        assert results == ["done"]
        assert not scheduler.has_pending(job_id)

    @pytest.mark.asyncio
    async def test_cancel_only_affects_one_job(self):
        # Arrange
        scheduler = JobScheduler()
        first, second = uuid.uuid4(), uuid.uuid4()
        first_task = scheduler.schedule(first, _forever())
        second_task = scheduler.schedule(second, _forever())

        # Act
        cancelled = scheduler.cancel(first)
        await asyncio.sleep(0)

        # Assert
        assert cancelled == 1
        assert first_task.cancelled()
        assert not second_task.done()
        assert scheduler.has_pending(second)

        await scheduler.shutdown()

    @pytest.mark.asyncio
    async def test_cancel_unknown_job_is_noop(self):
        assert JobScheduler().cancel(uuid.uuid4()) == 0

    @pytest.mark.asyncio
    async def test_drain_waits_for_all_jobs(self):
        scheduler = JobScheduler()
        finished = []

        async def work(n):
            for _ in range(n):
                await asyncio.sleep(0)
            finished.append(n)

        for n in (3, 1, 2):
            scheduler.schedule(uuid.uuid4(), work(n))
        await scheduler.drain()

        assert sorted(finished) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_shutdown_cancels_everything(self):
        scheduler = JobScheduler()
        tasks = [scheduler.schedule(uuid.uuid4(), _forever()) for _ in range(3)]

        await scheduler.shutdown()

        assert all(task.cancelled() for task in tasks)

    def test_schedule_requires_running_loop(self):
        coro = _forever()
        with pytest.raises(RuntimeError):
            JobScheduler().schedule(uuid.uuid4(), coro)
        coro.close()
