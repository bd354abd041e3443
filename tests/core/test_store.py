"""
Tests for the immutable job store.

System role: Verification of snapshot updates by job id
"""

import uuid

import pytest

from video_translator.core.exceptions import JobNotFoundError
from video_translator.core.job_lifecycle import JobStatus
from video_translator.core.stage_driver.store import (
    JobStore,
    add_job,
    find_job,
    remove_job,
    update_job,
)
from video_translator.models.job import JobRecord


def _record(name: str = "clip.mp4") -> JobRecord:
    return JobRecord(file_name=name, file_size=10, target_language="fr")


class TestPureFunctions:
    def test_add_job_prepends(self):
        first, second = _record("a.mp4"), _record("b.mp4")

        jobs = add_job(add_job((), first), second)

        assert jobs == (second, first)

    def test_update_job_leaves_other_records_untouched(self):
        # Arrange
        first, second = _record("a.mp4"), _record("b.mp4")
        jobs = (second, first)

        # Act
        updated = update_job(jobs, first.id, progress=20)

        # Assert
        assert updated[0] is second
        assert updated[1].progress == 20
        assert jobs[1].progress == 0

    def test_update_job_unknown_id(self):
        with pytest.raises(JobNotFoundError):
            update_job((_record(),), uuid.uuid4(), progress=10)

    def test_remove_job(self):
        record = _record()

        assert remove_job((record,), record.id) == ()
        with pytest.raises(JobNotFoundError):
            remove_job((), record.id)

    def test_find_job(self):
        record = _record()

        assert find_job((record,), record.id) is record
        assert find_job((record,), uuid.uuid4()) is None


class TestJobStore:
    def test_update_returns_current_record(self):
        store = JobStore()
        record = store.add(_record())

        updated = store.update(record.id, status=JobStatus.PROCESSING, progress=0)

        assert updated.status is JobStatus.PROCESSING
        assert store.get(record.id) is updated

    def test_snapshot_is_replaced_not_mutated(self):
        store = JobStore()
        before = store.snapshot

        store.add(_record())

        assert before == ()
        assert len(store.snapshot) == 1

    def test_remove_returns_removed_record(self):
        store = JobStore()
        record = store.add(_record())

        assert store.remove(record.id) is record
        assert store.get(record.id) is None

    def test_subscribers_see_previous_and_current(self):
        # Arrange
        store = JobStore()
        changes = []
        unsubscribe = store.subscribe(lambda previous, current: changes.append((previous, current)))

        # Act
        record = store.add(_record())
        unsubscribe()
        store.remove(record.id)

        # Assert
        assert changes == [((), (record,))]
