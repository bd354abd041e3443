"""
In-memory job store.

The job collection is an immutable snapshot (tuple, newest first). Pure
functions derive the next snapshot from the previous one by job id; the
JobStore holds the current snapshot and tells subscribers about changes.

Dependencies: video_translator.models.job
System role: Single owner of the stage driver's job records
"""

import uuid
from typing import Callable

from video_translator.core.exceptions import JobNotFoundError
from video_translator.models.job import JobRecord

JobSnapshot = tuple[JobRecord, ...]
StoreListener = Callable[[JobSnapshot, JobSnapshot], None]


def add_job(jobs: JobSnapshot, record: JobRecord) -> JobSnapshot:
    return (record, *jobs)


def update_job(jobs: JobSnapshot, job_id: uuid.UUID, **changes) -> JobSnapshot:
    """
    Return a new snapshot with the job `job_id` evolved by `changes`.

    Every other record is carried over as the same object.

    Raises:
        JobNotFoundError: If no job has that id
    """
    found = False
    updated = []
    for job in jobs:
        if job.id == job_id:
            updated.append(job.evolve(**changes))
            found = True
        else:
            updated.append(job)
    if not found:
        raise JobNotFoundError(str(job_id))
    return tuple(updated)


def remove_job(jobs: JobSnapshot, job_id: uuid.UUID) -> JobSnapshot:
    remaining = tuple(job for job in jobs if job.id != job_id)
    if len(remaining) == len(jobs):
        raise JobNotFoundError(str(job_id))
    return remaining


def find_job(jobs: JobSnapshot, job_id: uuid.UUID) -> JobRecord | None:
    return next((job for job in jobs if job.id == job_id), None)


class JobStore:
    """Holds the current job snapshot and notifies listeners on change."""

    def __init__(self, jobs: JobSnapshot = ()) -> None:
        self._jobs: JobSnapshot = tuple(jobs)
        self._listeners: list[StoreListener] = []

    @property
    def snapshot(self) -> JobSnapshot:
        return self._jobs

    def get(self, job_id: uuid.UUID) -> JobRecord | None:
        return find_job(self._jobs, job_id)

    def add(self, record: JobRecord) -> JobRecord:
        self._commit(add_job(self._jobs, record))
        return record

    def update(self, job_id: uuid.UUID, **changes) -> JobRecord:
        self._commit(update_job(self._jobs, job_id, **changes))
        return find_job(self._jobs, job_id)

    def remove(self, job_id: uuid.UUID) -> JobRecord:
        record = find_job(self._jobs, job_id)
        self._commit(remove_job(self._jobs, job_id))
        return record

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """
        Register `listener(previous, current)` for every committed change.

        Returns:
            Callable removing the listener again
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _commit(self, jobs: JobSnapshot) -> None:
        previous, self._jobs = self._jobs, jobs
        for listener in list(self._listeners):
            listener(previous, jobs)
