"""
Request and job context for log records.

Both values live in contextvars, so they follow asyncio tasks: a job task
scheduled while a request is handled keeps that request's id.

Dependencies: contextvars
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)
_job_id: ContextVar[str | None] = ContextVar("job_id", default=None)


def get_correlation_id() -> str | None:
    return _correlation_id.get()


def get_job_id() -> str | None:
    return _job_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation id for the duration of the block.

    Args:
        correlation_id: Id supplied by the caller; a new one is generated if empty

    Yields:
        str: The bound id
    """
    value = correlation_id or uuid.uuid4().hex
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)


@contextmanager
def job_scope(job_id: uuid.UUID | str) -> Iterator[None]:
    """Tag every log record emitted inside the block with `job_id`."""
    token = _job_id.set(str(job_id))
    try:
        yield
    finally:
        _job_id.reset(token)
