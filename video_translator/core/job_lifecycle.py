"""
Job lifecycle rules.

Defines the job status enum, the forward-only stage ordering and the
checks every writer applies before changing a job's status or progress.

Dependencies: None (pure domain layer)
System role: Single source of truth for legal job transitions
"""

import enum

from video_translator.core.exceptions import InvalidTransitionError


class JobStatus(str, enum.Enum):
    """
    Position of a job in the processing pipeline.

    Stages run strictly forward. ERROR is reachable from any non-terminal
    stage; COMPLETED and ERROR are terminal.
    """

    UPLOADING = "uploading"
    PROCESSING = "processing"
    TRANSCRIBING = "transcribing"
    TRANSLATING = "translating"
    COMPLETED = "completed"
    ERROR = "error"


STAGE_ORDER: tuple[JobStatus, ...] = (
    JobStatus.UPLOADING,
    JobStatus.PROCESSING,
    JobStatus.TRANSCRIBING,
    JobStatus.TRANSLATING,
    JobStatus.COMPLETED,
)

TERMINAL_STATUSES = frozenset({JobStatus.COMPLETED, JobStatus.ERROR})

MIN_PROGRESS = 0
MAX_PROGRESS = 100


def is_terminal(status: JobStatus) -> bool:
    return status in TERMINAL_STATUSES


def next_stage(status: JobStatus) -> JobStatus | None:
    """Return the stage after `status`, or None for terminal statuses."""
    if is_terminal(status):
        return None
    return STAGE_ORDER[STAGE_ORDER.index(status) + 1]


def can_transition(current: JobStatus, requested: JobStatus) -> bool:
    """
    Check whether a job may move from `current` to `requested`.

    Staying in the same non-terminal stage is allowed (progress updates).
    Otherwise only the immediately following stage or ERROR is reachable.
    """
    if is_terminal(current):
        return False
    if requested is JobStatus.ERROR or requested == current:
        return True
    return requested is next_stage(current)


def validate_transition(
    current: JobStatus,
    requested: JobStatus,
    current_progress: int,
    requested_progress: int,
) -> None:
    """
    Raise InvalidTransitionError if the status/progress change is illegal.

    Within a stage progress never decreases. On stage entry any progress
    is accepted.
    """
    if current == requested and is_terminal(current):
        if current_progress != requested_progress:
            raise InvalidTransitionError(current.value, requested.value)
        return
    if current != requested and not can_transition(current, requested):
        raise InvalidTransitionError(current.value, requested.value)
    if current == requested and requested_progress < current_progress:
        raise InvalidTransitionError(
            current.value,
            requested.value,
            details={"progress": f"{current_progress} -> {requested_progress}"},
        )


def allowed_sources(requested: JobStatus) -> frozenset[JobStatus]:
    """Statuses from which a job may move to (or stay in) `requested`."""
    return frozenset(status for status in STAGE_ORDER if can_transition(status, requested))
