"""
Stage driver package.

Exports:
  - StageDriver, StageTimings, BatchSubmission: Job lifecycle driver
  - JobStore: Immutable-snapshot job store
  - JobScheduler: Per-job cancelable task registry
  - FailurePolicy, probabilistic_failure, never_fail, always_fail: Fault injection
  - Notifier, NotificationCenter, LoggingNotifier, CompositeNotifier: Event surface
  - VideoFile, validate_upload: Submission validation
"""

from video_translator.core.stage_driver.driver import (
    SIMULATED_FAILURE_MESSAGE,
    BatchSubmission,
    StageDriver,
    StageTimings,
)
from video_translator.core.stage_driver.fault_policy import (
    FailurePolicy,
    always_fail,
    never_fail,
    probabilistic_failure,
)
from video_translator.core.stage_driver.notifier import (
    CompositeNotifier,
    LoggingNotifier,
    NotificationCenter,
    Notifier,
)
from video_translator.core.stage_driver.scheduler import JobScheduler
from video_translator.core.stage_driver.store import JobStore
from video_translator.core.stage_driver.validation import (
    MAX_UPLOAD_BYTES,
    VideoFile,
    validate_upload,
)

__all__ = [
    "SIMULATED_FAILURE_MESSAGE",
    "BatchSubmission",
    "StageDriver",
    "StageTimings",
    "FailurePolicy",
    "always_fail",
    "never_fail",
    "probabilistic_failure",
    "CompositeNotifier",
    "LoggingNotifier",
    "NotificationCenter",
    "Notifier",
    "JobScheduler",
    "JobStore",
    "MAX_UPLOAD_BYTES",
    "VideoFile",
    "validate_upload",
]
