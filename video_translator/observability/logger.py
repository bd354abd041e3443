"""
Logging setup shared by the client API and the processing backend.

Records go to stdout with the bound correlation and job ids, so one grep
on a job id follows it from upload to the final status write.

Dependencies: logging (stdlib)
"""

import logging
import sys

from video_translator.observability.correlation import get_correlation_id, get_job_id

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [req=%(correlation_id)s job=%(job_id)s] %(message)s"

NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "httpx", "httpcore", "s3transfer")


class ContextFilter(logging.Filter):
    """Fill correlation_id and job_id from context unless passed via `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id() or "-"
        if not getattr(record, "job_id", None):
            record.job_id = get_job_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stdout handler on the root logger.

    Safe to call more than once: previous handlers are replaced.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
