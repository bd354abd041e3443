"""
Helpers for building log `extra` dictionaries from job data.
"""

from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    String form of `value` suitable for a log field.

    Bytes and collections are summarised by size; long text is cut at
    `max_length` so transcripts never flood the log.
    """
    if value is None:
        return "-"
    if isinstance(value, (bytes, bytearray)):
        text = f"<{len(value)} bytes>"
    elif isinstance(value, (list, tuple, set, dict)):
        text = f"<{type(value).__name__} of {len(value)}>"
    else:
        text = str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def job_log_context(job: Any) -> dict[str, str]:
    """
    Standard `extra` fields for a job.

    Accepts a JobRecord or a TranscriptionModel row; both expose the
    same attribute names.
    """
    status = getattr(job, "status", None)
    return {
        "job_id": safe_log_value(getattr(job, "id", None)),
        "file_name": safe_log_value(getattr(job, "file_name", None)),
        "status": safe_log_value(getattr(status, "value", status)),
        "progress": safe_log_value(getattr(job, "progress", None)),
    }
