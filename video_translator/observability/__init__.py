"""
Logging setup, request/job log context and request middleware.
"""

from video_translator.observability.correlation import correlation_scope, job_scope
from video_translator.observability.logger import configure_logging

__all__ = ["configure_logging", "correlation_scope", "job_scope"]
