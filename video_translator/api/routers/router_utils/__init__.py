"""
Router utility functions.

Helpers shared by the router endpoints to keep them clean.
"""

from video_translator.api.routers.router_utils.error_handling import (
    UNEXPECTED_ERROR_DETAIL,
    handle_job_errors,
)
from video_translator.api.routers.router_utils.uploads import require_supported_language, to_video_file

__all__ = [
    "UNEXPECTED_ERROR_DETAIL",
    "handle_job_errors",
    "require_supported_language",
    "to_video_file",
]
