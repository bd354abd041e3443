"""
Upload validation.

Checks a submitted file before any job record exists for it.

Dependencies: video_translator.core.exceptions
System role: Gatekeeper for job submission
"""

from dataclasses import dataclass

from video_translator.core.exceptions import FileValidationError

VIDEO_CONTENT_TYPE_PREFIX = "video/"
MAX_UPLOAD_BYTES = 1024 ** 3

NOT_A_VIDEO_MESSAGE = "Only video files are accepted"
FILE_TOO_LARGE_MESSAGE = "File is too large. Maximum size is 1 GB."


@dataclass(frozen=True)
class VideoFile:
    """Metadata of a file offered for translation."""

    name: str
    content_type: str | None
    size: int


def validate_upload(file: VideoFile) -> None:
    """
    Reject files that are not videos or exceed the upload limit.

    Raises:
        FileValidationError: With a user-facing message
    """
    if not (file.content_type or "").startswith(VIDEO_CONTENT_TYPE_PREFIX):
        raise FileValidationError(
            NOT_A_VIDEO_MESSAGE,
            field="content_type",
            file_name=file.name,
            details={"content_type": file.content_type},
        )
    if file.size > MAX_UPLOAD_BYTES:
        raise FileValidationError(
            FILE_TOO_LARGE_MESSAGE,
            field="size",
            file_name=file.name,
            details={"size": file.size, "limit": MAX_UPLOAD_BYTES},
        )
