"""
Upload helpers.

Dependencies: fastapi, video_translator.core.stage_driver
System role: Convert multipart uploads to submission metadata
"""

from fastapi import HTTPException, UploadFile, status

from video_translator.core.stage_driver import VideoFile
from video_translator.models.language import SUPPORTED_LANGUAGES


def to_video_file(upload: UploadFile) -> VideoFile:
    """Metadata of an uploaded file; the content itself is not read."""
    size = upload.size
    if size is None:
        upload.file.seek(0, 2)
        size = upload.file.tell()
        upload.file.seek(0)
    return VideoFile(name=upload.filename or "", content_type=upload.content_type, size=size)


def require_supported_language(code: str) -> str:
    """
    Raises:
        HTTPException(400): Unknown target language
    """
    if code not in SUPPORTED_LANGUAGES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported target language: {code}",
        )
    return code
