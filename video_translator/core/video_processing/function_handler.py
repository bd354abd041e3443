"""
Function handlers for process-video and extract-audio.

Transport-independent: both the FastAPI app and the Lambda entry point
hand the raw body to these coroutines and send back the returned status
code and payload.

The body is parsed once, before dispatch, so the job id is always known
when a failure has to be written to the job record.

Dependencies: video_translator.core.video_processing
System role: Request/response contract of the processing backend
"""

import logging
from dataclasses import dataclass
from typing import Any

from video_translator.core.exceptions import RequestParseError, VideoTranslatorException
from video_translator.core.video_processing.entrypoint import VideoPipeline
from video_translator.core.video_processing.lambda_utils.event_parser import parse_request
from video_translator.core.video_processing.lambda_utils.status_manager import StatusReporter
from video_translator.core.video_processing.models import (
    ExtractAudioRequest,
    ProcessVideoRequest,
)
from video_translator.observability.correlation import job_scope

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

UNKNOWN_ERROR_MESSAGE = "Unknown error during processing"


@dataclass(frozen=True)
class FunctionResponse:
    status_code: int
    body: Any


def preflight_response() -> FunctionResponse:
    """Answer a CORS preflight."""
    return FunctionResponse(200, "ok")


def error_message(exc: BaseException) -> str:
    """User-facing message for an exception, without debug details."""
    if isinstance(exc, VideoTranslatorException):
        return exc.message
    return str(exc) or UNKNOWN_ERROR_MESSAGE


async def handle_process_video(
    body: str | bytes | dict | None,
    pipeline: VideoPipeline,
    reporter: StatusReporter,
) -> FunctionResponse:
    """
    Process one video end to end.

    Returns:
        200 {"success": true, "audioUrl": ...} on success,
        400 {"error": ...} for a malformed body (nothing persisted),
        500 {"error": ...} on failure (job marked as error)
    """
    try:
        request = parse_request(body, ProcessVideoRequest)
    except RequestParseError as e:
        return FunctionResponse(400, {"error": e.message})

    job_id = request.job_id
    logger.info(
        f"{__name__}:handle_process_video - Processing job",
        extra={"job_id": job_id, "target_language": request.target_language},
    )

    try:
        with job_scope(job_id):
            result = await pipeline.process(request, reporter)
    except Exception as e:
        message = error_message(e)
        logger.error(
            f"{__name__}:handle_process_video - {type(e).__name__}: {message}",
            extra={"job_id": job_id},
        )
        try:
            await reporter.mark_failed(job_id, message)
        except Exception as db_error:
            logger.error(
                f"{__name__}:handle_process_video - Failed to record error: "
                f"{type(db_error).__name__}: {db_error}",
                extra={"job_id": job_id},
            )
        return FunctionResponse(500, {"error": message})

    return FunctionResponse(200, {"success": True, "audioUrl": result.audio_url})


async def handle_extract_audio(
    body: str | bytes | dict | None,
    pipeline: VideoPipeline,
) -> FunctionResponse:
    """
    Extract a video's audio track into storage.

    Returns:
        200 {"success": true, "audioPath": ...} or 400/500 {"error": ...}
    """
    try:
        request = parse_request(body, ExtractAudioRequest)
    except RequestParseError as e:
        return FunctionResponse(400, {"error": e.message})

    try:
        audio_path = await pipeline.extract_audio(request.job_id, request.file_path)
    except Exception as e:
        message = error_message(e)
        logger.error(
            f"{__name__}:handle_extract_audio - {type(e).__name__}: {message}",
            extra={"job_id": request.job_id},
        )
        return FunctionResponse(500, {"error": message})

    return FunctionResponse(200, {"success": True, "audioPath": audio_path})
