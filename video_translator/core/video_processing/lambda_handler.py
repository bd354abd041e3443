"""
Lambda handlers for the processing backend.

Entry points for deploying process-video and extract-audio behind a
Lambda function URL or API Gateway proxy integration.

Environment variables:
- OPENAI_API_KEY, GOOGLE_TRANSLATE_API_KEY, ELEVENLABS_API_KEY: Provider credentials
- STORAGE_BUCKET: Bucket holding videos, audio and generated speech
- DATABASE_URL: Async SQLAlchemy URL of the transcriptions database
- LOG_LEVEL: Logging level

Dependencies: function_handler, entrypoint, lambda_utils
System role: Lambda entry point for video processing
"""

import asyncio
import json
import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

# Load environment variables from .env if present
load_dotenv()

from video_translator.core.exceptions import ConfigurationError
from video_translator.core.video_processing.configs import get_processing_settings
from video_translator.core.video_processing.entrypoint import VideoPipeline
from video_translator.core.video_processing.function_handler import (
    CORS_HEADERS,
    FunctionResponse,
    handle_extract_audio,
    handle_process_video,
    preflight_response,
)
from video_translator.core.video_processing.lambda_utils.config import validate_environment
from video_translator.core.video_processing.lambda_utils.event_parser import extract_http_request
from video_translator.core.video_processing.lambda_utils.status_manager import DatabaseStatusReporter

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))


def _to_lambda_response(response: FunctionResponse) -> Dict[str, Any]:
    if isinstance(response.body, str):
        return {"statusCode": response.status_code, "headers": CORS_HEADERS, "body": response.body}
    return {
        "statusCode": response.status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(response.body),
    }


def _get_pipeline() -> VideoPipeline:
    # Built once per container and reused across invocations
    if not hasattr(_get_pipeline, "_pipeline"):
        _get_pipeline._pipeline = VideoPipeline.from_settings()
    return _get_pipeline._pipeline


async def _process_video(body: str | None) -> FunctionResponse:
    # One engine per invocation: each asyncio.run() call gets a fresh event loop
    engine = create_async_engine(get_processing_settings().database_url, pool_pre_ping=True)
    try:
        reporter = DatabaseStatusReporter(async_sessionmaker(bind=engine, expire_on_commit=False))
        return await handle_process_video(body, _get_pipeline(), reporter)
    finally:
        await engine.dispose()


def _startup_failure() -> Dict[str, Any] | None:
    try:
        validate_environment()
    except ConfigurationError as e:
        logger.error(f"{__name__}:_startup_failure - ConfigurationError: {e.message}")
        return _to_lambda_response(FunctionResponse(500, {"error": e.message}))
    return None


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for process-video.

    Args:
        event: HTTP proxy event
        context: Lambda context object

    Returns:
        Dict with statusCode, headers and JSON body
    """
    method, body = extract_http_request(event)
    if method == "OPTIONS":
        return _to_lambda_response(preflight_response())

    failure = _startup_failure()
    if failure is not None:
        return failure

    return _to_lambda_response(asyncio.run(_process_video(body)))


def extract_audio_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda handler for extract-audio."""
    method, body = extract_http_request(event)
    if method == "OPTIONS":
        return _to_lambda_response(preflight_response())

    failure = _startup_failure()
    if failure is not None:
        return failure

    return _to_lambda_response(asyncio.run(handle_extract_audio(body, _get_pipeline())))
