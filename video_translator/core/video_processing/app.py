"""
FastAPI application serving the processing backend functions.

Run with: uvicorn video_translator.core.video_processing.app:app --port 8001

Startup fails when a provider credential, the bucket or the database URL
is missing.

Dependencies: fastapi, sqlalchemy, video_translator.core.video_processing
System role: HTTP host for process-video and extract-audio
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from video_translator.boundary.db.connection import get_async_engine, get_async_session_factory
from video_translator.core.video_processing.configs import get_processing_settings
from video_translator.core.video_processing.entrypoint import VideoPipeline
from video_translator.core.video_processing.function_handler import (
    CORS_HEADERS,
    FunctionResponse,
    handle_extract_audio,
    handle_process_video,
)
from video_translator.core.video_processing.lambda_utils.config import validate_environment
from video_translator.core.video_processing.lambda_utils.status_manager import (
    DatabaseStatusReporter,
    StatusReporter,
)
from video_translator.observability.logger import configure_logging
from video_translator.observability.middleware import RequestContextMiddleware

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["functions"])


def get_pipeline(request: Request) -> VideoPipeline:
    return request.app.state.pipeline


def get_status_reporter(request: Request) -> StatusReporter:
    return request.app.state.status_reporter


def _to_http_response(response: FunctionResponse) -> Response:
    if isinstance(response.body, str):
        return PlainTextResponse(response.body, status_code=response.status_code, headers=CORS_HEADERS)
    return JSONResponse(response.body, status_code=response.status_code, headers=CORS_HEADERS)


@router.options("/process-video")
@router.options("/extract-audio")
async def preflight() -> Response:
    """Answer CORS preflight requests permissively."""
    return PlainTextResponse("ok", headers=CORS_HEADERS)


@router.post("/process-video")
async def process_video(
    request: Request,
    pipeline: VideoPipeline = Depends(get_pipeline),
    reporter: StatusReporter = Depends(get_status_reporter),
) -> Response:
    """
    Run extraction, transcription, translation and synthesis for one job.

    Body: {"jobId": str, "filePath": str, "targetLanguage": str}
    """
    body = await request.body()
    return _to_http_response(await handle_process_video(body, pipeline, reporter))


@router.post("/extract-audio")
async def extract_audio(
    request: Request,
    pipeline: VideoPipeline = Depends(get_pipeline),
) -> Response:
    """
    Extract a video's audio track into storage.

    Body: {"jobId": str, "filePath": str}
    """
    body = await request.body()
    return _to_http_response(await handle_extract_audio(body, pipeline))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate configuration and build the pipeline before serving."""
    load_dotenv()
    validate_environment()

    settings = get_processing_settings()
    configure_logging(settings.log_level)
    app.state.pipeline = VideoPipeline.from_settings(settings)
    app.state.status_reporter = DatabaseStatusReporter(
        get_async_session_factory(settings.database_url)
    )
    logger.info(
        f"{__name__}:lifespan - Processing backend ready",
        extra={"bucket": settings.storage_bucket},
    )
    yield
    await get_async_engine(settings.database_url).dispose()


def create_app(use_lifespan: bool = True) -> FastAPI:
    """
    Create the processing backend application.

    Args:
        use_lifespan: Disable to skip configuration checks (tests inject
            pipeline and reporter through dependency overrides)
    """
    app = FastAPI(
        title="Video Translator Functions",
        description="Processing backend: extraction, transcription, translation, synthesis",
        version="1.0.0",
        lifespan=lifespan if use_lifespan else None,
    )
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )
    app.include_router(router)
    return app


app = create_app()
