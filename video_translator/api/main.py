"""
FastAPI application for the client API.

Builds the shared stage driver and notification center at startup, wires
middleware and registers the routers under /api/v1.

Dependencies: fastapi, uvicorn, video_translator.api.routers
System role: Client API entry point and server launch
"""

import logging
from contextlib import asynccontextmanager
from typing import Callable

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from video_translator.api import api_router
from video_translator.api.deps import get_service_cache
from video_translator.configs import get_settings
from video_translator.core.stage_driver import (
    CompositeNotifier,
    LoggingNotifier,
    NotificationCenter,
    Notifier,
    StageDriver,
)
from video_translator.observability.logger import configure_logging
from video_translator.observability.middleware import RequestContextMiddleware

logger = logging.getLogger(__name__)

DriverFactory = Callable[[Notifier], StageDriver]


def default_driver_factory(notifier: Notifier) -> StageDriver:
    return StageDriver.from_settings(get_settings().stage_driver, notifier)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup creates the notification center and the stage driver; shutdown
    cancels every pending job task and clears cached clients.
    """
    configure_logging(get_settings().log_level)

    notification_center = NotificationCenter()
    notifier = CompositeNotifier(notification_center, LoggingNotifier())
    driver = app.state.driver_factory(notifier)

    app.state.notification_center = notification_center
    app.state.stage_driver = driver
    logger.info(f"{__name__}:lifespan - Application startup complete: stage driver ready")

    yield

    await driver.shutdown()
    get_service_cache().clear()
    logger.info(f"{__name__}:lifespan - Application shutdown: pending job tasks cancelled")


def create_app(driver_factory: DriverFactory | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        driver_factory: Builds the stage driver from its notifier

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Video Translator API",
        description="Upload videos and receive translated speech audio",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.driver_factory = driver_factory or default_driver_factory

    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "video_translator.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
