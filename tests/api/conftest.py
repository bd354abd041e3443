"""
API test fixtures.

The client app runs with a stage driver built by the test, so timings and
failures are deterministic.
"""

import pytest
from fastapi.testclient import TestClient

from video_translator.api.main import create_app
from video_translator.core.stage_driver import StageDriver, StageTimings, never_fail


def _client_for(timings: StageTimings):
    app = create_app(
        driver_factory=lambda notifier: StageDriver(
            notifier,
            timings=timings,
            failure_policy=never_fail,
        )
    )
    return TestClient(app)


@pytest.fixture
def client():
    """Client whose jobs stay in UPLOADING for the whole test."""
    with _client_for(StageTimings().scaled(1000)) as test_client:
        yield test_client


@pytest.fixture
def fast_client():
    """Client whose jobs complete almost immediately."""
    with _client_for(StageTimings().scaled(0)) as test_client:
        yield test_client


@pytest.fixture
def mp4_upload():
    def _make(name: str = "clip.mp4", content_type: str = "video/mp4", data: bytes = b"\x00" * 1024):
        return ("files", (name, data, content_type))

    return _make
