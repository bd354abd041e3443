"""
Tests for the job error handling decorator.

System role: Verification of exception to HTTP status mapping and its logging
"""

import logging

import pytest
from fastapi import HTTPException

from video_translator.api.routers.router_utils import UNEXPECTED_ERROR_DETAIL, handle_job_errors
from video_translator.core.exceptions import JobNotFoundError, ProcessingError

ERROR_HANDLING_LOGGER = "video_translator.api.routers.router_utils.error_handling"


def _failing(error: Exception):
    @handle_job_errors
    async def delete_transcription():
        raise error

    return delete_transcription


class TestHandleJobErrors:
    @pytest.mark.asyncio
    async def test_not_found_is_404(self, caplog):
        with caplog.at_level(logging.WARNING, logger=ERROR_HANDLING_LOGGER):
            with pytest.raises(HTTPException) as exc_info:
                await _failing(JobNotFoundError("job-1"))()

        assert exc_info.value.status_code == 404
        assert caplog.records[0].getMessage() == f"{ERROR_HANDLING_LOGGER}:delete_transcription - Job not found"

    @pytest.mark.asyncio
    async def test_dependency_failure_is_502(self, caplog):
        with caplog.at_level(logging.ERROR, logger=ERROR_HANDLING_LOGGER):
            with pytest.raises(HTTPException) as exc_info:
                await _failing(ProcessingError("Processing backend unreachable"))()

        assert exc_info.value.status_code == 502
        assert caplog.records[0].getMessage().startswith(f"{ERROR_HANDLING_LOGGER}:delete_transcription - ")

    @pytest.mark.asyncio
    async def test_unexpected_error_hides_details(self, caplog):
        with caplog.at_level(logging.ERROR, logger=ERROR_HANDLING_LOGGER):
            with pytest.raises(HTTPException) as exc_info:
                await _failing(RuntimeError("disk full"))()

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == UNEXPECTED_ERROR_DETAIL
        assert caplog.records[0].getMessage() == (
            f"{ERROR_HANDLING_LOGGER}:delete_transcription - Unexpected error"
        )
