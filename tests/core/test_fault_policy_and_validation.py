"""
Tests for upload validation and fault injection policies.

System role: Verification of submission gatekeeping and failure decisions
"""

import random

import pytest

from video_translator.core.exceptions import FileValidationError
from video_translator.core.stage_driver import (
    MAX_UPLOAD_BYTES,
    always_fail,
    never_fail,
    probabilistic_failure,
    validate_upload,
)
from video_translator.core.stage_driver.validation import (
    FILE_TOO_LARGE_MESSAGE,
    NOT_A_VIDEO_MESSAGE,
)
from video_translator.models.job import JobRecord


class TestValidateUpload:
    def test_accepts_video(self, video_file):
        validate_upload(video_file())

    def test_accepts_exactly_one_gigabyte(self, video_file):
        validate_upload(video_file(size=MAX_UPLOAD_BYTES))

    def test_rejects_non_video(self, video_file):
        with pytest.raises(FileValidationError) as exc_info:
            validate_upload(video_file(name="doc.pdf", content_type="application/pdf"))

        assert exc_info.value.message == NOT_A_VIDEO_MESSAGE
        assert exc_info.value.details["field"] == "content_type"
        assert exc_info.value.details["file_name"] == "doc.pdf"

    def test_rejects_missing_content_type(self, video_file):
        with pytest.raises(FileValidationError):
            validate_upload(video_file(content_type=None))

    def test_rejects_two_gigabytes(self, video_file):
        with pytest.raises(FileValidationError) as exc_info:
            validate_upload(video_file(size=2 * 1024 ** 3))

        assert exc_info.value.message == FILE_TOO_LARGE_MESSAGE
        assert exc_info.value.details["field"] == "size"


class TestFailurePolicies:
    @pytest.fixture
    def record(self):
        return JobRecord(file_name="clip.mp4", file_size=1, target_language="en")

    def test_fixed_policies(self, record):
        assert never_fail(record) is False
        assert always_fail(record) is True

    def test_probability_bounds(self, record):
        assert probabilistic_failure(0.0)(record) is False
        assert probabilistic_failure(1.0)(record) is True

    def test_seeded_policy_is_reproducible(self, record):
        first = probabilistic_failure(0.5, rng=random.Random(7))
        second = probabilistic_failure(0.5, rng=random.Random(7))

        assert [first(record) for _ in range(20)] == [second(record) for _ in range(20)]

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_rejects_invalid_probability(self, probability):
        with pytest.raises(ValueError):
            probabilistic_failure(probability)
