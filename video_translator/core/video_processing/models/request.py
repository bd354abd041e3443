"""
Function request schemas.

Bodies accepted by the process-video and extract-audio functions. Field
names on the wire are camelCase.

Dependencies: pydantic
System role: Data validation and contract definition
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtractAudioRequest(BaseModel):
    """Body of an extract-audio invocation."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "jobId": "550e8400-e29b-41d4-a716-446655440000",
                "filePath": "videos/550e8400-e29b-41d4-a716-446655440000.mp4",
            }
        },
    )

    job_id: str = Field(..., alias="jobId", description="Job record ID (UUID)")
    file_path: str = Field(..., alias="filePath", min_length=1, description="Video object key")

    @field_validator("job_id")
    @classmethod
    def _job_id_is_uuid(cls, value: str) -> str:
        return str(uuid.UUID(value))


class ProcessVideoRequest(ExtractAudioRequest):
    """Body of a process-video invocation."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "jobId": "550e8400-e29b-41d4-a716-446655440000",
                "filePath": "videos/550e8400-e29b-41d4-a716-446655440000.mp4",
                "targetLanguage": "en",
            }
        },
    )

    target_language: str = Field(
        ..., alias="targetLanguage", min_length=2, description="ISO code to translate into"
    )
