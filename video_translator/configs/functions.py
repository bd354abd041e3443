"""
Processing backend invocation settings.

Where the client-side services reach the process-video and extract-audio
functions, and how long they wait for them.

Dependencies: pydantic_settings
System role: Configuration for invoking the processing backend
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FunctionsSettings(BaseSettings):
    """Settings for calling the processing backend functions."""

    model_config = SettingsConfigDict(
        env_prefix="FUNCTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8001/functions/v1",
        description="Base URL of the processing backend functions",
    )
    api_key: str | None = Field(
        default=None,
        description="Bearer token sent to the functions when set",
    )
    timeout_seconds: float = Field(
        default=900.0,
        description="Timeout for a whole process-video invocation",
    )
