"""
Environment validation for the processing backend.
"""

import logging
import os

from video_translator.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_ENV_VARS = (
    "OPENAI_API_KEY",
    "GOOGLE_TRANSLATE_API_KEY",
    "ELEVENLABS_API_KEY",
    "STORAGE_BUCKET",
    "DATABASE_URL",
)


def validate_environment() -> dict[str, str]:
    """
    Validate required environment variables.

    Returns:
        Dict with the required variables and their values

    Raises:
        ConfigurationError: One or more required variables are missing
    """
    env_config = {}
    missing = []

    for var in REQUIRED_ENV_VARS:
        value = os.getenv(var)
        if not value:
            missing.append(var)
        else:
            env_config[var] = value

    if missing:
        raise ConfigurationError(missing)

    logger.info(f"{__name__}:validate_environment - Environment validated")
    return env_config
