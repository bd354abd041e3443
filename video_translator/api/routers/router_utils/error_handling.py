"""
Job error handling utilities.

Decorator mapping domain exceptions raised by job endpoints to
HTTPExceptions with consistent logging.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from video_translator.core.exceptions import (
    FileValidationError,
    InvalidTransitionError,
    JobNotFoundError,
    ProcessingError,
    StorageError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again."


def handle_job_errors(func: F) -> F:
    """
    Decorator to turn job-related errors into HTTPExceptions.

    Mapping:
        JobNotFoundError -> 404
        FileValidationError, InvalidTransitionError, ValueError -> 400
        ProcessingError, StorageError -> 502
        anything else -> 500 with a generic message
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except JobNotFoundError as e:
            logger.warning(f"{__name__}:{func.__name__} - Job not found", extra=e.details)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except (FileValidationError, InvalidTransitionError) as e:
            logger.warning(
                f"{__name__}:{func.__name__} - Invalid job request",
                extra={"error": e.message, **e.details},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except ValueError as e:
            logger.warning(f"{__name__}:{func.__name__} - Invalid job request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except (ProcessingError, StorageError) as e:
            logger.error(
                f"{__name__}:{func.__name__} - Job dependency failed",
                extra={"error": e.message, **e.details},
            )
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except Exception as e:
            logger.exception(f"{__name__}:{func.__name__} - Unexpected error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=UNEXPECTED_ERROR_DETAIL,
            )

    return wrapper  # type: ignore[return-value]
