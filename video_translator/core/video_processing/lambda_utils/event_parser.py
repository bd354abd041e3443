"""
Request parsing for the function handlers.

Bodies are parsed exactly once; the resulting request object carries the
job id through the rest of the invocation, including the error path.
"""

import base64
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from video_translator.core.exceptions import RequestParseError

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)


def parse_request(body: str | bytes | dict[str, Any] | None, schema: type[RequestT]) -> RequestT:
    """
    Parse and validate a function request body.

    Args:
        body: Raw JSON body, or an already decoded dict
        schema: Request model to validate against

    Returns:
        Validated request

    Raises:
        RequestParseError: Empty body, invalid JSON or schema mismatch
    """
    if body is None or body == "" or body == b"":
        raise RequestParseError("Empty request body")
    try:
        if isinstance(body, dict):
            request = schema.model_validate(body)
        else:
            request = schema.model_validate_json(body)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        logger.warning(f"{__name__}:parse_request - Invalid request: {errors}")
        raise RequestParseError(f"Invalid request body: {errors}") from e

    logger.info(
        f"{__name__}:parse_request - Parsed {schema.__name__}",
        extra={"job_id": getattr(request, "job_id", None)},
    )
    return request


def extract_http_request(event: dict[str, Any]) -> tuple[str, str | None]:
    """
    Pull the HTTP method and body out of a Lambda proxy event.

    Supports function URL / HTTP API v2 events (requestContext.http.method)
    and REST API v1 events (httpMethod). Base64 bodies are decoded.

    Returns:
        tuple[str, str | None]: (method, body)
    """
    method = (
        event.get("requestContext", {}).get("http", {}).get("method")
        or event.get("httpMethod")
        or "POST"
    ).upper()
    body = event.get("body")
    if body is not None and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return method, body
