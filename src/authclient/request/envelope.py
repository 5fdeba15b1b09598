"""Parsing of the JSON response envelope."""

from typing import Optional

import requests
from pydantic import ValidationError

from ..exceptions import TransportError
from .types import ApiEnvelope


def parse_envelope(response: requests.Response) -> ApiEnvelope:
    """Validate a response body as an ApiEnvelope.

    Raises:
        TransportError: If the body is not JSON or lacks the envelope shape
    """
    try:
        body = response.json()
    except ValueError as e:
        raise TransportError(
            "Response body is not valid JSON", url=response.url, original_error=e
        ) from e

    try:
        return ApiEnvelope.model_validate(body)
    except ValidationError as e:
        raise TransportError(
            "Response body is not a valid API envelope", url=response.url, original_error=e
        ) from e


def extract_error_message(response: requests.Response) -> Optional[str]:
    """Return the body's ``errorMessage`` if the body carries a non-empty one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("errorMessage")
    if isinstance(message, str) and message:
        return message
    return None
