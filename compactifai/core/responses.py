"""Turn raw HTTP responses into typed values or ApiError."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from compactifai.core.exceptions import ApiError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def resolve_response(response: httpx.Response, model_type: type[T]) -> T:
    """
    Decode a response into ``model_type`` or raise ApiError.

    The body is always read first so that it can be attached to the error.

    Args:
        response: Raw response from the transport
        model_type: Expected shape of a successful response body

    Returns:
        The decoded response

    Raises:
        ApiError: With a status code if the API returned a non-2xx status,
            without one if a successful body could not be decoded
    """
    body = response.text

    if not response.is_success:
        logger.error("API request failed with status %d", response.status_code)
        raise ApiError.from_status(response.status_code, body)

    if not body.strip():
        logger.error("API returned an empty %s body", model_type.__name__)
        raise ApiError.decode_failed(response_body=body)

    try:
        return model_type.model_validate_json(body)
    except ValidationError as e:
        logger.error("Failed to decode %s: %s", model_type.__name__, e)
        raise ApiError.decode_failed(response_body=body) from e
