"""Classification of HTTP responses into payloads or errors.

A response is resolved along two independent axes: whether its status
is a success, and whether its body validates against the model that
status implies. This keeps a deliberate API error (non-success status,
error schema) apart from schema drift on the success path (success
status, body that no longer matches the payload model).

    ============  ======================  =================
    status        body                    outcome
    ============  ======================  =================
    success       valid payload           (response, payload)
    success       invalid payload         JsonDecodeError
    non-success   valid ErrorResponse     BadRequest
    non-success   anything else           Failure
    ============  ======================  =================

Transport failures never reach this module; WeatherHub turns them into
HttpError before a response exists.
"""

import logging
from typing import Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .exceptions import BadRequest, Failure, JsonDecodeError
from .models import ErrorResponse

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def resolve_response(
    response: httpx.Response, payload_model: Type[PayloadT]
) -> Tuple[httpx.Response, PayloadT]:
    """Turn an HTTP response into a typed payload or raise the matching error.

    Args:
        response: Response returned by the transport.
        payload_model: Model the body must match on success.

    Returns:
        Tuple of the response and the decoded payload.

    Raises:
        BadRequest: Non-success status with a structured error body.
        Failure: Non-success status with any other body.
        JsonDecodeError: Success status with a body that does not
            match payload_model.

    Example:
        >>> response = httpx.Response(200, json={"name": "Pisa"})
        >>> _, info = resolve_response(response, WeatherInfo)
        >>> info.name
        'Pisa'
    """
    if not response.is_success:
        try:
            error = ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            logger.debug(
                f"HTTP {response.status_code} without a structured error body"
            )
            raise Failure(response) from None

        logger.debug(
            f"HTTP {response.status_code} rejected: {error.cod} {error.message}"
        )
        raise BadRequest(error, response)

    try:
        payload = payload_model.model_validate_json(response.content)
    except ValidationError as e:
        logger.warning(
            f"Response does not match {payload_model.__name__}: "
            f"{e.error_count()} validation errors"
        )
        raise JsonDecodeError(response.text, e) from e

    return response, payload
