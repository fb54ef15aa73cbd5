from __future__ import annotations

import json
from typing import TYPE_CHECKING, TypedDict, Union

from ._constants import FAILURE_KEY, INVALID_RESPONSE, QUOTE_KEY, UNKNOWN_ERROR

if TYPE_CHECKING:
    from ._http import Response


# The keys are not valid identifiers, hence the functional syntax.
Quote = TypedDict('Quote', {'Arnie Quote': str})
Failure = TypedDict('Failure', {'FAILURE': str})

Result = Union[Quote, Failure]


def quote(message: str) -> Quote:
    return {QUOTE_KEY: message}


def failure(message: str) -> Failure:
    return {FAILURE_KEY: message}


def error_message(exc: BaseException | None) -> str:
    """Human-readable description of the exception, if it has any.
    """
    if exc is None:
        return UNKNOWN_ERROR
    return str(exc) or UNKNOWN_ERROR


def parse_message(body: str | bytes | None) -> str:
    """Extract `message` from a JSON response body.

    An empty body, a body that isn't valid JSON, a JSON document that isn't
    an object, or an object without a (non-empty) `message` all produce
    the "Invalid response format" message.
    """
    if not body:
        return INVALID_RESPONSE
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        return INVALID_RESPONSE
    if not isinstance(payload, dict):
        return INVALID_RESPONSE
    message = payload.get('message')
    if not message:
        return INVALID_RESPONSE
    return str(message)


def transform_response(response: Response) -> Result:
    """Map an HTTP response into a quote (status 200) or a failure.
    """
    message = parse_message(response.body)
    if response.status == 200:
        return quote(message)
    return failure(message)
