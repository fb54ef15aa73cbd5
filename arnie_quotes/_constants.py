from __future__ import annotations

import os
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from typing import Final


DEFAULT_CONCURRENCY: Final = 10
CONCURRENCY_ENV: Final = 'MAX_CONCURRENCY'

QUOTE_KEY: Final = 'Arnie Quote'
FAILURE_KEY: Final = 'FAILURE'

INVALID_RESPONSE: Final = 'Invalid response format'
UNKNOWN_ERROR: Final = 'Unknown error'


def parse_concurrency(value: object, default: int = DEFAULT_CONCURRENCY) -> int:
    """Get a positive concurrency limit out of the value or fall back to `default`.

    Accepts positive integers and strings holding a positive integer.
    Everything else (None, zero, negatives, floats, garbage) is `default`.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return default
        value = int(value)
    if not isinstance(value, int):
        return default
    if value <= 0:
        return default
    return value


def default_concurrency(environ: Mapping[str, str] | None = None) -> int:
    """The concurrency ceiling configured by the `MAX_CONCURRENCY` env var.
    """
    if environ is None:
        environ = os.environ
    return parse_concurrency(environ.get(CONCURRENCY_ENV))
