"""Fetch Arnie quotes from a list of URLs, concurrently but not too much.
"""
from ._constants import (
    DEFAULT_CONCURRENCY, FAILURE_KEY, QUOTE_KEY,
    default_concurrency, parse_concurrency,
)
from ._http import Client, HTTPGet, Response
from ._quotes import get_arnie_quotes
from ._records import (
    Failure, Quote, Result,
    error_message, failure, parse_message, quote, transform_response,
)
from ._runner import Pool, run_with_concurrency


__version__ = '1.0.0'
__all__ = [
    'Client',
    'DEFAULT_CONCURRENCY',
    'FAILURE_KEY',
    'Failure',
    'HTTPGet',
    'Pool',
    'QUOTE_KEY',
    'Quote',
    'Response',
    'Result',
    'default_concurrency',
    'error_message',
    'failure',
    'get_arnie_quotes',
    'parse_concurrency',
    'parse_message',
    'quote',
    'run_with_concurrency',
    'transform_response',
]
