from __future__ import annotations

from logging import getLogger
from typing import List, Sequence

from aiohttp import ClientSession

from ._http import Client, HTTPGet
from ._records import Result, error_message, failure, transform_response
from ._runner import run_with_concurrency


logger = getLogger(__package__)


async def get_arnie_quotes(
    urls: Sequence[str] | None,
    http_get: HTTPGet | None = None,
    *,
    limit: int | None = None,
) -> List[Result]:
    """GET each of the URLs and return the quotes in the same order.

    Args:
        urls: the list of URLs to request.
        http_get: the function to make requests with. If not specified,
            a new aiohttp session is used for the duration of the call.
        limit: max number of requests in flight.
            By default, the `MAX_CONCURRENCY` env var or 10.

    Each result is either `{"Arnie Quote": message}` for a 200 response
    or `{"FAILURE": message}` for everything else, including network errors.
    """
    if not isinstance(urls, (list, tuple)) or not urls:
        return []
    if http_get is None:
        async with ClientSession() as session:
            return await _fetch_all(urls, Client(session), limit)
    return await _fetch_all(urls, http_get, limit)


async def _fetch_all(
    urls: Sequence[str], http_get: HTTPGet, limit: int | None,
) -> List[Result]:
    async def worker(index: int) -> Result:
        url = urls[index]
        try:
            response = await http_get(url)
            return transform_response(response)
        except Exception as exc:
            logger.debug('GET %s failed: %r', url, exc)
            return failure(error_message(exc))

    return await run_with_concurrency(len(urls), worker, limit)  # type: ignore[return-value]
