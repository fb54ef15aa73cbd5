from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Protocol

from aiohttp import ClientSession


@dataclass(frozen=True)
class Response:
    """What a GET request produced: the status code and the body as text.
    """
    status: int
    body: str


class HTTPGet(Protocol):
    """Anything that can asynchronously GET a URL.

    It must either return a `Response` or raise an exception
    describing what went wrong.
    """
    def __call__(self, url: str) -> Awaitable[Response]:
        ...


@dataclass
class Client:
    """`HTTPGet` implementation on top of an aiohttp session.

    Example::

        async with ClientSession() as session:
            quotes = await get_arnie_quotes(urls, Client(session))

    """
    session: ClientSession

    async def get(self, url: str) -> Response:
        async with self.session.get(url) as resp:
            body = await resp.text()
            return Response(status=resp.status, body=body)

    def __call__(self, url: str) -> Awaitable[Response]:
        return self.get(url)
