"""
This is the first tutorial.
It will show you the basics of using `get_arnie_quotes` to request multiple URLs.
"""
import asyncio
from aiohttp import ClientSession
from arnie_quotes import Client, get_arnie_quotes

URLS = (
    'https://httpbin.org/status/200',
    'https://httpbin.org/json',
)


async def main() -> None:
    # * If you don't pass a client, `get_arnie_quotes` opens its own aiohttp session.
    #   Pass `Client(session)` to reuse the session you already have.
    # * `limit` is how many requests can be in flight at the same time.
    #   By default, it's the `MAX_CONCURRENCY` env var, or 10 if it's not set.
    async with ClientSession() as session:
        quotes = await get_arnie_quotes(list(URLS), Client(session), limit=2)
    # Results are always in the same order as the URLs,
    # so we can safely `zip` them.
    for url, quote in zip(URLS, quotes):
        print(f'{url=}, {quote=}')


if __name__ == '__main__':
    asyncio.run(main())
