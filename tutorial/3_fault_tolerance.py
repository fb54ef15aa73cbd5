"""
This tutorial shows that a failed request never fails the whole batch.
"""
import asyncio
import logging
from arnie_quotes import FAILURE_KEY, QUOTE_KEY, get_arnie_quotes

URLS = [
    'https://i-hope-some-non-existent-website/',
    'https://httpbin.org/status/500',
    'https://httpbin.org/status/200',
]


async def main() -> None:
    # Failures of each request are logged at debug level.
    logging.basicConfig(level=logging.DEBUG)
    # Network errors and non-200 responses are reported as data:
    # a dict with the "FAILURE" key. A 200 response with a body that isn't
    # JSON is still a quote, with the "Invalid response format" message.
    # The call itself doesn't raise.
    results = await get_arnie_quotes(URLS)
    for url, result in zip(URLS, results):
        if QUOTE_KEY in result:
            print(f'{url}: quote {result[QUOTE_KEY]!r}')
        else:
            print(f'{url}: failed with {result[FAILURE_KEY]!r}')


if __name__ == '__main__':
    asyncio.run(main())
