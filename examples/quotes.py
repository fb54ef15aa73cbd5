import asyncio
import sys
from arnie_quotes import get_arnie_quotes


async def main() -> None:
    urls = sys.argv[1:]
    quotes = await get_arnie_quotes(urls)
    for url, quote in zip(urls, quotes):
        print(f'{url=}, {quote=}')


if __name__ == '__main__':
    asyncio.run(main())
