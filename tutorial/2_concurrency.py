"""This tutorial shows how to use the concurrency-limited runner on its own,
for any kind of async work, not only HTTP requests.
"""
import asyncio
from random import random
from arnie_quotes import run_with_concurrency

online = 0


async def work(index: int) -> str:
    global online
    online += 1
    print(f'started {index}, {online} running')
    await asyncio.sleep(random() / 10)
    online -= 1
    return f'result #{index}'


async def main() -> None:
    # The runner calls `work` for each index from 0 to 11,
    # but never more than 3 at the same time. As soon as one finishes,
    # the next index is started.
    results = await run_with_concurrency(12, work, limit=3)
    # Tasks finish in random order, but results are ordered by index.
    print(results)


if __name__ == '__main__':
    asyncio.run(main())
