from __future__ import annotations

import asyncio
import dataclasses
from logging import Logger, LoggerAdapter, getLogger
from typing import Awaitable, Callable, Generic, List, TypeVar

from ._constants import default_concurrency, parse_concurrency
from ._records import Failure, error_message, failure


default_logger = getLogger(__package__)
T = TypeVar('T')
Worker = Callable[[int], Awaitable[T]]


@dataclasses.dataclass
class Pool(Generic[T]):
    """State of a single `run_with_concurrency` invocation.

    Args:

        count: how many tasks there are. Task indices are `range(count)`.
        worker: the function producing an awaitable for the given task index.
        logger: where to report failed workers. Pass None to stay silent.

    Every task index is claimed exactly once, by whichever worker loop
    gets to it first, and its outcome is stored at the same index
    of `results`.
    """
    count: int
    worker: Worker[T]
    logger: Logger | LoggerAdapter | None = default_logger

    next_index: int = 0
    active: int = 0
    results: list[T | Failure | None] = dataclasses.field(default_factory=list)

    def __post_init__(self) -> None:
        self.results = [None] * self.count

    @property
    def done(self) -> bool:
        """True if all tasks are claimed and none of them is still running.
        """
        return self.next_index >= self.count and self.active == 0

    def _claim(self) -> int | None:
        if self.next_index >= self.count:
            return None
        index = self.next_index
        self.next_index += 1
        self.active += 1
        return index

    async def _settle(self, index: int) -> None:
        try:
            self.results[index] = await self.worker(index)
        except Exception as exc:
            if self.logger is not None:
                self.logger.exception('worker for task %d failed', index)
            self.results[index] = failure(error_message(exc))
        finally:
            self.active -= 1

    async def _loop(self) -> None:
        while True:
            index = self._claim()
            if index is None:
                return
            await self._settle(index)

    async def run(self, limit: int | None = None) -> List[T | Failure]:
        """Run all tasks, at most `limit` of them at the same time.

        Invalid `limit` falls back to the configured concurrency ceiling.
        """
        assert self.next_index == 0, 'pool already started'
        if self.count <= 0:
            return []
        limit = parse_concurrency(limit, default=default_concurrency())
        concurrency = min(limit, self.count)
        loops = [asyncio.create_task(self._loop()) for _ in range(concurrency)]
        await asyncio.gather(*loops)
        assert self.done, 'pool finished with unclaimed or running tasks'
        return self.results  # type: ignore[return-value]


async def run_with_concurrency(
    count: int,
    worker: Worker[T],
    limit: int | None = None,
    *,
    logger: Logger | LoggerAdapter | None = default_logger,
) -> List[T | Failure]:
    """Run `worker` for each index in `range(count)`, at most `limit` at a time.

    Args:
        count: number of tasks.
        worker: async function of a task index.
        limit: max number of simultaneously running workers.
            Invalid values (None, zero, negatives, non-numbers) fall back
            to the `MAX_CONCURRENCY` env var, and then to 10.
        logger: the logger to report failed workers.

    Returns the list of results in the order of task indices. If a worker
    fails, the failure is stored as `{"FAILURE": message}` at its index,
    so this function itself never fails because of a worker.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        return []
    pool = Pool(count=count, worker=worker, logger=logger)
    return await pool.run(limit)
