import asyncio
from typing import Awaitable, List, Optional


async def throttled(max_concurrency: Optional[int], tasks: List[Awaitable]) -> list:
    """ Execute tasks with max concurrency limit

    Results keep the order of `tasks`. A failed task yields its exception in
    place of a result instead of cancelling the others. A limit of None runs
    every task at once; a limit below 1 is rejected.
    """
    if max_concurrency is None:
        return await asyncio.gather(*tasks, return_exceptions=True)
    if max_concurrency < 1:
        raise ValueError(f"max_concurrency must be at least 1, got: {max_concurrency}")

    semaphore = asyncio.Semaphore(max_concurrency)

    async def sem_task(task):
        async with semaphore:
            return await task
    return await asyncio.gather(*(sem_task(task) for task in tasks),
                                return_exceptions=True)
