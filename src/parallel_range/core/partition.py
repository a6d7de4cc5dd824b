"""
Static partitioning of ``[0, n)`` into contiguous blocks.

When ``n`` is not evenly divisible by the number of blocks, the first
``n % workers`` blocks get one extra item, so block sizes differ by at most 1.
Arguments are not validated: ``workers >= 1``, ``0 <= worker_id < workers``
and ``n >= 0`` are the caller's responsibility.
"""
from typing import List, NamedTuple, Optional

from parallel_range.config import config


class SubRange(NamedTuple):
    """Half-open index range ``[start, end)`` owned by one worker."""
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


def _workers_or_default(workers: Optional[int]) -> int:
    return config.parallel.workers if workers is None else workers


def start_of(n: int, worker_id: int, workers: Optional[int] = None) -> int:
    """
    Starting index (inclusive) of the block owned by *worker_id*.

    Args:
        n: Number of items to split up
        worker_id: Block number in ``[0, workers)``
        workers: Number of blocks, defaults to the configured worker count

    Returns:
        First index of the block
    """
    workers = _workers_or_default(workers)
    base, rem = divmod(n, workers)
    return base * worker_id + min(rem, worker_id)


def end_of(n: int, worker_id: int, workers: Optional[int] = None) -> int:
    """
    Ending index (exclusive) of the block owned by *worker_id*.

    Args:
        n: Number of items to split up
        worker_id: Block number in ``[0, workers)``
        workers: Number of blocks, defaults to the configured worker count

    Returns:
        One past the last index of the block
    """
    workers = _workers_or_default(workers)
    base, rem = divmod(n, workers)
    return base * (worker_id + 1) + min(rem, worker_id + 1)


def sub_range(n: int, worker_id: int, workers: Optional[int] = None) -> SubRange:
    workers = _workers_or_default(workers)
    return SubRange(start_of(n, worker_id, workers), end_of(n, worker_id, workers))


def partition(n: int, workers: Optional[int] = None) -> List[SubRange]:
    """All blocks for ``(n, workers)`` in worker order."""
    workers = _workers_or_default(workers)
    return [sub_range(n, worker_id, workers) for worker_id in range(workers)]
