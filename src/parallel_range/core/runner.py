"""
Fork-join processing of ``[0, n)`` over contiguous sub-ranges.

Callers pick a strategy once and hand it a *range runner*, a callable
``fn(start, end)`` that processes every index in ``[start, end)``:

* ``SequentialStrategy`` – one call ``fn(0, n)`` on the calling thread.
* ``ParallelStrategy``   – one task per worker on a pool, joined on a latch.

Both strategies report a failing range runner the same way: the exception is
wrapped in ``RangeTaskError`` and raised once processing has stopped. Exceptions
that do not derive from ``Exception`` (``KeyboardInterrupt``, ``SystemExit``) are
re-raised unwrapped. An interrupted join is logged and swallowed; tasks already
submitted keep running.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import threading
from typing import Callable, List, Optional, Protocol, Set, Tuple

from parallel_range.config import AppConfig, config as app_config
from parallel_range.core.errors import JoinInterrupted, RangeTaskError
from parallel_range.core.partition import SubRange, partition
from parallel_range.core.pools import WorkerPool, new_thread_pool, shutdown_now
from parallel_range.utils.latch import CountDownLatch

RangeRunner = Callable[[int, int], None]

logger = logging.getLogger(__name__)


class RangeStrategy(Protocol):
    """Processes ``[0, n)`` by calling a range runner over sub-ranges."""

    def run(self, n: int, fn: RangeRunner, pool: Optional[WorkerPool] = None) -> None:
        ...


class SequentialStrategy:
    """Runs the whole range on the calling thread."""

    def run(self, n: int, fn: RangeRunner, pool: Optional[WorkerPool] = None) -> None:
        # pool is accepted for call-shape parity and never used
        try:
            fn(0, n)
        except Exception as exc:
            raise RangeTaskError(0, n) from exc


class ParallelStrategy:
    """
    Splits ``[0, n)`` into one block per worker and runs the blocks on a pool.

    Args:
        workers: Number of blocks, defaults to the configured worker count
        cfg: Configuration used for defaults and for pools this strategy creates
    """

    def __init__(self, workers: Optional[int] = None, cfg: Optional[AppConfig] = None):
        self._cfg = cfg or app_config
        self.workers = self._cfg.parallel.workers if workers is None else workers
        if self.workers < 1:
            raise ValueError("workers must be at least 1")

        self._active_latches: Set[CountDownLatch] = set()
        self._latch_lock = threading.Lock()

    def run(self, n: int, fn: RangeRunner, pool: Optional[WorkerPool] = None) -> None:
        """
        Process ``[0, n)`` and block until every block has finished.

        Args:
            n: Number of items
            fn: Range runner called once per block
            pool: Executor to submit blocks to. When omitted a thread pool is
                created for this call and shut down before returning.

        Raises:
            RangeTaskError: If *fn* raised an ``Exception`` for at least one block
            BaseException: A non-``Exception`` failure from *fn*, unwrapped
        """
        if pool is not None:
            self._fork_join(n, fn, pool)
            return

        own_pool = new_thread_pool(self.workers, self._cfg)
        try:
            self._fork_join(n, fn, own_pool)
        finally:
            shutdown_now(own_pool)

    def interrupt(self) -> None:
        """Abandon every join currently waiting in :meth:`run`."""
        with self._latch_lock:
            latches = list(self._active_latches)
        for latch in latches:
            latch.interrupt()

    def _fork_join(self, n: int, fn: RangeRunner, pool: WorkerPool) -> None:
        blocks = partition(n, self.workers)
        latch = CountDownLatch(len(blocks))
        failures: List[Tuple[int, SubRange, BaseException]] = []
        failures_lock = threading.Lock()

        def task(worker_id: int, block: SubRange) -> None:
            try:
                fn(block.start, block.end)
            except BaseException as exc:
                with failures_lock:
                    failures.append((worker_id, block, exc))
            finally:
                latch.count_down()

        with self._latch_lock:
            self._active_latches.add(latch)
        try:
            logger.debug("Dispatching %d items over %d workers", n, len(blocks))
            for worker_id, block in enumerate(blocks):
                pool.submit(task, worker_id, block)

            try:
                latch.wait()
            except JoinInterrupted:
                logger.critical(
                    "Interrupted while waiting for %d of %d range workers",
                    latch.count, len(blocks), exc_info=True,
                )
                return
        finally:
            with self._latch_lock:
                self._active_latches.discard(latch)

        if failures:
            failures.sort(key=lambda failure: failure[0])
            for _, _, exc in failures:
                # SystemExit, KeyboardInterrupt and friends are re-raised unwrapped
                if not isinstance(exc, Exception):
                    raise exc

            worker_id, block, exc = failures[0]
            logger.error(
                "%d of %d range workers failed, first failure in worker %d on [%d, %d)",
                len(failures), len(blocks), worker_id, block.start, block.end,
            )
            raise RangeTaskError(block.start, block.end, failed=len(failures)) from exc


def get_strategy(parallel: bool, cfg: Optional[AppConfig] = None) -> RangeStrategy:
    """Build the strategy matching *parallel*."""
    if parallel:
        return ParallelStrategy(cfg=cfg)
    return SequentialStrategy()


def run(
    parallel: bool,
    n: int,
    fn: RangeRunner,
    pool: Optional[WorkerPool] = None,
    *,
    cfg: Optional[AppConfig] = None,
) -> None:
    """
    Process ``[0, n)`` with *fn*, in parallel or on the calling thread.

    Only one code path is needed on the caller side for both modes.

    Args:
        parallel: Whether to split the work across a pool
        n: Number of items
        fn: Range runner over a contiguous block
        pool: Optional executor reused across calls
        cfg: Configuration for the worker count
    """
    get_strategy(parallel, cfg).run(n, fn, pool)


async def run_async(
    strategy: RangeStrategy,
    n: int,
    fn: RangeRunner,
    pool: Optional[WorkerPool] = None,
) -> None:
    """Await ``strategy.run`` without blocking the running event loop."""
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, functools.partial(strategy.run, n, fn, pool))
