"""
Worker pools consumed by the range runner.

* ``WorkerPool``        – the capability the runner needs from an executor.
* ``ImmediateExecutor`` – runs submitted work synchronously on the caller.
* ``new_executor``      – real thread pool or immediate executor from a flag.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Iterable, Iterator, Optional, Protocol, TypeVar

from parallel_range.config import AppConfig, config as app_config

R = TypeVar("R")

logger = logging.getLogger(__name__)


class WorkerPool(Protocol):
    """Interface for an executor that accepts units of work."""

    def submit(self, fn: Callable[..., R], /, *args: Any, **kwargs: Any) -> Future:
        """
        Schedule *fn* for execution.

        Returns:
            A future tracking the call
        """
        ...

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        """Stop accepting work and release the pool's threads."""
        ...


class ImmediateExecutor:
    """
    Pool-shaped object without concurrency: every ``submit`` runs on the
    calling thread before returning an already-completed future.
    """

    def __init__(self) -> None:
        self._shutdown = False
        self._lock = threading.Lock()

    def submit(self, fn: Callable[..., R], /, *args: Any, **kwargs: Any) -> Future:
        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new futures after shutdown")

        future: Future = Future()
        future.set_running_or_notify_cancel()
        try:
            result = fn(*args, **kwargs)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)
        return future

    def map(self, fn: Callable[..., R], *iterables: Iterable[Any]) -> Iterator[R]:
        return (self.submit(fn, *args).result() for args in zip(*iterables))

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        with self._lock:
            self._shutdown = True

    def shutdown_now(self) -> None:
        self.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> "ImmediateExecutor":
        return self

    def __exit__(self, *_exc) -> None:
        self.shutdown(wait=True)


def new_thread_pool(workers: int, cfg: Optional[AppConfig] = None) -> ThreadPoolExecutor:
    cfg = cfg or app_config
    return ThreadPoolExecutor(
        max_workers=workers,
        thread_name_prefix=cfg.parallel.thread_name_prefix,
    )


def new_executor(
    parallel: bool,
    workers: Optional[int] = None,
    cfg: Optional[AppConfig] = None,
) -> WorkerPool:
    """
    Create a pool suited to *parallel*.

    Args:
        parallel: Whether submitted work should actually run concurrently
        workers: Thread count, defaults to the configured worker count
        cfg: Configuration to read defaults from

    Returns:
        A ``ThreadPoolExecutor`` if *parallel*, else an ``ImmediateExecutor``
    """
    cfg = cfg or app_config
    if not parallel:
        return ImmediateExecutor()

    workers = cfg.parallel.workers if workers is None else workers
    logger.debug("Creating thread pool with %d workers", workers)
    return new_thread_pool(workers, cfg)


def shutdown_now(pool: WorkerPool) -> None:
    """Shut *pool* down without waiting, dropping work that has not started."""
    pool.shutdown(wait=False, cancel_futures=True)
