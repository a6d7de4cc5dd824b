"""Sequence helpers that toggle between sequential and pooled evaluation."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from parallel_range.core.pools import WorkerPool, new_executor

T = TypeVar("T")
R = TypeVar("R")


class ParallelSequence(Generic[T]):
    """
    An iterable flagged for parallel evaluation.

    Iterating it yields the source items unchanged; :meth:`map` evaluates a
    function over the items on a worker pool and returns results in order.
    """

    parallel = True

    def __init__(self, source: Iterable[T]):
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def map(self, fn: Callable[[T], R], pool: Optional[WorkerPool] = None) -> List[R]:
        if pool is not None:
            return [f.result() for f in [pool.submit(fn, item) for item in self._source]]

        own_pool = new_executor(True)
        try:
            return [f.result() for f in [own_pool.submit(fn, item) for item in self._source]]
        finally:
            own_pool.shutdown(wait=True)

    @property
    def source(self) -> Iterable[T]:
        return self._source


def stream_p(source: Iterable[T], parallel: bool) -> Union[Iterable[T], ParallelSequence[T]]:
    """Return *source* unchanged, or wrapped for parallel evaluation."""
    if parallel:
        return ParallelSequence(source)
    return source


def int_range(start: int, end: Optional[int] = None, parallel: bool = False) -> Union[range, ParallelSequence[int]]:
    """
    Consecutive integers over ``[start, end)``, or ``[0, start)`` when called
    with one argument. The result can be iterated any number of times.
    """
    if end is None:
        start, end = 0, start
    return stream_p(range(start, end), parallel)
