"""Range partitioning and fork-join execution."""

from parallel_range.core.errors import JoinInterrupted, ParallelRangeError, RangeTaskError
from parallel_range.core.partition import SubRange, end_of, partition, start_of, sub_range
from parallel_range.core.pools import ImmediateExecutor, WorkerPool, new_executor, shutdown_now
from parallel_range.core.runner import (
    ParallelStrategy,
    RangeStrategy,
    SequentialStrategy,
    get_strategy,
    run,
    run_async,
)
from parallel_range.core.sequences import ParallelSequence, int_range, stream_p

__all__ = [
    'JoinInterrupted',
    'ParallelRangeError',
    'RangeTaskError',
    'SubRange',
    'start_of',
    'end_of',
    'sub_range',
    'partition',
    'ImmediateExecutor',
    'WorkerPool',
    'new_executor',
    'shutdown_now',
    'RangeStrategy',
    'SequentialStrategy',
    'ParallelStrategy',
    'get_strategy',
    'run',
    'run_async',
    'ParallelSequence',
    'stream_p',
    'int_range',
]
