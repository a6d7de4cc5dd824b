"""
parallel-range.

Splits a range of independent work items into contiguous blocks and processes
them on the calling thread or across a fixed-size worker pool.
"""

from parallel_range.core import (
    ParallelStrategy,
    SequentialStrategy,
    end_of,
    get_strategy,
    partition,
    run,
    start_of,
)

__version__ = "0.1.0"

__all__ = [
    'ParallelStrategy',
    'SequentialStrategy',
    'get_strategy',
    'run',
    'partition',
    'start_of',
    'end_of',
]
