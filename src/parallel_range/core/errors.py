"""Exceptions raised by range processing."""


class ParallelRangeError(Exception):
    """Base class for errors raised by this package."""


class RangeTaskError(ParallelRangeError):
    """A range runner raised while processing ``[start, end)``.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, start: int, end: int, failed: int = 1):
        self.start = start
        self.end = end
        self.failed = failed
        super().__init__(f"range runner failed on [{start}, {end})")


class JoinInterrupted(ParallelRangeError):
    """The wait on a join barrier was abandoned before all workers finished."""
