import threading
import time

from parallel_range.core.errors import JoinInterrupted


class CountDownLatch:
    """
    A join barrier that releases waiters once ``count`` completions are signalled.
    Waiters can be woken early with :meth:`interrupt`.
    """

    def __init__(self, count):
        if count < 0:
            raise ValueError("Latch count must be non-negative")
        self._cond = threading.Condition()
        self._count = count
        self._interrupted = False

    def count_down(self):
        """
        Signal one completion. Extra calls once the count is zero are ignored.
        """
        with self._cond:
            if self._count > 0:
                self._count -= 1
                if self._count == 0:
                    self._cond.notify_all()

    def wait(self, timeout=None):
        """
        Block until the count reaches zero.

        Args:
            timeout: Maximum time to wait, ``None`` waits indefinitely

        Returns:
            True if the count reached zero, False on timeout

        Raises:
            JoinInterrupted: If :meth:`interrupt` was called while waiting
        """
        with self._cond:
            if timeout is not None:
                end_time = time.monotonic() + timeout
                while self._count > 0:
                    self._check_interrupted()
                    remaining = end_time - time.monotonic()
                    if remaining <= 0:
                        return False
                    self._cond.wait(remaining)
            else:
                while self._count > 0:
                    self._check_interrupted()
                    self._cond.wait()
            return True

    def interrupt(self):
        """
        Wake every waiter with :class:`JoinInterrupted` unless already released.
        """
        with self._cond:
            if self._count > 0:
                self._interrupted = True
                self._cond.notify_all()

    def _check_interrupted(self):
        if self._interrupted:
            raise JoinInterrupted(f"join abandoned with {self._count} worker(s) outstanding")

    @property
    def count(self):
        """Get the number of completions still outstanding."""
        return self._count
