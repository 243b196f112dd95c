"""Debugging tools."""

from time import monotonic, perf_counter

from .errors import format_stack
from .generator import Generator


class Debug(Generator):
    def __init__(self, source, func, max_calls, max_rate):
        if not callable(func):
            raise TypeError("func must be callable")

        super().__init__()
        self.source = source
        self.max_calls = max_calls
        self.max_rate = max_rate
        self.n_calls = 0
        self.last_call = monotonic()
        self.func = func
        self.stack = format_stack(2)

    def silence(self):
        if self.max_calls is not None:
            if self.n_calls >= self.max_calls:
                return True

        if self.max_rate is not None:
            elapsed = monotonic() - self.last_call
            if elapsed < (1.0 / self.max_rate):
                return True

        return False

    def _run(self):
        for i, value in enumerate(self.source):
            if not self.silence():
                self.func(i, value)
                self.last_call = monotonic()
                self.n_calls += 1

            yield value


def debug(source, func, max_calls=None, max_rate=None):
    """Wrap a source to trigger a function on each emitted item.

    Args:
        source (Iterable):
            Source of items.
        func (Callable):
            A function to call whenever an item is emitted, must take the
            index and value of the items.
        max_calls (Optional[int]):
            An optional count limit on how many times `func` is invoked
            (default None).
        max_rate (Optional[int]):
            An optional rate limit to avoid spamming `func`.

    Returns:
        (Generator): The wrapped source.

    Example:

        .. testsetup::

           from resumable.instrument import debug

        >>> watchthis = debug([1, 2, 3, 4, 5], lambda i, v: print(v), 2)
        >>> x = next(watchthis)
        1
        >>> y = next(watchthis)
        2
        >>> z = next(watchthis)
    """
    return Debug(source, func, max_calls, max_rate)


class ThroughputMonitor(Generator):
    def __init__(self, source):
        super().__init__()
        self.source = source
        self.n_calls = 0
        self.time_spent = 0

    def reset(self):
        """Reset perf counter."""
        self.n_calls = 0
        self.time_spent = 0

    def throughput(self):
        """Returns average measured throughput."""
        if self.n_calls == 0:
            raise RuntimeError(
                "cannot measure throughput before any element was read")

        return self.n_calls / self.time_spent

    def read_delay(self):
        """Return average measured time spent reading items."""
        if self.n_calls == 0:
            raise RuntimeError(
                "cannot measure read delay before any element was read")

        return self.time_spent / self.n_calls

    def _run(self):
        source_iter = iter(self.source)

        t_start = perf_counter()
        for value in source_iter:
            t_stop = perf_counter()
            self.time_spent += t_stop - t_start
            self.n_calls += 1

            yield value

            t_start = perf_counter()


def monitor_throughput(source):
    """Wrap a source in a generator with three additional methods:

    * :code:`read_delay()` the average time it takes to read an item.
    * :code:`throughput()` the invert of the above.
    * :code:`reset()` resets the accumulated statistics.

    """
    return ThroughputMonitor(source)
