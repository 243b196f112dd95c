"""Unbounded or repeated generators."""

from .generator import Generator
from .utils import check_size, get_logger


logger = get_logger(__name__)


class Repetition(Generator):
    def __init__(self, value, times):
        super().__init__()
        self.object = value
        self.times = times

    def _run(self):
        if self.times is None:
            while True:
                yield self.object

        for _ in range(self.times):
            yield self.object


def repeat(value, times=None):
    """Generate the same value over and over.

    Args:
        value (Any): Value to be emitted.
        times (Optional[int]): Optional number of emissions, repeats
            indefinitely if omitted.

    Example:

        >>> list(resumable.repeat(10, 3))
        [10, 10, 10]
    """
    if times is not None:
        times = check_size(times, "times")

    return Repetition(value, times)


class Cycle(Generator):
    def __init__(self, source):
        super().__init__()
        self.source = source
        self.saved = []

    def _run(self):
        for item in self.source:
            yield item
            self.saved.append(item)

        if not self.saved:
            logger.debug("cycle over an empty source")

        while self.saved:
            for item in self.saved:
                yield item


def cycle(source):
    """Generate the items of a source, then repeat them indefinitely.

    The source is iterated only once, its items are recorded during the
    first pass and replayed afterwards. An empty source yields an empty
    generator.

    Example:

        >>> g = resumable.cycle('ABC')
        >>> [next(g) for _ in range(7)]
        ['A', 'B', 'C', 'A', 'B', 'C', 'A']
    """
    return Cycle(source)


class Counter(Generator):
    def __init__(self, start, step):
        super().__init__()
        self.start = start
        self.step = step

    def _run(self):
        n = self.start
        while True:
            yield n
            n += self.step


def count(start=0, step=1):
    """Generate evenly spaced values indefinitely.

    Example:

        >>> g = resumable.count(2.5, 0.5)
        >>> [next(g) for _ in range(3)]
        [2.5, 3.0, 3.5]
    """
    return Counter(start, step)
