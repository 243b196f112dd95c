from .errors import format_stack
from .generator import Generator
from .utils import get_logger


class Mapping(Generator):
    def __init__(self, f, *sources):
        if not callable(f):
            raise TypeError("f must be callable")
        if len(sources) <= 0:
            raise ValueError("at least one input source must be provided")

        super().__init__()
        self.sources = sources
        self.f = f
        self.stack = format_stack(2)

    def _run(self):
        for args in zip(*self.sources):
            yield self.f(*args)


def smap(f, *sources):
    """Generate the results of `f` applied to the items of the source(s).

    Equivalent to :code:`(f(x) for x in source)`.

    If several sources are passed, they are advanced in lockstep and their
    items are passed as distinct arguments to f:
    :code:`(f(*x) for x in zip(*sources))`, which means that the
    generator ends with the shortest source.

    Example:

        >>> m = resumable.smap(lambda x, y: x ** y, [2, 3, 10], [5, 2, 3])
        >>> m.resume()
        (32, False)
        >>> list(m)
        [9, 1000]
    """
    return Mapping(f, *sources)


def imap(f, *sources):
    logger = get_logger(__name__)
    logger.warning("Call to deprecated function imap, use smap instead")
    return smap(f, *sources)


class StarMapping(Generator):
    def __init__(self, f, source):
        if not callable(f):
            raise TypeError("f must be callable")

        super().__init__()
        self.source = source
        self.f = f
        self.stack = format_stack(2)

    def _run(self):
        for args in self.source:
            yield self.f(*args)


def starmap(f, source):
    """Map a function over a source of argument tuples.

    A resumable equivalent of :func:`python:itertools.starmap`.
    """
    return StarMapping(f, source)
