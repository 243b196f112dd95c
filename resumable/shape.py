"""Operations that assemble sources or their elements."""

from .generator import Generator
from .utils import get_logger


class Concatenation(Generator):
    def __init__(self, sources):
        super().__init__()
        self.sources = sources

    def _run(self):
        for source in self.sources:
            for item in source:
                yield item


def chain(*sources):
    """Generate the items of each source one after the other.

    Example:

        >>> list(resumable.chain([1, 2, 3], [], [4, 5]))
        [1, 2, 3, 4, 5]
    """
    return Concatenation(sources)


def flatten(sources):
    """Chain the sources obtained by iterating over `sources`.

    The outer iterable is consumed lazily, one source at a time.

    Example:

        >>> list(resumable.flatten([[1, 2, 3], [4, 5]]))
        [1, 2, 3, 4, 5]
    """
    return Concatenation(sources)


def from_iterable(sources):
    logger = get_logger(__name__)
    logger.warning(
        "Call to deprecated function from_iterable, use flatten instead")
    return flatten(sources)


class Collation(Generator):
    def __init__(self, sources):
        super().__init__()
        self.sources = sources

    def _run(self):
        return zip(*self.sources)


def szip(*sources):
    """Generate tuples of items taken in lockstep from each source.

    The generator ends as soon as one of the sources is exhausted.

    Example:

        >>> list(resumable.szip('ABCD', 'xy'))
        [('A', 'x'), ('B', 'y')]
    """
    return Collation(sources)


def izip(*sources):
    logger = get_logger(__name__)
    logger.warning("Call to deprecated function izip, use szip instead")
    return szip(*sources)
