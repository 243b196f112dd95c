"""Operations that select items from a source."""

from .errors import format_stack
from .generator import Generator
from .utils import get_logger


logger = get_logger(__name__)


class PredicateGenerator(Generator):
    def __init__(self, predicate, source):
        if not callable(predicate):
            raise TypeError("predicate must be callable")

        super().__init__()
        self.predicate = predicate
        self.source = source
        self.stack = format_stack(2)


class Filtering(PredicateGenerator):
    keep = True

    def _run(self):
        for item in self.source:
            if bool(self.predicate(item)) == self.keep:
                yield item


class FilteringFalse(Filtering):
    keep = False


def sfilter(predicate, source):
    """Generate the items of source for which predicate is true.

    Example:

        >>> list(resumable.sfilter(lambda x: x > 5, range(1, 11)))
        [6, 7, 8, 9, 10]
    """
    return Filtering(predicate, source)


def sfilterfalse(predicate, source):
    """Generate the items of source for which predicate is false.

    Example:

        >>> list(resumable.sfilterfalse(lambda x: x > 5, range(1, 11)))
        [1, 2, 3, 4, 5]
    """
    return FilteringFalse(predicate, source)


def ifilter(predicate, source):
    logger.warning("Call to deprecated function ifilter, use sfilter instead")
    return sfilter(predicate, source)


def ifilterfalse(predicate, source):
    logger.warning(
        "Call to deprecated function ifilterfalse, use sfilterfalse instead")
    return sfilterfalse(predicate, source)


class TakeWhile(PredicateGenerator):
    def _run(self):
        for item in self.source:
            if not self.predicate(item):
                return
            yield item


def takewhile(predicate, source):
    """Generate items from source as long as predicate holds.

    The first item failing the predicate ends the generator, the source is
    not advanced any further.

    Example:

        >>> list(resumable.takewhile(lambda x: x < 5, [1, 4, 6, 4, 1]))
        [1, 4]
    """
    return TakeWhile(predicate, source)


class DropWhile(PredicateGenerator):
    def _run(self):
        dropping = True
        for item in self.source:
            if dropping and self.predicate(item):
                continue
            dropping = False
            yield item


def dropwhile(predicate, source):
    """Skip items from source as long as predicate holds, then forward the
    remaining ones.

    Once an item fails the predicate, it is no longer evaluated.

    Example:

        >>> list(resumable.dropwhile(lambda x: x < 5, [1, 4, 6, 4, 1]))
        [6, 4, 1]
    """
    return DropWhile(predicate, source)


def compress(data, selectors):
    """Return the items of data whose matching selector is true.

    Unlike other functions of this library, the result is computed
    immediately and returned as a list. Items are paired with selectors up to
    the end of the shortest of the two.

    Example:

        >>> resumable.compress('ABCDEF', [1, 0, 1, 0, 1, 1])
        ['A', 'C', 'E', 'F']
    """
    return [d for d, s in zip(data, selectors) if s]
