"""Lexicographic enumeration of selections from an indexable source."""

from .generator import Generator
from .utils import check_pool, check_size, get_logger


logger = get_logger(__name__)


class Selection(Generator):
    """Base for generators that emit items of a pool picked by index.

    `indices` holds the current index tuple, the first `r` of which are
    translated into an emitted tuple of items.
    """

    def __init__(self, pool, r):
        super().__init__()
        self.pool = pool
        self.n = len(pool)
        self.r = r

        if r > self.n:
            logger.debug("%s of size %d over a pool of %d items is empty",
                         self.__class__.__name__, r, self.n)

    def select(self):
        return tuple(self.pool[i] for i in self.indices[:self.r])


class Combinations(Selection):
    def __init__(self, pool, r):
        super().__init__(pool, r)
        self.indices = list(range(r)) if r <= self.n else []

    def _run(self):
        n, r, indices = self.n, self.r, self.indices
        if r > n:
            return

        yield self.select()

        while True:
            # rightmost index which has not reached its maximum
            for i in reversed(range(r)):
                if indices[i] != i + n - r:
                    break
            else:
                return

            indices[i] += 1
            for j in range(i + 1, r):
                indices[j] = indices[j - 1] + 1

            yield self.select()


class CombinationsWithReplacement(Selection):
    def __init__(self, pool, r):
        super().__init__(pool, r)
        self.indices = [0] * r if r <= self.n else []

    def _run(self):
        n, r, indices = self.n, self.r, self.indices
        if r > n:
            return

        yield self.select()

        while True:
            for i in reversed(range(r)):
                if indices[i] != n - 1:
                    break
            else:
                return

            indices[i:] = [indices[i] + 1] * (r - i)

            yield self.select()


class Permutations(Selection):
    """Cycle-based enumeration of r-permutations.

    `cycles[i]` counts how many more items position `i` will take before
    the suffix starting at `i` is rotated back to its initial order.
    """

    def __init__(self, pool, r):
        super().__init__(pool, r)
        self.indices = list(range(self.n))
        self.cycles = list(range(self.n, self.n - r, -1)) if r <= self.n else []

    def _run(self):
        n, r, indices, cycles = self.n, self.r, self.indices, self.cycles
        if r > n:
            return

        yield self.select()

        while True:
            for i in reversed(range(r)):
                cycles[i] -= 1
                if cycles[i] == 0:
                    indices[i:] = indices[i + 1:] + indices[i:i + 1]
                    cycles[i] = n - i
                else:
                    j = cycles[i]
                    indices[i], indices[-j] = indices[-j], indices[i]
                    yield self.select()
                    break
            else:
                return


def combinations(sequence, r):
    """Generate the r-length combinations of items from a sequence.

    Items are picked at distinct positions and combinations are emitted
    in lexicographic order of these positions.

    Args:
        sequence (Sequence): A sized and indexable source of items.
        r (int): The size of the combinations. When larger than the
            sequence, the generator emits nothing.

    Example:

        >>> list(resumable.combinations('ABCD', 2))
        [('A', 'B'), ('A', 'C'), ('A', 'D'), ('B', 'C'), ('B', 'D'), ('C', 'D')]
    """
    check_pool(sequence, "combinations")
    return Combinations(sequence, check_size(r, "r"))


def combinations_with_replacement(sequence, r):
    """Generate the r-length combinations of items allowing repetitions.

    Example:

        >>> list(resumable.combinations_with_replacement('ABC', 2))
        [('A', 'A'), ('A', 'B'), ('A', 'C'), ('B', 'B'), ('B', 'C'), ('C', 'C')]

    Note:
        Just like :func:`combinations`, nothing is emitted when `r` exceeds
        the size of the sequence.
    """
    check_pool(sequence, "combinations_with_replacement")
    return CombinationsWithReplacement(sequence, check_size(r, "r"))


def permutations(sequence, r=None):
    """Generate the r-length permutations of items from a sequence.

    Args:
        sequence (Sequence): A sized and indexable source of items.
        r (Optional[int]): The size of the permutations, defaults to the
            length of the sequence.

    Example:

        >>> [''.join(p) for p in resumable.permutations('ABC', 2)]
        ['AB', 'AC', 'BA', 'BC', 'CA', 'CB']
    """
    check_pool(sequence, "permutations")
    r = len(sequence) if r is None else check_size(r, "r")
    return Permutations(sequence, r)


def icombination(sequence, r):
    logger.warning(
        "Call to deprecated function icombination, use combinations instead")
    return combinations(sequence, r)


def icombination_r(sequence, r):
    logger.warning(
        "Call to deprecated function icombination_r, "
        "use combinations_with_replacement instead")
    return combinations_with_replacement(sequence, r)


def ipermutation(sequence, r=None):
    logger.warning(
        "Call to deprecated function ipermutation, use permutations instead")
    return permutations(sequence, r)
