from .combinatorics import Combinations
from .generator import Generator
from .utils import basic_getitem, check_pool, check_size, get_logger


logger = get_logger(__name__)


class Powerset(Generator):
    def __init__(self, pool, min_size):
        super().__init__()
        self.pool = pool
        self.min_size = min_size

        if min_size > len(pool):
            logger.debug("powerset with min_size %d over a pool of %d items "
                         "is empty", min_size, len(pool))

    def __len__(self):
        return max(0, len(self.pool) - self.min_size + 1)

    def _run(self):
        for size in range(self.min_size, len(self.pool) + 1):
            yield Combinations(self.pool, size)

    @basic_getitem
    def __getitem__(self, key):
        return Combinations(self.pool, self.min_size + key)


def powerset(sequence, min_size=0):
    """Generate the subsets of a sequence, grouped by size.

    Each emitted item is itself a generator of the
    :func:`~resumable.combinations` of a given size, sizes go from
    `min_size` up to the length of the sequence.

    The returned object also supports indexing to directly obtain a fresh
    generator for a given size class: ``powerset(s, m)[k]`` enumerates the
    subsets of size ``m + k``.

    Note:
        The length counts every size class and does not shrink while the
        generator is consumed. As for any sized object, a powerset with no
        size class (`min_size` larger than the sequence) is falsy.

    Args:
        sequence (Sequence): A sized and indexable source of items.
        min_size (int): Size of the smallest subsets (default 0).

    Example:

        >>> [list(subsets) for subsets in resumable.powerset([1, 2, 3])]
        [[()], [(1,), (2,), (3,)], [(1, 2), (1, 3), (2, 3)], [(1, 2, 3)]]
        >>> list(resumable.powerset([1, 2, 3])[-2])
        [(1, 2), (1, 3), (2, 3)]
    """
    check_pool(sequence, "powerset")
    return Powerset(sequence, check_size(min_size, "min_size"))
