"""
A python library of lazy and resumable generators.

The resumable package contains functions to combine, filter and enumerate
the items of sources (lists, strings, arrays or other generators) without
materializing the results.

All functions return a :class:`Generator`, a computation which emits its
items one by one and keeps its progress between two resumptions, so that
consumption can be paused at any point and continued later. Generators
are also regular python iterators.

The combinatorial functions (combinations, permutations and powerset)
enumerate their results in lexicographic order of the positions of the
selected items, they require sources with a known length and support for
indexing.
"""

from . import instrument
from .combinatorics import (
    combinations,
    combinations_with_replacement,
    permutations,
)
from .errors import EvaluationError, ExhaustionError, seterr
from .filtering import compress, dropwhile, sfilter, sfilterfalse, takewhile
from .generator import Generator, coroutine, iterate
from .mapping import smap, starmap
from .powerset import powerset
from .repetition import count, cycle, repeat
from .shape import chain, flatten, szip

__all__ = [
    "Generator",
    "coroutine",
    "iterate",
    "EvaluationError",
    "ExhaustionError",
    "seterr",
    "chain",
    "flatten",
    "szip",
    "smap",
    "starmap",
    "sfilter",
    "sfilterfalse",
    "takewhile",
    "dropwhile",
    "compress",
    "count",
    "cycle",
    "repeat",
    "combinations",
    "combinations_with_replacement",
    "permutations",
    "powerset",
]
