"""Combination generator: every named-argument subset a dispatcher recognizes.

SEQUENTIAL yields order-preserving subsequences (2^n in total).
SHUFFLED yields every arrangement of every subset (sum of n!/(n-i)!).
Within a size class the order is lexicographic by declaration index,
so output is reproducible.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from optargs.domain.model.enums import OrderingMode

if TYPE_CHECKING:
    from optargs.domain.model.branch import NamedSubset


def iter_combinations(names: Sequence[str], ordering: OrderingMode) -> Iterator[NamedSubset]:
    """Stream NamedSubsets, smallest size first.

    Args:
        names: Optional parameter names in declaration order
        ordering: SEQUENTIAL or SHUFFLED

    Yields:
        One tuple of names per recognized keyword sequence; the empty
        tuple first (exactly once, even for no names)
    """
    if len(set(names)) != len(names):
        raise ValueError(f"optional names must be distinct, got {tuple(names)}")

    select = itertools.permutations if ordering is OrderingMode.SHUFFLED else itertools.combinations
    for size in range(len(names) + 1):
        yield from select(names, size)


def compute_combinations(names: Sequence[str], ordering: OrderingMode) -> tuple[NamedSubset, ...]:
    """Materialize iter_combinations()."""
    return tuple(iter_combinations(names, ordering))


def count_combinations(n: int, ordering: OrderingMode) -> int:
    """Number of NamedSubsets for n optional parameters, without enumerating.

    Args:
        n: Number of optional parameters
        ordering: SEQUENTIAL or SHUFFLED

    Returns:
        2**n for SEQUENTIAL, sum(n!/(n-i)! for i in 0..n) for SHUFFLED
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if ordering is OrderingMode.SHUFFLED:
        return sum(math.perm(n, size) for size in range(n + 1))
    return 2**n
