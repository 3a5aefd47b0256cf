"""Domain enumerations."""

from enum import Enum


class OrderingMode(Enum):
    """Which keyword orderings a dispatcher recognizes."""

    SEQUENTIAL = "sequential"  # declaration order only (combinations)
    SHUFFLED = "shuffled"  # every permutation of every subset


class DeclarationKind(Enum):
    """Shape of the expansion target.

    CALLABLE targets are called with positional arguments.
    AGGREGATE targets are constructed with name=value pairs.
    """

    CALLABLE = "callable"
    AGGREGATE = "aggregate"


class DispatchStrategy(Enum):
    """How the optional-argument surface is generated."""

    BRANCHES = "branches"  # one match branch per recognized call shape
    BUILDER = "builder"  # named setters resolved by a final build()
