"""Name hygiene for generated code.

Generated functions bind placeholders and helper names as locals. A local
that shadows a global used by a default expression, the target, or another
generated name would change what the code means, so colliding names get
trailing underscores until unique.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_IDENTIFIER = re.compile(r"[A-Za-z_]\w*")


def identifiers_in(expressions: Iterable[str]) -> frozenset[str]:
    """Every identifier-like token in the expressions.

    Over-approximates (attribute names and string contents count too),
    which only costs an extra underscore.
    """
    found: set[str] = set()
    for expression in expressions:
        found.update(_IDENTIFIER.findall(expression))
    return frozenset(found)


class NameAllocator:
    """Hands out names that avoid a reserved set and each other."""

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._taken = set(reserved)

    def allocate(self, preferred: str) -> str:
        """Return preferred, suffixed with underscores until unused."""
        name = preferred
        while name in self._taken:
            name += "_"
        self._taken.add(name)
        return name

    def allocate_all(self, preferred: Iterable[str]) -> dict[str, str]:
        """Allocate in order, mapping each preferred name to its result."""
        return {name: self.allocate(name) for name in preferred}
