"""Dispatcher entity: ordered first-match decision table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.branch import Branch, FallbackBranch
    from optargs.domain.model.call_shape import CallShape
    from optargs.domain.model.enums import DeclarationKind, OrderingMode


@dataclass(frozen=True, slots=True)
class Dispatcher:
    """Branches in enumeration order followed by the fallback.

    Built once per declaration and never mutated.

    Attributes:
        name: Name the dispatcher is bound to
        target: Declaration it expands to
        kind: Call or construction shape
        ordering: Ordering mode the branches were enumerated with
        export: Visible outside the emitted module
        branches: Recognized shapes, most specific first
        fallback: Catch-all failure, tried last
    """

    name: str
    target: str
    kind: DeclarationKind
    ordering: OrderingMode
    export: bool
    branches: tuple[Branch, ...]
    fallback: FallbackBranch

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.branches:
            raise ValueError("dispatcher requires at least one branch")
        if self.fallback.dispatcher != self.name:
            raise ValueError(
                f"fallback reports for '{self.fallback.dispatcher}', expected '{self.name}'"
            )
        if self.name == self.target:
            raise ValueError(f"dispatcher name '{self.name}' would shadow its target")

    def resolve(self, shape: CallShape) -> str:
        """Resolve a call shape to the target invocation, first match wins.

        Args:
            shape: Invocation to resolve

        Returns:
            Fully-resolved call or construction text

        Raises:
            UnmatchedInvocationError: No branch recognizes the shape
        """
        for branch in self.branches:
            if branch.matches(shape):
                return branch.resolve(shape)
        self.fallback.fail(shape)

    def __len__(self) -> int:
        """Number of branches including the fallback."""
        return len(self.branches) + 1
