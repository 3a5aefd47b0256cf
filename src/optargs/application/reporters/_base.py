"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.expansion import Expansion


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.

    Example:
        class CountReporter(BaseReporter):
            def report(self, expansions: tuple[Expansion, ...]) -> None:
                print(sum(e.branch_count for e in expansions))
    """

    @abstractmethod
    def report(self, expansions: tuple[Expansion, ...]) -> None:
        """Report expansions.

        Implementation decides output format and destination.

        Args:
            expansions: Expansions in source order
        """


def describe_call_forms(expansion: Expansion) -> list[tuple[str, str]]:
    """(recognized call form, expansion) rows, in dispatch order.

    Builder expansions list one row per setter instead.
    """
    if expansion.dispatcher is None:
        required = ", ".join(p.name for p in expansion.signature.required)
        rows = [(f"{expansion.name}({required})", "builder")]
        rows.extend(
            (f".with_{opt.name}({opt.name})", f"default {opt.default}")
            for opt in expansion.signature.optional
        )
        call = ", ".join(p.name for p in expansion.declaration.parameters)
        rows.append((".build()", f"{expansion.declaration.name}({call})"))
        return rows

    dispatcher = expansion.dispatcher
    return [
        (branch.pattern.render(dispatcher.name), branch.expansion.render())
        for branch in dispatcher.branches
    ]
