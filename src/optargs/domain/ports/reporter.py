"""Reporter protocol for expansion summaries.

Users extend optargs by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from optargs.domain.model.expansion import Expansion


class ReporterProtocol(Protocol):
    """Contract for reporters.

    optargs provides PlainTextReporter and JSONReporter as defaults,
    and ConsoleReporter for rich terminal output.
    """

    def report(self, expansions: tuple[Expansion, ...]) -> None:
        """Report expansions.

        Implementation decides output format and destination.

        Args:
            expansions: Expansions in source order
        """
        ...
