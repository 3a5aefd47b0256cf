"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from optargs.application.reporters._base import BaseReporter, describe_call_forms

if TYPE_CHECKING:
    from optargs.domain.model.expansion import Expansion


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Stdlib-only implementation for simple text output.
    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None, *, show_branches: bool = True) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            show_branches: List every recognized call form
        """
        self._output = output if output is not None else sys.stdout
        self._show_branches = show_branches

    def report(self, expansions: tuple[Expansion, ...]) -> None:
        """Report expansions as plain text.

        Args:
            expansions: Expansions in source order
        """
        self._report_header()
        self._report_summary(expansions)

        for i, expansion in enumerate(expansions, start=1):
            self._report_expansion(i, expansion)

        self._write()
        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        """Print report header."""
        self._write("=" * 70)
        self._write("Optional Argument Expansion")
        self._write("=" * 70)

    def _report_summary(self, expansions: tuple[Expansion, ...]) -> None:
        """Print summary section."""
        self._write()
        self._write("Summary:")
        self._write(f"  Declarations: {len(expansions)}")
        self._write(f"  Branches: {sum(e.branch_count for e in expansions)}")

    def _report_expansion(self, index: int, expansion: Expansion) -> None:
        """Print one expansion."""
        config = expansion.config
        flags = [config.ordering.value, config.strategy.value]
        if not config.export:
            flags.append("not exported")

        self._write()
        self._write("-" * 70)
        title = f"{expansion.declaration.name} -> {expansion.name}"
        self._write(f"{index}. {title} [{', '.join(flags)}]")
        if expansion.declaration.location is not None:
            self._write(f"   Location: {expansion.declaration.location}")

        required = ", ".join(p.name for p in expansion.signature.required) or "-"
        optional = (
            ", ".join(f"{opt.name}={opt.default}" for opt in expansion.signature.optional) or "-"
        )
        self._write(f"   Required: {required}")
        self._write(f"   Optional: {optional}")

        if not self._show_branches:
            return

        rows = describe_call_forms(expansion)
        width = max(len(form) for form, _ in rows)
        self._write(f"   Call forms ({len(rows)}):")
        for form, target in rows:
            self._write(f"     {form:<{width}}  ->  {target}")
