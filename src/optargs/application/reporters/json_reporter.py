"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from optargs.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from optargs.domain.model.branch import Branch
    from optargs.domain.model.expansion import Expansion
    from optargs.domain.model.location import Location


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs expansions as JSON for build tooling and editors.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, expansions: tuple[Expansion, ...]) -> None:
        """Report expansions as JSON.

        Args:
            expansions: Expansions in source order
        """
        data = {
            "declaration_count": len(expansions),
            "branch_count": sum(e.branch_count for e in expansions),
            "expansions": [self._expansion_to_dict(e) for e in expansions],
        }
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _expansion_to_dict(self, expansion: Expansion) -> dict[str, object]:
        """Convert Expansion to JSON-serializable dict.

        Args:
            expansion: Expansion to convert

        Returns:
            Dictionary suitable for json.dump()
        """
        config = expansion.config
        dispatcher = expansion.dispatcher
        return {
            "declaration": expansion.declaration.name,
            "kind": expansion.declaration.kind.value,
            "name": expansion.name,
            "ordering": config.ordering.value,
            "strategy": config.strategy.value,
            "export": config.export,
            "location": _location_to_dict(expansion.declaration.location),
            "required": [p.name for p in expansion.signature.required],
            "optional": [
                {"name": opt.name, "default": opt.default, "implicit": opt.implicit}
                for opt in expansion.signature.optional
            ],
            "branches": (
                [] if dispatcher is None else [self._branch_to_dict(b) for b in dispatcher.branches]
            ),
            "fallback": None if dispatcher is None else dispatcher.fallback.message("..."),
        }

    @staticmethod
    def _branch_to_dict(branch: Branch) -> dict[str, object]:
        return {
            "keywords": list(branch.subset),
            "expansion": branch.expansion.render(),
        }


def _location_to_dict(location: Location | None) -> dict[str, object] | None:
    if location is None:
        return None
    return {
        "file": str(location.file),
        "line": location.line,
        "column": location.column,
    }
