"""Expansion entity: everything produced for one declaration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from optargs.domain.model.enums import DispatchStrategy

if TYPE_CHECKING:
    from optargs.domain.model.configuration import ExpansionConfig
    from optargs.domain.model.declaration import Declaration
    from optargs.domain.model.dispatcher import Dispatcher
    from optargs.domain.model.signature import Signature


@dataclass(frozen=True, slots=True)
class Expansion:
    """Pass-through declaration paired with its generated invocation form.

    All-or-nothing: an Expansion exists only if every stage succeeded.

    Attributes:
        declaration: Source declaration
        config: Effective configuration
        signature: Validated required/optional split
        dispatcher: Assembled decision table, None under the BUILDER strategy
            (which resolves defaults in build() instead of enumerating shapes)
    """

    declaration: Declaration
    config: ExpansionConfig
    signature: Signature
    dispatcher: Dispatcher | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        uses_branches = self.config.strategy is DispatchStrategy.BRANCHES
        if uses_branches and self.dispatcher is None:
            raise ValueError("BRANCHES strategy requires a dispatcher")
        if not uses_branches and self.dispatcher is not None:
            raise ValueError("BUILDER strategy does not enumerate a dispatcher")
        if self.dispatcher is not None and self.dispatcher.target != self.declaration.name:
            raise ValueError(
                f"dispatcher targets '{self.dispatcher.target}', "
                f"expected '{self.declaration.name}'"
            )
        if self.dispatcher is not None:
            arity = self.signature.parameter_count
            for index, branch in enumerate(self.dispatcher.branches):
                if len(branch.expansion.arguments) != arity:
                    raise ValueError(
                        f"branch {index} passes "
                        f"{len(branch.expansion.arguments)} argument(s), expected {arity}"
                    )

    @property
    def name(self) -> str:
        """Name the generated invocation form is bound to."""
        return self.config.dispatcher_name(self.declaration.name)

    @property
    def declaration_source(self) -> str | None:
        """Declaration text with directives stripped."""
        return self.declaration.source

    @property
    def branch_count(self) -> int:
        """Enumerated branches, excluding the fallback."""
        return 0 if self.dispatcher is None else len(self.dispatcher.branches)
