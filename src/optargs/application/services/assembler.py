"""Dispatcher assembler: branches plus fallback, paired with the declaration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.domain.model.dispatcher import Dispatcher
from optargs.domain.model.expansion import Expansion

if TYPE_CHECKING:
    from collections.abc import Iterable

    from optargs.domain.model.branch import Branch, FallbackBranch
    from optargs.domain.model.configuration import ExpansionConfig
    from optargs.domain.model.declaration import Declaration
    from optargs.domain.model.signature import Signature


def assemble(
    declaration: Declaration,
    config: ExpansionConfig,
    signature: Signature,
    branches: Iterable[Branch],
    fallback: FallbackBranch,
) -> Expansion:
    """Concatenate branches (enumeration order) and fallback (last).

    Args:
        declaration: Declaration passed through unchanged
        config: Effective configuration (name, export, ordering)
        signature: Validated signature
        branches: Synthesized branches in enumeration order
        fallback: Catch-all branch

    Returns:
        Expansion pairing the declaration with its dispatcher
    """
    dispatcher = Dispatcher(
        name=config.dispatcher_name(declaration.name),
        target=declaration.name,
        kind=declaration.kind,
        ordering=config.ordering,
        export=config.export,
        branches=tuple(branches),
        fallback=fallback,
    )
    return Expansion(
        declaration=declaration,
        config=config,
        signature=signature,
        dispatcher=dispatcher,
    )
