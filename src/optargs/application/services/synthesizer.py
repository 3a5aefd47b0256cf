"""Branch and fallback synthesis."""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.domain.model.branch import (
    Branch,
    CallSpec,
    FallbackBranch,
    MatchSpec,
    ResolvedArgument,
)
from optargs.domain.model.enums import DeclarationKind

if TYPE_CHECKING:
    from optargs.domain.model.branch import NamedSubset
    from optargs.domain.model.signature import Signature


def synthesize_branch(
    signature: Signature,
    subset: NamedSubset,
    target: str,
    kind: DeclarationKind,
) -> Branch:
    """Build the (pattern, expansion) pair for one NamedSubset.

    The pattern takes its keyword order from the subset, which is what the
    call site presents. The expansion walks the optional suffix in
    declaration order so the target always receives canonical order.

    Args:
        signature: Validated required/optional split
        subset: Optional names the caller supplies, in call order
        target: Declared name to call or construct
        kind: CALLABLE renders positionally, AGGREGATE as name=value

    Returns:
        Branch whose expansion has one argument per parameter
    """
    known = set(signature.optional_names)
    unknown = [name for name in subset if name not in known]
    if unknown:
        raise ValueError(f"subset names unknown optional parameters: {unknown}")

    construction = kind is DeclarationKind.AGGREGATE
    supplied = frozenset(subset)
    arguments: list[ResolvedArgument] = []

    for param in signature.required:
        arguments.append(
            ResolvedArgument(
                parameter=param.name,
                value=param.name,
                forwarded=True,
                keyword=construction or param.keyword_only,
            )
        )

    for opt in signature.optional:
        forwarded = opt.name in supplied
        arguments.append(
            ResolvedArgument(
                parameter=opt.name,
                value=opt.name if forwarded else opt.default,
                forwarded=forwarded,
                keyword=construction or opt.parameter.keyword_only,
            )
        )

    pattern = MatchSpec(
        positional=tuple(param.name for param in signature.required),
        keywords=tuple(subset),
    )
    expansion = CallSpec(target=target, kind=kind, arguments=tuple(arguments))
    return Branch(pattern=pattern, expansion=expansion)


def synthesize_fallback(dispatcher: str) -> FallbackBranch:
    """Catch-all branch for shapes no enumerated branch recognizes."""
    return FallbackBranch(dispatcher=dispatcher)
