"""Branch value objects: one recognized call shape and its expansion."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

from optargs.domain.exceptions.invocation import UnmatchedInvocationError

if TYPE_CHECKING:
    from optargs.domain.model.call_shape import CallShape
    from optargs.domain.model.enums import DeclarationKind

# Ordered optional-parameter names a caller supplies together
NamedSubset = tuple[str, ...]

UNRECOGNIZED_PREFIX = "Unrecognized order or name for arguments"
SHUFFLE_HINT = (
    "If you want to pass named parameters in any order, use @opt_args(shuffle=True)"
)


@dataclass(frozen=True, slots=True)
class MatchSpec:
    """Pattern side of a branch.

    Attributes:
        positional: One placeholder per required parameter, declaration order
        keywords: Keyword slots in the order a call site must present them
    """

    positional: tuple[str, ...]
    keywords: NamedSubset

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(set(self.keywords)) != len(self.keywords):
            raise ValueError(f"keyword slots must be distinct, got {self.keywords}")
        overlap = set(self.positional) & set(self.keywords)
        if overlap:
            raise ValueError(f"names used both positionally and by keyword: {sorted(overlap)}")

    def matches(self, shape: CallShape) -> bool:
        """Predicate over a call shape: exact positional arity and keyword sequence."""
        if shape.has_unpacking:
            return False
        return (
            len(shape.positional) == len(self.positional)
            and shape.keyword_names == self.keywords
        )

    def bind(self, shape: CallShape) -> dict[str, str]:
        """Map placeholders to the caller's expressions.

        Precondition: matches(shape).
        """
        bindings = dict(zip(self.positional, shape.positional, strict=True))
        for name, expression in shape.keywords:
            if name is not None:
                bindings[name] = expression
        return bindings

    def render(self, dispatcher: str) -> str:
        """Show the call form this pattern recognizes."""
        parts = [*self.positional, *(f"{name}={name}" for name in self.keywords)]
        return f"{dispatcher}({', '.join(parts)})"


@dataclass(frozen=True, slots=True)
class ResolvedArgument:
    """One argument slot of an expansion.

    Attributes:
        parameter: Parameter the slot binds
        value: Placeholder name if forwarded, default expression otherwise
        forwarded: Value comes from the caller
        keyword: Render as parameter=value rather than positionally
    """

    parameter: str
    value: str
    forwarded: bool
    keyword: bool = False

    def render(self, bindings: Mapping[str, str] | None = None) -> str:
        """Render the slot, substituting a bound expression for forwarded values."""
        value = self.value
        if self.forwarded and bindings is not None:
            value = bindings[self.value]
        return f"{self.parameter}={value}" if self.keyword else value


@dataclass(frozen=True, slots=True)
class CallSpec:
    """Expansion side of a branch: the fully-resolved target invocation.

    Attributes:
        target: Name of the declared callable or aggregate
        kind: Call shape or construction shape
        arguments: One slot per parameter, in declaration order
    """

    target: str
    kind: DeclarationKind
    arguments: tuple[ResolvedArgument, ...]

    def render(self, bindings: Mapping[str, str] | None = None) -> str:
        """Render target(arguments)."""
        rendered = ", ".join(arg.render(bindings) for arg in self.arguments)
        return f"{self.target}({rendered})"


@dataclass(frozen=True, slots=True)
class Branch:
    """Recognized invocation shape paired with its expansion.

    Attributes:
        pattern: What a call site must literally present
        expansion: What the call resolves to
    """

    pattern: MatchSpec
    expansion: CallSpec

    @property
    def subset(self) -> NamedSubset:
        """NamedSubset this branch was synthesized for."""
        return self.pattern.keywords

    def matches(self, shape: CallShape) -> bool:
        """Check if shape selects this branch."""
        return self.pattern.matches(shape)

    def resolve(self, shape: CallShape) -> str:
        """Resolve a matching call shape to target invocation text."""
        return self.expansion.render(self.pattern.bind(shape))


@dataclass(frozen=True, slots=True)
class FallbackBranch:
    """Catch-all branch, ordered last, that always fails.

    Attributes:
        dispatcher: Dispatcher the failure is reported for
        hint: Advice appended to the diagnostic
    """

    dispatcher: str
    hint: str = SHUFFLE_HINT

    def message_parts(self) -> tuple[str, str]:
        """Text before and after the echoed input."""
        return f"{UNRECOGNIZED_PREFIX}: `", f"`. {self.hint}"

    def message(self, arguments: str) -> str:
        """Diagnostic for an unmatched input."""
        prefix, suffix = self.message_parts()
        return f"{prefix}{arguments}{suffix}"

    def fail(self, shape: CallShape) -> NoReturn:
        """Reject shape, echoing it verbatim.

        Raises:
            UnmatchedInvocationError: Always
        """
        arguments = shape.render()
        raise UnmatchedInvocationError(
            self.dispatcher,
            arguments,
            self.message(arguments),
            shape.location,
        )
