"""Call shape value object: one dispatcher invocation as source text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class CallShape:
    """Arguments of one invocation, kept as literal expression text.

    Attributes:
        positional: Positional argument expressions; starred ones keep their '*'
        keywords: (name, expression) pairs in call order; name None for '**mapping'
        location: Call site, None if unknown
    """

    positional: tuple[str, ...] = ()
    keywords: tuple[tuple[str | None, str], ...] = ()
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for expression in self.positional:
            if not expression.strip():
                raise ValueError("positional argument expression must not be blank")
        for name, expression in self.keywords:
            if not expression.strip():
                raise ValueError(f"keyword argument '{name}' expression must not be blank")

    @classmethod
    def of(cls, *positional: str, **keywords: str) -> CallShape:
        """Build a shape from expression strings, keywords in call order."""
        return cls(positional=positional, keywords=tuple(keywords.items()))

    @property
    def keyword_names(self) -> tuple[str | None, ...]:
        """Keyword names in the order the caller wrote them."""
        return tuple(name for name, _ in self.keywords)

    @property
    def has_unpacking(self) -> bool:
        """Shape contains *iterable or **mapping, so it is not statically known."""
        if any(name is None for name, _ in self.keywords):
            return True
        return any(expression.startswith("*") for expression in self.positional)

    def render(self) -> str:
        """Literal argument text, as written by the caller."""
        parts = list(self.positional)
        for name, expression in self.keywords:
            parts.append(f"**{expression}" if name is None else f"{name}={expression}")
        return ", ".join(parts)
