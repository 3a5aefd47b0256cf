"""Declaration parameter value object."""

from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Parameter:
    """Function parameter or aggregate field.

    Annotation and default are opaque source text: never inspected,
    only echoed back into generated expansions.

    Attributes:
        name: Parameter name
        position: Index in declaration order (0-based)
        optional: Caller may omit it
        default: Explicit default expression, None for required parameters
            and for optional parameters with an implicit zero-value default
        annotation: Type annotation as string, None if untyped
        keyword_only: Must be passed as name=value to the target
        location: Source location, None for programmatic declarations
    """

    name: str
    position: int
    optional: bool = False
    default: str | None = None
    annotation: str | None = None
    keyword_only: bool = False
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")

        if not self.name.isidentifier() or keyword.iskeyword(self.name):
            raise ValueError(f"parameter name must be an identifier, got {self.name!r}")

        if self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")

        if self.default is not None and not self.optional:
            raise ValueError(f"required parameter '{self.name}' cannot carry a default")

        if self.default is not None and not self.default.strip():
            raise ValueError(f"default of '{self.name}' must not be blank")

    @property
    def has_implicit_default(self) -> bool:
        """Optional without an explicit default expression."""
        return self.optional and self.default is None
