"""Validated signature: required prefix and optional suffix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class ResolvedOptional:
    """Optional parameter with its default expression resolved.

    Attributes:
        parameter: The optional parameter
        default: Default expression: explicit, or the zero-value construction
        implicit: True if default was synthesized from the annotation
    """

    parameter: Parameter
    default: str
    implicit: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.parameter.optional:
            raise ValueError(f"parameter '{self.parameter.name}' is not optional")
        if not self.default.strip():
            raise ValueError(f"default of '{self.parameter.name}' must not be blank")

    @property
    def name(self) -> str:
        """Parameter name."""
        return self.parameter.name


@dataclass(frozen=True, slots=True)
class Signature:
    """Parameter list split at the suffix boundary.

    Attributes:
        required: Parameters before the split point, in order
        optional: Optional suffix with resolved defaults, in order
    """

    required: tuple[Parameter, ...]
    optional: tuple[ResolvedOptional, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for param in self.required:
            if param.optional:
                raise ValueError(f"required prefix contains optional parameter '{param.name}'")

    @property
    def split(self) -> int:
        """Number of required parameters (index of first optional)."""
        return len(self.required)

    @property
    def optional_names(self) -> tuple[str, ...]:
        """Optional parameter names in declaration order."""
        return tuple(opt.name for opt in self.optional)

    @property
    def parameter_count(self) -> int:
        """Total number of parameters."""
        return len(self.required) + len(self.optional)
