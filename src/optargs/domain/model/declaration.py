"""Declaration entity: the input of one expansion."""

from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.configuration import ExpansionConfig
    from optargs.domain.model.enums import DeclarationKind
    from optargs.domain.model.location import Location
    from optargs.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class Declaration:
    """Function or aggregate declaration with its ordered parameter list.

    Attributes:
        name: Declared name, also the expansion target
        kind: CALLABLE (call shape) or AGGREGATE (construction shape)
        parameters: Parameters in declaration order
        location: Source location, None for programmatic declarations
        source: Declaration text with engine directives stripped,
            None when there is no source to pass through
    """

    name: str
    kind: DeclarationKind
    parameters: tuple[Parameter, ...]
    location: Location | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name.isidentifier() or keyword.iskeyword(self.name):
            raise ValueError(f"declaration name must be an identifier, got {self.name!r}")

        for index, param in enumerate(self.parameters):
            if param.position != index:
                raise ValueError(
                    f"parameter '{param.name}' has position {param.position}, expected {index}"
                )

        seen: set[str] = set()
        for param in self.parameters:
            if param.name in seen:
                raise ValueError(f"duplicate parameter name '{param.name}'")
            seen.add(param.name)

    @property
    def optional_names(self) -> tuple[str, ...]:
        """Names of optional parameters in declaration order."""
        return tuple(p.name for p in self.parameters if p.optional)


@dataclass(frozen=True, slots=True)
class AnnotatedDeclaration:
    """Declaration paired with the configuration its directive resolved to.

    Attributes:
        declaration: Parsed declaration
        config: Effective expansion configuration
    """

    declaration: Declaration
    config: ExpansionConfig
