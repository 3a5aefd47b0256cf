"""optargs domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc
"""

from optargs.domain.exceptions import (
    ConfigurationError,
    DirectiveError,
    ExpansionLimitError,
    OptArgsError,
    ParsingError,
    StructuralError,
    UnmatchedInvocationError,
)
from optargs.domain.model import (
    AnnotatedDeclaration,
    Branch,
    CallShape,
    CallSpec,
    Declaration,
    DeclarationKind,
    Dispatcher,
    DispatchStrategy,
    Expansion,
    ExpansionConfig,
    FallbackBranch,
    Location,
    MatchSpec,
    NamedSubset,
    OrderingMode,
    Parameter,
    ResolvedArgument,
    ResolvedOptional,
    Signature,
)
from optargs.domain.ports import DeclarationParserPort, ReporterProtocol

__all__ = [
    # Exceptions
    "OptArgsError",
    "ConfigurationError",
    "DirectiveError",
    "ExpansionLimitError",
    "ParsingError",
    "StructuralError",
    "UnmatchedInvocationError",
    # Enums
    "DeclarationKind",
    "DispatchStrategy",
    "OrderingMode",
    # Value objects
    "CallShape",
    "ExpansionConfig",
    "Location",
    "NamedSubset",
    "Parameter",
    "ResolvedOptional",
    "Signature",
    # Branches
    "Branch",
    "CallSpec",
    "FallbackBranch",
    "MatchSpec",
    "ResolvedArgument",
    # Entities
    "AnnotatedDeclaration",
    "Declaration",
    "Dispatcher",
    "Expansion",
    # Ports
    "DeclarationParserPort",
    "ReporterProtocol",
]
