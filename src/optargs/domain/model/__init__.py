"""Domain model entities."""

from optargs.domain.model.branch import (
    Branch,
    CallSpec,
    FallbackBranch,
    MatchSpec,
    NamedSubset,
    ResolvedArgument,
)
from optargs.domain.model.call_shape import CallShape
from optargs.domain.model.configuration import ExpansionConfig
from optargs.domain.model.declaration import AnnotatedDeclaration, Declaration
from optargs.domain.model.dispatcher import Dispatcher
from optargs.domain.model.enums import DeclarationKind, DispatchStrategy, OrderingMode
from optargs.domain.model.expansion import Expansion
from optargs.domain.model.location import Location
from optargs.domain.model.parameter import Parameter
from optargs.domain.model.signature import ResolvedOptional, Signature

__all__ = [
    # Enums
    "DeclarationKind",
    "DispatchStrategy",
    "OrderingMode",
    # Value objects
    "CallShape",
    "Location",
    "NamedSubset",
    "Parameter",
    "ResolvedOptional",
    "Signature",
    "ExpansionConfig",
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
]
