"""Domain exceptions."""

from optargs.domain.exceptions.base import OptArgsError
from optargs.domain.exceptions.configuration import ConfigurationError
from optargs.domain.exceptions.invocation import UnmatchedInvocationError
from optargs.domain.exceptions.parsing import DirectiveError, ParsingError
from optargs.domain.exceptions.structural import ExpansionLimitError, StructuralError

__all__ = [
    "OptArgsError",
    "ConfigurationError",
    "DirectiveError",
    "ExpansionLimitError",
    "ParsingError",
    "StructuralError",
    "UnmatchedInvocationError",
]
