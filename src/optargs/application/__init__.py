"""Application layer for optional argument expansion.

Components:
- services: Expansion pipeline (validate, enumerate, synthesize, assemble)
- emitters: Generated source (dispatcher functions, builder classes, modules)
- reporters: Output formatting (PlainText, JSON, Console)
"""

from optargs.application.emitters import (
    BuilderEmitter,
    ModuleEmitter,
    PythonEmitter,
)
from optargs.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from optargs.application.services import (
    Expander,
    compute_combinations,
    count_combinations,
    iter_combinations,
    validate_suffix,
)

__all__ = [
    # Services
    "Expander",
    "compute_combinations",
    "count_combinations",
    "iter_combinations",
    "validate_suffix",
    # Emitters
    "BuilderEmitter",
    "ModuleEmitter",
    "PythonEmitter",
    # Reporters
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
