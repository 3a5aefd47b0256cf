"""Expansion pipeline: validate, enumerate, synthesize, assemble."""

from optargs.application.services.assembler import assemble
from optargs.application.services.combinations import (
    compute_combinations,
    count_combinations,
    iter_combinations,
)
from optargs.application.services.expander import Expander
from optargs.application.services.synthesizer import synthesize_branch, synthesize_fallback
from optargs.application.services.validator import validate_suffix, zero_value_expression

__all__ = [
    "Expander",
    "assemble",
    "compute_combinations",
    "count_combinations",
    "iter_combinations",
    "synthesize_branch",
    "synthesize_fallback",
    "validate_suffix",
    "zero_value_expression",
]
