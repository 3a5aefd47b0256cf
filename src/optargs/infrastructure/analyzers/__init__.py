"""AST analyzers for annotated declarations."""

from optargs.infrastructure.analyzers.base import (
    DIRECTIVE_NAME,
    SourceText,
    annotation_text,
    declaration_location,
    expression_text,
    find_directive,
    is_directive,
    is_ellipsis,
    make_location,
    needs_parens,
)
from optargs.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from optargs.infrastructure.analyzers.directive_analyzer import DirectiveAnalyzer
from optargs.infrastructure.analyzers.function_analyzer import FunctionAnalyzer
from optargs.infrastructure.analyzers.stripper import strip_declaration

__all__ = [
    # Base utilities
    "DIRECTIVE_NAME",
    "SourceText",
    "annotation_text",
    "declaration_location",
    "expression_text",
    "find_directive",
    "is_directive",
    "is_ellipsis",
    "make_location",
    "needs_parens",
    "strip_declaration",
    # Analyzers
    "ClassAnalyzer",
    "DirectiveAnalyzer",
    "FunctionAnalyzer",
]
