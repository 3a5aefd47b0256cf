"""Infrastructure adapters for external interfaces."""

from optargs.infrastructure.adapters.ast_parser import ASTDeclarationParser
from optargs.infrastructure.adapters.call_rewriter import CallSiteRewriter

__all__ = [
    "ASTDeclarationParser",
    "CallSiteRewriter",
]
