"""Function analyzer: decorated def → CALLABLE Declaration."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from optargs.domain.exceptions.parsing import DirectiveError
from optargs.domain.model.declaration import Declaration
from optargs.domain.model.enums import DeclarationKind
from optargs.domain.model.parameter import Parameter
from optargs.infrastructure.analyzers.base import (
    annotation_text,
    declaration_location,
    expression_text,
    is_ellipsis,
    make_location,
)
from optargs.infrastructure.analyzers.stripper import strip_declaration

if TYPE_CHECKING:
    from pathlib import Path

    from optargs.infrastructure.analyzers.base import SourceText


class FunctionAnalyzer:
    """Extracts the parameter list of a function definition.

    Stateless analyzer - no state between analyze() calls.
    A parameter with a default is optional; the default `...` means
    "zero value of the annotation".
    """

    def analyze(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef,
        directive: ast.expr,
        path: Path,
        source: SourceText,
    ) -> Declaration:
        """Analyze function AST node.

        Args:
            node: Function or AsyncFunctionDef AST node
            directive: The node's opt_args decorator
            path: Source file path
            source: Module source for default text and pass-through

        Returns:
            Declaration with stripped pass-through source

        Raises:
            DirectiveError: *args or **kwargs in the signature
        """
        if node is None:
            raise TypeError("node must not be None")

        for variadic in (node.args.vararg, node.args.kwarg):
            if variadic is not None:
                raise DirectiveError(
                    path,
                    make_location(variadic, path),
                    f"variadic parameter '{variadic.arg}' cannot be made optional",
                )

        parameters, default_spans = self._extract_parameters(node.args, path, source)

        return Declaration(
            name=node.name,
            kind=DeclarationKind.CALLABLE,
            parameters=parameters,
            location=declaration_location(node, path),
            source=strip_declaration(node, directive, default_spans, source),
        )

    def _extract_parameters(
        self,
        args: ast.arguments,
        path: Path,
        source: SourceText,
    ) -> tuple[tuple[Parameter, ...], list[tuple[int, int]]]:
        """Extract parameters and the byte spans of their default markers.

        Args:
            args: Function arguments AST node
            path: Source file path
            source: Module source

        Returns:
            Parameters in declaration order, spans to strip
        """
        # Defaults are right-aligned across ALL positional params (posonly + regular)
        positional = [*args.posonlyargs, *args.args]
        first_with_default = len(positional) - len(args.defaults)

        slots: list[tuple[ast.arg, ast.expr | None, bool]] = []
        for i, arg in enumerate(positional):
            default = args.defaults[i - first_with_default] if i >= first_with_default else None
            slots.append((arg, default, False))

        # kw_defaults: aligned 1:1 with kwonlyargs, None if no default
        for arg, kw_default in zip(args.kwonlyargs, args.kw_defaults, strict=True):
            slots.append((arg, kw_default, True))

        params: list[Parameter] = []
        spans: list[tuple[int, int]] = []

        for position, (arg, default, keyword_only) in enumerate(slots):
            params.append(
                Parameter(
                    name=arg.arg,
                    position=position,
                    optional=default is not None,
                    default=self._default_text(default, source),
                    annotation=annotation_text(arg.annotation) if arg.annotation else None,
                    keyword_only=keyword_only,
                    location=make_location(arg, path),
                )
            )
            if default is not None:
                spans.append(source.default_span(source.end(arg), default))

        return tuple(params), spans

    @staticmethod
    def _default_text(default: ast.expr | None, source: SourceText) -> str | None:
        if default is None or is_ellipsis(default):
            return None
        return expression_text(default, source)
