"""Class analyzer: decorated class with annotated fields → AGGREGATE Declaration."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from optargs.application.services.validator import zero_value_expression
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

# Annotations that declare class attributes or markers, not constructor fields
_NON_FIELD_ANNOTATIONS = frozenset({"ClassVar", "KW_ONLY"})


class ClassAnalyzer:
    """Extracts constructor fields from a dataclass-style class body.

    Stateless analyzer - no state between analyze() calls.
    Fields are `name: annotation [= default]` statements in body order.
    """

    def analyze(
        self,
        node: ast.ClassDef,
        directive: ast.expr,
        path: Path,
        source: SourceText,
    ) -> Declaration:
        """Analyze class AST node.

        Args:
            node: Class AST node
            directive: The node's opt_args decorator
            path: Source file path
            source: Module source for default text and pass-through

        Returns:
            Declaration with stripped pass-through source
        """
        if node is None:
            raise TypeError("node must not be None")

        params: list[Parameter] = []
        spans: list[tuple[int, int]] = []

        for stmt in node.body:
            match stmt:
                case ast.AnnAssign(target=ast.Name(id=name), annotation=annotation, value=value):
                    if _is_non_field(annotation):
                        continue
                    optional, default = _field_default(value, source)
                    params.append(
                        Parameter(
                            name=name,
                            position=len(params),
                            optional=optional,
                            default=default,
                            annotation=annotation_text(annotation),
                            location=make_location(stmt, path),
                        )
                    )
                    if optional:
                        spans.append(source.default_span(source.end(annotation), value))

        return Declaration(
            name=node.name,
            kind=DeclarationKind.AGGREGATE,
            parameters=tuple(params),
            location=declaration_location(node, path),
            source=strip_declaration(node, directive, spans, source),
        )


def _is_non_field(annotation: ast.expr) -> bool:
    """Check for ClassVar[...] / KW_ONLY, bare or module-qualified."""
    if isinstance(annotation, ast.Subscript):
        annotation = annotation.value
    match annotation:
        case ast.Name(id=name) | ast.Attribute(attr=name):
            return name in _NON_FIELD_ANNOTATIONS
    return False


def _field_default(value: ast.expr | None, source: SourceText) -> tuple[bool, str | None]:
    """(optional, default text) of a field's right-hand side.

    `field(default=x)` yields `x` and `field(default_factory=f)` yields `f()`.
    A `field(...)` call with neither leaves the field required.
    """
    if value is None:
        return False, None
    if is_ellipsis(value):
        return True, None

    match value:
        case ast.Call(func=ast.Name(id="field") | ast.Attribute(attr="field"), keywords=keywords):
            for keyword in keywords:
                if keyword.arg == "default":
                    return True, expression_text(keyword.value, source)
                if keyword.arg == "default_factory":
                    factory = source.segment(keyword.value)
                    return True, zero_value_expression(factory)
            return False, None

    return True, expression_text(value, source)
