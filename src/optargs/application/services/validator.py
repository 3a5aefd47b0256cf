"""Suffix validator: split a parameter list at its first optional parameter.

FAIL-FIRST: StructuralError before any combination work begins.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from optargs.domain.exceptions.structural import StructuralError
from optargs.domain.model.signature import ResolvedOptional, Signature

if TYPE_CHECKING:
    from optargs.domain.model.declaration import Declaration
    from optargs.domain.model.parameter import Parameter

# Primary expressions a call can follow without parentheses
_PRIMARY = (ast.Name, ast.Attribute, ast.Subscript, ast.Call)


def validate_suffix(declaration: Declaration) -> Signature:
    """Check the suffix invariant and resolve optional defaults.

    Once an optional parameter is seen, every later parameter must be
    optional. Optional parameters without an explicit default get the
    zero value of their annotation.

    Args:
        declaration: Declaration to validate

    Returns:
        Signature with the required prefix and resolved optional suffix

    Raises:
        StructuralError: Required parameter after an optional one,
            or implicit default without annotation
    """
    required: list[Parameter] = []
    optional: list[ResolvedOptional] = []

    for param in declaration.parameters:
        if not param.optional:
            if optional:
                raise StructuralError(
                    declaration.name,
                    param.name,
                    "non-default parameters must come before default parameters "
                    f"(first optional is '{optional[0].name}')",
                    param.location or declaration.location,
                )
            required.append(param)
            continue

        optional.append(_resolve_default(declaration, param))

    return Signature(required=tuple(required), optional=tuple(optional))


def zero_value_expression(annotation: str) -> str:
    """Expression constructing the zero value of a type.

    The type is never checked for zero-constructibility here;
    an unsuitable type fails only when the default is evaluated.

    Args:
        annotation: Annotation source text

    Returns:
        `annotation()`, parenthesized unless a name, attribute, subscript or call
    """
    text = annotation.strip()
    try:
        node = ast.parse(text, mode="eval").body
    except SyntaxError:
        return f"({text})()"
    if isinstance(node, _PRIMARY):
        return f"{text}()"
    return f"({text})()"


def _resolve_default(declaration: Declaration, param: Parameter) -> ResolvedOptional:
    if param.default is not None:
        return ResolvedOptional(parameter=param, default=param.default)

    if param.annotation is None:
        raise StructuralError(
            declaration.name,
            param.name,
            "implicit default needs a type annotation to construct the zero value",
            param.location or declaration.location,
        )

    return ResolvedOptional(
        parameter=param,
        default=zero_value_expression(param.annotation),
        implicit=True,
    )
