"""Pass-through reconstruction: declaration text minus engine directives."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import ast
    from collections.abc import Iterable

    from optargs.infrastructure.analyzers.base import SourceText


def strip_declaration(
    node: ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef,
    directive: ast.expr,
    default_spans: Iterable[tuple[int, int]],
    source: SourceText,
) -> str:
    """Re-emit a declaration without its directive and default markers.

    Everything else (other decorators, comments, formatting, body) is kept
    byte for byte. Defaults move into the dispatcher, so `= expr` after
    every parameter or field is removed.

    Args:
        node: Declaration node
        directive: Directive decorator to drop, on its own line(s)
        default_spans: Byte spans of `= expr` to remove
        source: Module source

    Returns:
        Stripped declaration text, without trailing newline
    """
    first_line = min([node.lineno, *(d.lineno for d in node.decorator_list)])
    start = source.line_start(first_line)
    end = source.end(node)

    edits = [
        (
            source.line_start(directive.lineno),
            source.next_line_start(directive.end_lineno or directive.lineno),
            "",
        ),
        *((span_start, span_end, "") for span_start, span_end in default_spans),
    ]
    return source.splice(start, end, edits)
