"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from optargs.domain.model.location import Location

DIRECTIVE_NAME = "opt_args"


def make_location(node: ast.AST, path: Path) -> Location:
    """Create Location from AST node.

    Args:
        node: AST node with position info
        path: Source file path

    Returns:
        Location pointing to node

    Raises:
        DirectiveError: If node has no line info (FAIL-FIRST)
    """
    from optargs.domain.exceptions.parsing import DirectiveError
    from optargs.domain.model.location import Location

    lineno = getattr(node, "lineno", None)
    if lineno is None:
        raise DirectiveError(
            path,
            Location(file=path, line=1, column=0),
            "node has no line info",
        )

    return Location(
        file=path,
        line=lineno,
        column=getattr(node, "col_offset", 0),
        end_line=getattr(node, "end_lineno", None),
        end_column=getattr(node, "end_col_offset", None),
    )


def declaration_location(
    node: ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef,
    path: Path,
) -> Location:
    """Location spanning a declaration from its first decorator line to its end.

    The span covers exactly the lines replaced when a module is expanded in place.
    """
    location = make_location(node, path)
    first_line = min([node.lineno, *(d.lineno for d in node.decorator_list)])
    return dataclasses.replace(location, line=first_line, column=0)


def annotation_text(node: ast.expr) -> str:
    """Annotation as source text, string annotations unquoted.

    `x: "Point"` yields `Point`, so the zero value is constructible.
    """
    match node:
        case ast.Constant(value=str(text)):
            return text
    return ast.unparse(node)


# Expressions whose own span leaves out parentheses they need as an argument
_NEEDS_PARENS = (ast.NamedExpr, ast.GeneratorExp)


def needs_parens(node: ast.expr) -> bool:
    """Check if node must be parenthesized when placed in an argument list."""
    return isinstance(node, _NEEDS_PARENS)


def expression_text(node: ast.expr, source: SourceText) -> str:
    """Source text of node, usable as an argument or a keyword value."""
    text = source.segment(node)
    return f"({text})" if needs_parens(node) else text


def is_ellipsis(node: ast.expr | None) -> bool:
    """Check if node is the `...` implicit-default marker."""
    return isinstance(node, ast.Constant) and node.value is Ellipsis


def is_directive(decorator: ast.expr) -> bool:
    """Check if decorator is @opt_args, @opt_args(...) or @<module>.opt_args(...)."""
    target = decorator.func if isinstance(decorator, ast.Call) else decorator
    match target:
        case ast.Name(id=name) | ast.Attribute(attr=name):
            return name == DIRECTIVE_NAME
    return False


def find_directive(decorators: Iterable[ast.expr]) -> ast.expr | None:
    """Return the first directive decorator, None if absent."""
    for decorator in decorators:
        if is_directive(decorator):
            return decorator
    return None


# =============================================================================
# SOURCE TEXT - byte-accurate spans for pass-through and call rewriting
# =============================================================================


@dataclass(frozen=True)
class SourceText:
    """Module source addressable by AST positions.

    ast column offsets count UTF-8 bytes, so all slicing is done on bytes.

    Attributes:
        text: Module source
    """

    text: str
    _data: bytes = field(init=False, repr=False)
    _line_starts: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        data = self.text.encode("utf-8")
        starts = [0]
        for line in data.splitlines(keepends=True):
            starts.append(starts[-1] + len(line))
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_line_starts", tuple(starts))

    def offset(self, line: int, column: int) -> int:
        """Byte offset of (1-based line, byte column)."""
        if not 1 <= line <= len(self._line_starts):
            raise ValueError(f"line {line} outside source")
        return self._line_starts[line - 1] + column

    def line_start(self, line: int) -> int:
        """Byte offset of the first byte of a line."""
        return self.offset(line, 0)

    def next_line_start(self, line: int) -> int:
        """Byte offset just after a line, including its newline."""
        if line >= len(self._line_starts):
            return len(self._data)
        return self._line_starts[line]

    def start(self, node: ast.AST) -> int:
        """Byte offset where node starts."""
        return self.offset(node.lineno, node.col_offset)  # type: ignore[attr-defined]

    def end(self, node: ast.AST) -> int:
        """Byte offset just after node."""
        return self.offset(node.end_lineno, node.end_col_offset)  # type: ignore[attr-defined]

    def slice(self, start: int, end: int) -> str:
        """Decoded text between two byte offsets."""
        return self._data[start:end].decode("utf-8")

    def segment(self, node: ast.AST) -> str:
        """Exact source text of node."""
        return self.slice(self.start(node), self.end(node))

    def splice(
        self,
        start: int,
        end: int,
        edits: Iterable[tuple[int, int, str]],
    ) -> str:
        """Text of [start, end) with non-overlapping edits applied.

        Args:
            start: Region start (byte offset)
            end: Region end (byte offset)
            edits: (edit_start, edit_end, replacement) inside the region

        Returns:
            Region text with replacements
        """
        pieces: list[bytes] = []
        cursor = start
        for edit_start, edit_end, replacement in sorted(edits):
            if edit_start < cursor or edit_end > end:
                raise ValueError(f"edit [{edit_start}, {edit_end}) overlaps or leaves region")
            pieces.append(self._data[cursor:edit_start])
            pieces.append(replacement.encode("utf-8"))
            cursor = edit_end
        pieces.append(self._data[cursor:end])
        return b"".join(pieces).decode("utf-8")

    def default_span(self, target_end: int, default: ast.expr) -> tuple[int, int]:
        """Byte span of `= default` following a parameter or field target.

        Parentheses around the default are part of the span; the default
        node's own position leaves them out. Only `=`, `(`, `)`, whitespace
        and comments can sit between the target, the default and its closers.

        Args:
            target_end: Byte offset just after the name or annotation
            default: Default expression node

        Returns:
            (start, end) covering the marker and any wrapping parentheses
        """
        default_start = self.start(default)
        prefix = self.slice(target_end, default_start)
        equals = _code_index(prefix, "=")
        if equals < 0:
            raise ValueError(f"no '=' before default at byte {default_start}")

        # Parentheses closing a parenthesized annotation stay with it
        head = prefix[:equals].rstrip()
        opened = sum(1 for char in _code_chars(prefix[equals:]) if char == "(")

        end = self.end(default)
        if opened:
            tail = self._data[end:].decode("utf-8")
            end += len(_closers(tail, opened).encode("utf-8"))
        return target_end + len(head.encode("utf-8")), end

    def __len__(self) -> int:
        """Size of the source in bytes."""
        return len(self._data)


def _code_chars(text: str) -> Iterator[str]:
    """Characters of text outside `#` comments."""
    in_comment = False
    for char in text:
        if char == "#":
            in_comment = True
        elif char == "\n":
            in_comment = False
        if not in_comment:
            yield char


def _code_index(text: str, target: str) -> int:
    """Index of the first target character outside comments, -1 if absent."""
    in_comment = False
    for index, char in enumerate(text):
        if char == "#":
            in_comment = True
        elif char == "\n":
            in_comment = False
        elif char == target and not in_comment:
            return index
    return -1


def _closers(text: str, count: int) -> str:
    """Shortest prefix of text holding `count` closing parentheses.

    Args:
        text: Source following a parenthesized expression
        count: Parentheses to consume

    Raises:
        ValueError: A non-trivia character comes before the last closer
    """
    in_comment = False
    for index, char in enumerate(text):
        if char == "\n":
            in_comment = False
        elif in_comment:
            continue
        elif char == "#":
            in_comment = True
        elif char == ")":
            count -= 1
            if count == 0:
                return text[: index + 1]
        elif not char.isspace() and char != "\\":
            raise ValueError(f"unexpected {char!r} before closing parenthesis")
    raise ValueError("unbalanced parentheses around default")
