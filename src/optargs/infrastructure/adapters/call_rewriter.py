"""Call-site rewriter: dispatcher calls in caller source → target calls.

Resolves each call against the same first-match decision table the
generated dispatcher uses, at expansion time. Nested dispatcher calls in
argument position are resolved first and their results are substituted into
the enclosing call's arguments.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from optargs.domain.exceptions.parsing import ParsingError
from optargs.domain.model.call_shape import CallShape
from optargs.infrastructure.analyzers.base import SourceText, make_location, needs_parens

if TYPE_CHECKING:
    from collections.abc import Mapping

    from optargs.domain.model.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class CallSiteRewriter:
    """Rewrites calls to known dispatchers.

    Stateless between rewrite() calls.
    FAIL-FIRST: the first unmatched call aborts the rewrite.
    """

    def __init__(self, dispatchers: Mapping[str, Dispatcher]) -> None:
        """Initialize rewriter.

        Args:
            dispatchers: Dispatcher name → Dispatcher
        """
        self._dispatchers = dict(dispatchers)

    @property
    def names(self) -> frozenset[str]:
        """Dispatcher names this rewriter recognizes."""
        return frozenset(self._dispatchers)

    def rewrite(self, source: str, path: Path = Path("<string>")) -> str:
        """Rewrite every dispatcher call in source.

        Args:
            source: Caller module source
            path: Path reported in locations and errors

        Returns:
            Source with each dispatcher call replaced by its resolution

        Raises:
            ParsingError: Source has a syntax error
            UnmatchedInvocationError: A call matches no branch
        """
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e

        text = SourceText(source)
        calls = sorted(
            (node for node in ast.walk(tree) if self._is_dispatch(node)),
            key=lambda node: (text.start(node), -text.end(node)),
        )
        logger.debug("%s: %d dispatcher call(s)", path, len(calls))

        return self._rewrite_region(text, 0, len(text), calls, path)

    def _is_dispatch(self, node: ast.AST) -> bool:
        match node:
            case ast.Call(func=ast.Name(id=name)):
                return name in self._dispatchers
        return False

    def _rewrite_region(
        self,
        text: SourceText,
        start: int,
        end: int,
        calls: list[ast.Call],
        path: Path,
    ) -> str:
        """Region text with its outermost dispatcher calls resolved."""
        edits: list[tuple[int, int, str]] = []
        cursor = start

        for call in calls:
            call_start, call_end = text.start(call), text.end(call)
            if call_start < cursor or call_end > end:
                continue
            edits.append((call_start, call_end, self._resolve(text, call, calls, path)))
            cursor = call_end

        return text.splice(start, end, edits)

    def _resolve(
        self,
        text: SourceText,
        call: ast.Call,
        calls: list[ast.Call],
        path: Path,
    ) -> str:
        """Resolve one call, arguments rewritten first."""

        def render(node: ast.expr) -> str:
            rendered = self._rewrite_region(text, text.start(node), text.end(node), calls, path)
            if needs_parens(node):
                return f"({rendered})"
            return rendered

        positional: list[str] = []
        for arg in call.args:
            if isinstance(arg, ast.Starred):
                positional.append(f"*{render(arg.value)}")
            else:
                positional.append(render(arg))

        keywords = tuple((kw.arg, render(kw.value)) for kw in call.keywords)

        shape = CallShape(
            positional=tuple(positional),
            keywords=keywords,
            location=make_location(call, path),
        )
        match call.func:
            case ast.Name(id=name):
                return self._dispatchers[name].resolve(shape)
        raise TypeError(f"call target must be a dispatcher name, got {ast.unparse(call.func)}")
