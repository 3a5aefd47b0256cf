"""Module emitter: expansions → importable Python module text.

Two layouts:
- emit(): standalone module with each stripped declaration followed by its
  dispatcher (or builder) and an `__all__` of declarations and exported
  dispatchers.
- emit_in_place(): the original module with every annotated declaration
  replaced by its stripped form plus generated code. Everything else in the
  module (imports, helpers, constants used by defaults) is kept.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from optargs.application.emitters.builder_emitter import BuilderEmitter
from optargs.application.emitters.python_emitter import PythonEmitter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from optargs.domain.model.expansion import Expansion

DEFAULT_HEADER = "# Generated by optargs from annotated declarations. Do not edit."

# Two blank lines between top-level definitions
_SEPARATOR = "\n\n\n"


class ModuleEmitter:
    """Assembles generated code into module text.

    Stateless - no state between emit() calls.
    """

    def __init__(self, header: str | None = DEFAULT_HEADER) -> None:
        """Initialize emitter.

        Args:
            header: Comment placed at the top of the module, None for none
        """
        self._header = header
        self._dispatchers = PythonEmitter()
        self._builders = BuilderEmitter()

    def emit_generated(self, expansion: Expansion) -> str:
        """Generated invocation form only: dispatcher function or builder class."""
        if expansion.dispatcher is None:
            return self._builders.emit(expansion)
        return self._dispatchers.emit(expansion.dispatcher)

    def emit_expansion(self, expansion: Expansion) -> str:
        """Stripped declaration followed by its generated invocation form."""
        blocks = []
        if expansion.declaration_source is not None:
            blocks.append(expansion.declaration_source)
        blocks.append(self.emit_generated(expansion))
        return _SEPARATOR.join(blocks)

    def emit(self, expansions: Iterable[Expansion]) -> str:
        """Standalone module for the expansions.

        Args:
            expansions: Expansions in source order

        Returns:
            Module source ending in a newline
        """
        expansions = tuple(expansions)
        names = [e.declaration.name for e in expansions]
        names.extend(e.name for e in expansions if e.config.export)

        blocks = [self._header] if self._header else []
        blocks.extend(self.emit_expansion(e) for e in expansions)
        blocks.append(_all_assignment(names))
        return _SEPARATOR.join(blocks) + "\n"

    def emit_in_place(self, source: str, expansions: Iterable[Expansion]) -> str:
        """Original module with annotated declarations expanded where they stand.

        Args:
            source: Module the expansions were parsed from
            expansions: Expansions whose locations span their declarations

        Returns:
            Module source ending in a newline

        Raises:
            ValueError: Expansion without a complete source location
        """
        expansions = tuple(expansions)
        lines = source.splitlines(keepends=True)

        # Bottom-up so earlier line numbers stay valid
        spans = sorted(((_span(e), e) for e in expansions), key=lambda item: item[0], reverse=True)
        for (first, last), expansion in spans:
            lines[first - 1 : last] = [self.emit_expansion(expansion) + "\n"]

        text = "".join(lines)

        exported = [e.name for e in expansions if e.config.export]
        tree = ast.parse(source)
        if _defines_all(tree):
            tail = _all_extension(exported) if exported else None
        else:
            tail = _all_assignment([*_public_names(tree), *exported])

        blocks = [self._header] if self._header else []
        blocks.append(text.rstrip("\n"))
        if tail:
            blocks.append(tail)
        return _SEPARATOR.join(blocks) + "\n"


def _span(expansion: Expansion) -> tuple[int, int]:
    """First and last source line of the declaration."""
    location = expansion.declaration.location
    if location is None or location.end_line is None:
        raise ValueError(f"'{expansion.declaration.name}' has no source span to expand in place")
    return location.line, location.end_line


def _defines_all(tree: ast.Module) -> bool:
    """Check for a top-level `__all__` binding."""
    for node in tree.body:
        match node:
            case ast.Assign(targets=targets):
                if any(isinstance(t, ast.Name) and t.id == "__all__" for t in targets):
                    return True
            case ast.AnnAssign(target=ast.Name(id="__all__")):
                return True
    return False


def _public_names(tree: ast.Module) -> list[str]:
    """Top-level defined names without a leading underscore, in source order."""
    names: list[str] = []
    for node in tree.body:
        match node:
            case ast.FunctionDef(name=name) | ast.AsyncFunctionDef(name=name) | ast.ClassDef(
                name=name
            ):
                names.append(name)
            case ast.Assign(targets=targets):
                names.extend(t.id for t in targets if isinstance(t, ast.Name))
            case ast.AnnAssign(target=ast.Name(id=name)):
                names.append(name)
    return list(dict.fromkeys(n for n in names if not n.startswith("_")))


def _all_extension(names: Iterable[str]) -> str:
    """Rebind an existing `__all__` of any sequence type as a list."""
    return "__all__ = [*__all__, " + ", ".join(repr(n) for n in names) + "]"


def _all_assignment(names: Iterable[str]) -> str:
    unique = list(dict.fromkeys(names))
    if not unique:
        return "__all__ = []"
    body = "".join(f"    {name!r},\n" for name in unique)
    return f"__all__ = [\n{body}]"
