"""Python emitter: Dispatcher → function with a match statement.

The branch table is rendered in enumeration order, one `case` per Branch,
with the fallback as the final `case _`. The subject pairs the positional
arguments with the keyword items in call order, so a keyword sequence is
recognized exactly as the call site presents it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.application.emitters._naming import NameAllocator, identifiers_in

if TYPE_CHECKING:
    from collections.abc import Iterable

    from optargs.domain.model.branch import MatchSpec
    from optargs.domain.model.dispatcher import Dispatcher

INDENT = "    "

# Builtins the generated body calls, plus the wildcard that never binds
_BODY_RESERVED = frozenset({"tuple", "map", "repr", "TypeError", "_"})


class PythonEmitter:
    """Renders dispatchers as Python source.

    Stateless - no state between emit() calls.
    """

    def emit(self, dispatcher: Dispatcher) -> str:
        """Render one dispatcher function.

        Args:
            dispatcher: Assembled decision table

        Returns:
            Function definition source, without trailing newline
        """
        placeholders, internal = self._allocate_names(dispatcher)
        args, kwargs, shown = internal["args"], internal["kwargs"], internal["shown"]

        lines = [
            f"def {dispatcher.name}(*{args}, **{kwargs}):",
            f'{INDENT}"""Call {dispatcher.target} with its optional arguments passed by name."""',
            f"{INDENT}match {args}, tuple({kwargs}.items()):",
        ]

        for branch in dispatcher.branches:
            lines.append(f"{INDENT * 2}case {self._pattern(branch.pattern, placeholders)}:")
            lines.append(f"{INDENT * 3}return {branch.expansion.render(placeholders)}")

        prefix, suffix = dispatcher.fallback.message_parts()
        lines.extend(
            [
                f"{INDENT * 2}case _:",
                f"{INDENT * 3}{shown} = \", \".join(",
                f"{INDENT * 4}[*map(repr, {args}), "
                f'*(f"{{k}}={{v!r}}" for k, v in {kwargs}.items())]',
                f"{INDENT * 3})",
                f"{INDENT * 3}raise TypeError({prefix!r} + {shown} + {suffix!r})",
            ]
        )
        return "\n".join(lines)

    def _allocate_names(self, dispatcher: Dispatcher) -> tuple[dict[str, str], dict[str, str]]:
        """Placeholder per parameter and the three internal names, all hygienic."""
        defaults = [
            argument.value
            for branch in dispatcher.branches
            for argument in branch.expansion.arguments
            if not argument.forwarded
        ]
        reserved = {
            *identifiers_in(defaults),
            *_BODY_RESERVED,
            dispatcher.name,
            dispatcher.target,
        }
        allocator = NameAllocator(reserved)

        # Every expansion carries one argument per parameter, in declaration order
        parameters = [argument.parameter for argument in dispatcher.branches[0].expansion.arguments]
        placeholders = allocator.allocate_all(parameters)
        internal = allocator.allocate_all(["args", "kwargs", "shown"])
        return placeholders, internal

    @staticmethod
    def _pattern(pattern: MatchSpec, placeholders: dict[str, str]) -> str:
        """`(a, b), (("c", c),)` for the given MatchSpec."""
        positional = _tuple_pattern(placeholders[name] for name in pattern.positional)
        keywords = _tuple_pattern(
            f"({name!r}, {placeholders[name]})" for name in pattern.keywords
        )
        return f"{positional}, {keywords}"


def _tuple_pattern(items: Iterable[str]) -> str:
    parts = list(items)
    if len(parts) == 1:
        return f"({parts[0]},)"
    return f"({', '.join(parts)})"
