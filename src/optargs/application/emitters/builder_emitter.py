"""Builder emitter: Expansion → builder class.

Alternative to the branch table when the optional suffix is large. The
builder takes the required arguments up front, exposes one chainable
setter per optional parameter and resolves every default once in build().
Generated size is linear in the number of parameters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.application.emitters._naming import NameAllocator, identifiers_in
from optargs.application.emitters.python_emitter import INDENT
from optargs.application.services.synthesizer import synthesize_branch

if TYPE_CHECKING:
    from optargs.domain.model.expansion import Expansion

_BODY_RESERVED = frozenset({"self", "TypeError"})


class BuilderEmitter:
    """Renders BUILDER-strategy expansions as Python classes.

    Stateless - no state between emit() calls.
    """

    def emit(self, expansion: Expansion) -> str:
        """Render the builder class for one expansion.

        Args:
            expansion: Expansion whose config selects the BUILDER strategy

        Returns:
            Class definition source, without trailing newline
        """
        declaration = expansion.declaration
        signature = expansion.signature
        name = expansion.name

        allocator = NameAllocator(
            {
                *identifiers_in(opt.default for opt in signature.optional),
                *_BODY_RESERVED,
                name,
                declaration.name,
            }
        )
        local_names = allocator.allocate_all(param.name for param in declaration.parameters)
        required = [local_names[param.name] for param in signature.required]

        # All optionals forwarded: build() passes its resolved locals through
        call = synthesize_branch(
            signature, signature.optional_names, declaration.name, declaration.kind
        ).expansion.render(local_names)

        init_params = ", ".join(["self", *required, "/"]) if required else "self"
        lines = [
            f"class {name}:",
            f'{INDENT}"""Builder for {declaration.name}: required arguments first, '
            'optional ones by setter."""',
            "",
            f"{INDENT}def __init__({init_params}):",
            f"{INDENT * 2}self._required = ({_tuple_items(required)})",
            f"{INDENT * 2}self._optional = {{}}",
            "",
            f"{INDENT}def _set(self, name, value):",
            f"{INDENT * 2}if name in self._optional:",
            f"{INDENT * 3}raise TypeError(f\"{name}: '{{name}}' is already set\")",
            f"{INDENT * 2}self._optional[name] = value",
            f"{INDENT * 2}return self",
        ]

        for opt in signature.optional:
            lines.extend(
                [
                    "",
                    f"{INDENT}def with_{opt.name}(self, value):",
                    f"{INDENT * 2}return self._set({opt.name!r}, value)",
                ]
            )

        lines.extend(["", f"{INDENT}def build(self):"])
        if required:
            lines.append(f"{INDENT * 2}{_tuple_items(required)} = self._required")
        for opt in signature.optional:
            lines.append(
                f"{INDENT * 2}{local_names[opt.name]} = self._optional[{opt.name!r}] "
                f"if {opt.name!r} in self._optional else {opt.default}"
            )
        lines.append(f"{INDENT * 2}return {call}")
        return "\n".join(lines)


def _tuple_items(names: list[str]) -> str:
    """Tuple display body: `a, b` or `a,` for a single item."""
    if len(names) == 1:
        return f"{names[0]},"
    return ", ".join(names)
