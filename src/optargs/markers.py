"""Runtime marker for annotated declarations.

`opt_args` does nothing at run time; it only lets annotated modules be
imported before they are expanded. The generator reads the decorator from
source and strips it from its output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, overload

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

_OPTIONS = frozenset({"shuffle", "export", "rename", "builder", "warn_threshold", "max_optional"})


@overload
def opt_args(target: T, /) -> T: ...


@overload
def opt_args(**options: object) -> Callable[[T], T]: ...


def opt_args(target: object = None, /, **options: object) -> object:
    """Mark a function or class for optional argument expansion.

    Usable bare (`@opt_args`) or with options (`@opt_args(shuffle=True)`).

    Raises:
        TypeError: Unknown option
    """
    unknown = set(options) - _OPTIONS
    if unknown:
        raise TypeError(f"unknown opt_args option(s): {', '.join(sorted(unknown))}")

    if target is not None:
        return target

    def mark(inner: T) -> T:
        return inner

    return mark
