"""Invocation exceptions: call shapes no branch recognizes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.domain.exceptions.base import OptArgsError

if TYPE_CHECKING:
    from optargs.domain.model.location import Location


class UnmatchedInvocationError(OptArgsError):
    """Dispatcher invoked with a shape that matches no branch.

    Raised by the fallback branch. The unmatched input is echoed verbatim.

    Attributes:
        dispatcher: Name of the invoked dispatcher
        arguments: Literal unmatched argument text
        message: Diagnostic produced by the fallback branch
        location: Call site, None if unknown
    """

    def __init__(
        self,
        dispatcher: str,
        arguments: str,
        message: str,
        location: Location | None = None,
    ) -> None:
        if not dispatcher:
            raise ValueError("dispatcher must not be empty")
        if not message:
            raise ValueError("message must not be empty")

        self.dispatcher = dispatcher
        self.arguments = arguments
        self.message = message
        self.location = location

        text = f"{dispatcher}(): {message}"
        if location is not None:
            text = f"{location}: {text}"
        super().__init__(text)
