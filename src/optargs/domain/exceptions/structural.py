"""Structural exceptions: declarations that cannot be expanded."""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.domain.exceptions.base import OptArgsError

if TYPE_CHECKING:
    from optargs.domain.model.location import Location


class StructuralError(OptArgsError):
    """Declaration shape rejected before any expansion work.

    Terminal for the declaration: no partial dispatcher is produced.

    Attributes:
        declaration: Name of the rejected declaration
        parameter: Offending parameter name
        reason: Why the declaration is invalid
        location: Position of the offending parameter, None if unknown
    """

    def __init__(
        self,
        declaration: str,
        parameter: str,
        reason: str,
        location: Location | None = None,
    ) -> None:
        # FAIL-FIRST: validate required parameters
        if not declaration:
            raise ValueError("declaration must not be empty")
        if not parameter:
            raise ValueError("parameter must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.declaration = declaration
        self.parameter = parameter
        self.reason = reason
        self.location = location

        message = f"'{declaration}': parameter '{parameter}': {reason}"
        if location is not None:
            message = f"{location}: {message}"
        super().__init__(message)


class ExpansionLimitError(StructuralError):
    """Too many optional parameters for the configured cap.

    Attributes:
        count: Number of optional parameters declared
        limit: Configured maximum
    """

    def __init__(
        self,
        declaration: str,
        parameter: str,
        count: int,
        limit: int,
        location: Location | None = None,
    ) -> None:
        self.count = count
        self.limit = limit
        super().__init__(
            declaration,
            parameter,
            f"{count} optional parameters exceed the configured maximum of {limit}",
            location,
        )
