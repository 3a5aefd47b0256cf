"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.domain.exceptions.base import OptArgsError

if TYPE_CHECKING:
    from pathlib import Path

    from optargs.domain.model.location import Location


class ParsingError(OptArgsError):
    """Error during source code parsing.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class DirectiveError(ParsingError):
    """Malformed or unsupported declaration under an opt_args directive.

    Attributes:
        path: File containing the directive
        location: Location of the offending node
        reason: What is wrong with it
    """

    def __init__(
        self,
        path: Path,
        location: Location,
        reason: str,
    ) -> None:
        if location is None:
            raise TypeError("location must not be None")

        self.location = location
        super().__init__(path, f"{reason} at {location}")
