"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from optargs.domain.exceptions.base import OptArgsError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(OptArgsError):
    """Invalid project configuration.

    Attributes:
        source: Config file, None for programmatic configuration
        key: Offending key
        reason: Why the value is rejected
    """

    def __init__(self, source: Path | None, key: str, reason: str) -> None:
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.key = key
        self.reason = reason
        where = f"{source}: " if source is not None else ""
        super().__init__(f"{where}invalid '{key}': {reason}")
