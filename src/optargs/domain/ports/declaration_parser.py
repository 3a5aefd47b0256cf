"""Declaration parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.configuration import ExpansionConfig
    from optargs.domain.model.declaration import AnnotatedDeclaration


class DeclarationParserPort(ABC):
    """Port for turning source into annotated declarations.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_source(
        self,
        source: str,
        path: Path = Path("<string>"),
        defaults: ExpansionConfig | None = None,
    ) -> tuple[AnnotatedDeclaration, ...]:
        """Parse source text.

        Args:
            source: Module source
            path: Path reported in locations and errors
            defaults: Project defaults directive options are applied on

        Returns:
            Every declaration marked with the directive, in source order

        Raises:
            ParsingError: If source cannot be parsed
        """
        ...

    @abstractmethod
    def parse_file(
        self,
        path: Path,
        defaults: ExpansionConfig | None = None,
    ) -> tuple[AnnotatedDeclaration, ...]:
        """Parse a source file.

        Args:
            path: Path to .py file
            defaults: Project defaults directive options are applied on

        Returns:
            Every declaration marked with the directive, in source order

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        ...
