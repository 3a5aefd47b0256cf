"""High-level API: source in, expansions and generated source out.

Example:
    optargs = OptArgs.from_project()
    module = optargs.generate_file(Path("shapes.py"))
    caller = optargs.rewrite(caller_source, optargs.expand_file(Path("shapes.py")))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from optargs.application.emitters.module_emitter import DEFAULT_HEADER, ModuleEmitter
from optargs.application.services.expander import Expander
from optargs.domain.exceptions.parsing import ParsingError
from optargs.infrastructure.adapters.ast_parser import ASTDeclarationParser
from optargs.infrastructure.adapters.call_rewriter import CallSiteRewriter
from optargs.infrastructure.config import load_config

if TYPE_CHECKING:
    from collections.abc import Iterable

    from optargs.domain.model.configuration import ExpansionConfig
    from optargs.domain.model.declaration import AnnotatedDeclaration
    from optargs.domain.model.expansion import Expansion
    from optargs.domain.ports.declaration_parser import DeclarationParserPort
    from optargs.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class OptArgs:
    """Entry point tying parser, expander, emitter and rewriter together.

    Attributes:
        _defaults: Project defaults directive options are applied on
        _parser: Declaration parser
        _expander: Expansion pipeline
        _emitter: Module emitter
        _reporter: Receives every batch of expansions, None for silence
    """

    def __init__(
        self,
        defaults: ExpansionConfig | None = None,
        *,
        parser: DeclarationParserPort | None = None,
        header: str | None = DEFAULT_HEADER,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize facade.

        Args:
            defaults: Project defaults (built-in defaults if None)
            parser: Declaration parser (AST parser if None)
            header: Comment at the top of generated modules, None for none
            reporter: Optional reporter for expansion summaries
        """
        self._expander = Expander(defaults)
        self._defaults = self._expander.defaults
        self._parser = parser or ASTDeclarationParser()
        self._emitter = ModuleEmitter(header)
        self._reporter = reporter

    @classmethod
    def from_project(
        cls,
        root: Path | None = None,
        config_path: Path | None = None,
        *,
        header: str | None = DEFAULT_HEADER,
        reporter: ReporterProtocol | None = None,
    ) -> OptArgs:
        """Facade with defaults from [tool.optargs] in pyproject.toml.

        Raises:
            ConfigurationError: Invalid project configuration
        """
        return cls(load_config(root, config_path), header=header, reporter=reporter)

    @property
    def defaults(self) -> ExpansionConfig:
        """Project defaults."""
        return self._defaults

    def parse_source(
        self,
        source: str,
        path: Path = Path("<string>"),
    ) -> tuple[AnnotatedDeclaration, ...]:
        """Find annotated declarations in module source."""
        return self._parser.parse_source(source, path, self._defaults)

    def expand_source(self, source: str, path: Path = Path("<string>")) -> tuple[Expansion, ...]:
        """Parse and expand every annotated declaration in source.

        Raises:
            ParsingError: Syntax error or malformed directive
            StructuralError: Suffix invariant violated
        """
        expansions = self._expander.expand_all(self.parse_source(source, path))
        logger.debug("%s: expanded %d declaration(s)", path, len(expansions))
        if self._reporter is not None:
            self._reporter.report(expansions)
        return expansions

    def expand_file(self, path: Path) -> tuple[Expansion, ...]:
        """Parse and expand every annotated declaration in a file."""
        return self.expand_source(read_source(path), path)

    def generate(
        self,
        source: str,
        path: Path = Path("<string>"),
        *,
        in_place: bool = True,
    ) -> str:
        """Module source with dispatchers generated.

        Args:
            source: Annotated module source
            path: Path reported in locations and errors
            in_place: Keep the whole module (True) or emit only declarations
                and their dispatchers (False)

        Returns:
            Generated module source
        """
        return self.render(source, self.expand_source(source, path), in_place=in_place)

    def render(
        self,
        source: str,
        expansions: Iterable[Expansion],
        *,
        in_place: bool = True,
    ) -> str:
        """Module source for expansions already computed from source."""
        if in_place:
            return self._emitter.emit_in_place(source, expansions)
        return self._emitter.emit(expansions)

    def generate_file(self, path: Path, *, in_place: bool = True) -> str:
        """Generated module source for a file."""
        return self.generate(read_source(path), path, in_place=in_place)

    def rewrite(
        self,
        source: str,
        expansions: Iterable[Expansion],
        path: Path = Path("<string>"),
    ) -> str:
        """Replace dispatcher calls in caller source by their resolutions.

        Builder expansions have no call forms to resolve and are ignored.

        Raises:
            UnmatchedInvocationError: A call matches no branch
        """
        dispatchers = {e.dispatcher.name: e.dispatcher for e in expansions if e.dispatcher}
        return CallSiteRewriter(dispatchers).rewrite(source, path)


def read_source(path: Path) -> str:
    """File text, read failures raised as ParsingError."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParsingError(path, f"cannot read: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ParsingError(path, f"encoding error: {e}") from e
