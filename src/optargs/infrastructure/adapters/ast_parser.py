"""AST-based declaration parser adapter.

Implements DeclarationParserPort using Python AST.
Only top-level functions and classes carrying the opt_args directive
are turned into declarations.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

from optargs.domain.exceptions.parsing import DirectiveError, ParsingError
from optargs.domain.model.configuration import ExpansionConfig
from optargs.domain.model.declaration import AnnotatedDeclaration
from optargs.domain.ports.declaration_parser import DeclarationParserPort
from optargs.infrastructure.analyzers.base import SourceText, find_directive, make_location
from optargs.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from optargs.infrastructure.analyzers.directive_analyzer import DirectiveAnalyzer
from optargs.infrastructure.analyzers.function_analyzer import FunctionAnalyzer

logger = logging.getLogger(__name__)


class ASTDeclarationParser(DeclarationParserPort):
    """Parser using Python AST to find annotated declarations.

    Stateless between parse calls.
    FAIL-FIRST: raises ParsingError on any parsing issue.
    """

    def __init__(self) -> None:
        self._directive_analyzer = DirectiveAnalyzer()
        self._function_analyzer = FunctionAnalyzer()
        self._class_analyzer = ClassAnalyzer()

    def parse_file(
        self,
        path: Path,
        defaults: ExpansionConfig | None = None,
    ) -> tuple[AnnotatedDeclaration, ...]:
        """Parse single Python file.

        FAIL-FIRST: raises ParsingError on file errors, syntax errors.

        Args:
            path: Path to .py file
            defaults: Project defaults directive options are applied on

        Returns:
            Annotated declarations in source order

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        return self.parse_source(source, path, defaults)

    def parse_source(
        self,
        source: str,
        path: Path = Path("<string>"),
        defaults: ExpansionConfig | None = None,
    ) -> tuple[AnnotatedDeclaration, ...]:
        """Parse module source text.

        Args:
            source: Module source
            path: Path reported in locations and errors
            defaults: Project defaults directive options are applied on

        Returns:
            Annotated declarations in source order

        Raises:
            ParsingError: Syntax error
            DirectiveError: Malformed directive or unsupported declaration
        """
        defaults = defaults or ExpansionConfig()

        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e

        text = SourceText(source)
        found: list[AnnotatedDeclaration] = []

        for node in tree.body:
            match node:
                case ast.FunctionDef() | ast.AsyncFunctionDef() | ast.ClassDef():
                    directive = find_directive(node.decorator_list)
                    if directive is None:
                        continue
                    found.append(self._analyze(node, directive, path, text, defaults))

        logger.debug("%s: %d annotated declaration(s)", path, len(found))
        return tuple(found)

    def _analyze(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef,
        directive: ast.expr,
        path: Path,
        text: SourceText,
        defaults: ExpansionConfig,
    ) -> AnnotatedDeclaration:
        config = self._directive_analyzer.analyze(directive, path, defaults)

        if config.dispatcher_name(node.name) == node.name:
            raise DirectiveError(
                path,
                make_location(directive, path),
                f"rename '{node.name}' would shadow the declaration itself",
            )

        if isinstance(node, ast.ClassDef):
            declaration = self._class_analyzer.analyze(node, directive, path, text)
        else:
            declaration = self._function_analyzer.analyze(node, directive, path, text)

        return AnnotatedDeclaration(declaration=declaration, config=config)
