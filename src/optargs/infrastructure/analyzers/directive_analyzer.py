"""Directive analyzer: @opt_args(...) keywords → ExpansionConfig."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from optargs.domain.exceptions.parsing import DirectiveError
from optargs.infrastructure.analyzers.base import make_location

if TYPE_CHECKING:
    from pathlib import Path

    from optargs.domain.model.configuration import ExpansionConfig


class DirectiveAnalyzer:
    """Reads directive options.

    Stateless analyzer - no state between analyze() calls.
    Option values must be literals; they are never evaluated.
    """

    def analyze(
        self,
        decorator: ast.expr,
        path: Path,
        defaults: ExpansionConfig,
    ) -> ExpansionConfig:
        """Apply directive options on top of defaults.

        Args:
            decorator: The directive decorator expression
            path: Source file path
            defaults: Project-level configuration

        Returns:
            Effective configuration for the decorated declaration

        Raises:
            DirectiveError: Positional arguments, **options, non-literal
                values, unknown options or invalid values
        """
        if not isinstance(decorator, ast.Call):
            return defaults

        location = make_location(decorator, path)

        if decorator.args:
            raise DirectiveError(path, location, "opt_args takes keyword options only")

        options: dict[str, object] = {}
        for keyword in decorator.keywords:
            if keyword.arg is None:
                raise DirectiveError(path, location, "opt_args does not accept **options")
            try:
                options[keyword.arg] = ast.literal_eval(keyword.value)
            except ValueError as e:
                raise DirectiveError(
                    path,
                    make_location(keyword.value, path),
                    f"option '{keyword.arg}' must be a literal",
                ) from e

        try:
            return defaults.with_options(options)
        except (TypeError, ValueError) as e:
            raise DirectiveError(path, location, str(e)) from e
