"""Tests for ConsoleReporter."""

import re

import pytest

from optargs.application.reporters.console import ConsoleConfig, ConsoleReporter
from tests.factories import make_declaration, make_expansion

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text: str) -> str:
    return _ANSI.sub("", text)


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.show_branches is True
        assert config.max_branches is None
        assert config.width == 120

    def test_negative_max_branches_raises(self) -> None:
        with pytest.raises(ValueError, match="max_branches must be >= 0"):
            ConsoleConfig(max_branches=-1)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_returns_string(self) -> None:
        assert isinstance(ConsoleReporter().report((make_expansion(),)), str)

    def test_header(self) -> None:
        text = _plain(ConsoleReporter().report((make_expansion(),)))
        assert "OPTIONAL ARGUMENT EXPANSION" in text
        assert "Declarations: 1" in text

    def test_table_rows(self) -> None:
        text = _plain(ConsoleReporter().report((make_expansion(),)))
        assert "f_opt(a, b, c=c)" in text
        assert "f(a, b, 5)" in text

    def test_subscripted_default_not_treated_as_markup(self) -> None:
        decl = make_declaration(optional={"c": None}, annotations={"c": "list[int]"})
        text = _plain(ConsoleReporter().report((make_expansion(decl),)))
        assert "list[int]()" in text
        assert "zero value" in text

    def test_max_branches(self) -> None:
        decl = make_declaration(optional={"c": "1", "d": "2"})
        reporter = ConsoleReporter(ConsoleConfig(max_branches=1))
        text = _plain(reporter.report((make_expansion(decl),)))
        assert "3 more" in text

    def test_branches_hidden(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(show_branches=False))
        text = _plain(reporter.report((make_expansion(),)))
        assert "Call form" not in text
