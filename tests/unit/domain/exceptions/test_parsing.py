"""Tests for domain/exceptions/parsing.py."""

from pathlib import Path

import pytest

from optargs.domain.exceptions.base import OptArgsError
from optargs.domain.exceptions.parsing import DirectiveError, ParsingError
from optargs.domain.model.location import Location


class TestParsingError:
    """Tests for ParsingError exception."""

    def test_is_optargs_error(self) -> None:
        assert issubclass(ParsingError, OptArgsError)

    def test_attributes(self) -> None:
        err = ParsingError(Path("test.py"), "syntax error")
        assert err.path == Path("test.py")
        assert err.reason == "syntax error"

    def test_message_format(self) -> None:
        result = str(ParsingError(Path("src/main.py"), "invalid syntax"))
        assert "Failed to parse" in result
        assert "main.py" in result
        assert "invalid syntax" in result

    def test_none_path_raises(self) -> None:
        with pytest.raises(TypeError, match="path must not be None"):
            ParsingError(None, "error")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must be non-empty"):
            ParsingError(Path("test.py"), "")


class TestDirectiveError:
    """Tests for DirectiveError exception."""

    def test_is_parsing_error(self) -> None:
        assert issubclass(DirectiveError, ParsingError)

    def test_has_location(self) -> None:
        loc = Location(file=Path("test.py"), line=10, column=5)
        err = DirectiveError(Path("test.py"), loc, "bad option")
        assert err.location == loc
        assert "bad option at test.py:10:5" in str(err)

    def test_none_location_raises(self) -> None:
        with pytest.raises(TypeError, match="location must not be None"):
            DirectiveError(Path("test.py"), None, "bad")  # type: ignore[arg-type]
