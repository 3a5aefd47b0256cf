"""Tests for domain/exceptions/invocation.py."""

import pytest

from optargs.domain.exceptions.base import OptArgsError
from optargs.domain.exceptions.invocation import UnmatchedInvocationError
from tests.factories import make_location


class TestUnmatchedInvocationError:
    """Tests for UnmatchedInvocationError exception."""

    def test_is_optargs_error(self) -> None:
        assert issubclass(UnmatchedInvocationError, OptArgsError)

    def test_message_names_dispatcher(self) -> None:
        err = UnmatchedInvocationError("f_opt", "1, d=2", "no match")
        assert str(err) == "f_opt(): no match"
        assert err.arguments == "1, d=2"

    def test_message_with_location(self) -> None:
        err = UnmatchedInvocationError("f_opt", "", "no match", make_location(line=4, column=2))
        assert str(err) == "/test/file.py:4:2: f_opt(): no match"

    def test_empty_arguments_allowed(self) -> None:
        assert UnmatchedInvocationError("f_opt", "", "no match").arguments == ""

    def test_empty_dispatcher_raises(self) -> None:
        with pytest.raises(ValueError, match="dispatcher must not be empty"):
            UnmatchedInvocationError("", "1", "no match")
