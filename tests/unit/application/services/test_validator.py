"""Tests for application/services/validator.py."""

import pytest

from optargs.application.services.validator import validate_suffix, zero_value_expression
from optargs.domain.exceptions.structural import StructuralError
from optargs.domain.model.declaration import Declaration
from optargs.domain.model.enums import DeclarationKind
from optargs.domain.model.parameter import Parameter
from tests.factories import make_declaration, make_location, make_parameter


class TestValidateSuffix:
    """Tests for validate_suffix()."""

    def test_split_point(self) -> None:
        sig = validate_suffix(make_declaration(required=("a", "b"), optional={"c": "5"}))
        assert sig.split == 2
        assert [p.name for p in sig.required] == ["a", "b"]
        assert sig.optional_names == ("c",)

    def test_explicit_default_kept_verbatim(self) -> None:
        sig = validate_suffix(make_declaration(optional={"c": "[1,  2]"}))
        assert sig.optional[0].default == "[1,  2]"
        assert sig.optional[0].implicit is False

    def test_implicit_default_is_zero_value(self) -> None:
        decl = make_declaration(optional={"c": None}, annotations={"c": "list[int]"})
        opt = validate_suffix(decl).optional[0]
        assert opt.default == "list[int]()"
        assert opt.implicit is True

    def test_no_optional_parameters(self) -> None:
        sig = validate_suffix(make_declaration(optional={}))
        assert sig.split == 2
        assert sig.optional == ()

    def test_all_optional(self) -> None:
        sig = validate_suffix(make_declaration(required=(), optional={"a": "1", "b": "2"}))
        assert sig.split == 0

    def test_required_after_optional_raises(self) -> None:
        loc = make_location(line=2, column=14)
        params = (
            make_parameter("a", 0),
            make_parameter("b", 1, default="1"),
            Parameter(name="c", position=2, location=loc),
        )
        decl = Declaration(name="f", kind=DeclarationKind.CALLABLE, parameters=params)

        with pytest.raises(StructuralError) as exc_info:
            validate_suffix(decl)

        err = exc_info.value
        assert err.declaration == "f"
        assert err.parameter == "c"
        assert err.location == loc
        assert "first optional is 'b'" in err.reason

    def test_error_falls_back_to_declaration_location(self) -> None:
        loc = make_location(line=9)
        params = (make_parameter("a", 0, default="1"), make_parameter("b", 1))
        decl = Declaration(name="f", kind=DeclarationKind.CALLABLE, parameters=params, location=loc)

        with pytest.raises(StructuralError) as exc_info:
            validate_suffix(decl)
        assert exc_info.value.location == loc

    def test_implicit_default_without_annotation_raises(self) -> None:
        decl = make_declaration(optional={"c": None})
        with pytest.raises(StructuralError, match="needs a type annotation"):
            validate_suffix(decl)


class TestZeroValueExpression:
    """Tests for zero_value_expression()."""

    @pytest.mark.parametrize(
        ("annotation", "expected"),
        [
            ("int", "int()"),
            ("pkg.Point", "pkg.Point()"),
            ("dict[str, int]", "dict[str, int]()"),
            (" str ", "str()"),
            ("int | None", "(int | None)()"),
            ("Callable[[], int] | None", "(Callable[[], int] | None)()"),
            ("Foo[int] | Bar[int]", "(Foo[int] | Bar[int])()"),
            ("list[int] | dict[str, int]", "(list[int] | dict[str, int])()"),
            ("functools.partial(dict, a=1)", "functools.partial(dict, a=1)()"),
            ("lambda: {}", "(lambda: {})()"),
        ],
    )
    def test_rendering(self, annotation: str, expected: str) -> None:
        assert zero_value_expression(annotation) == expected
