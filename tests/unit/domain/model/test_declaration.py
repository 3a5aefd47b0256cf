"""Tests for domain/model/declaration.py."""

import pytest

from optargs.domain.model.declaration import AnnotatedDeclaration, Declaration
from optargs.domain.model.enums import DeclarationKind
from tests.factories import make_config, make_declaration, make_parameter


class TestDeclaration:
    """Tests for Declaration."""

    def test_optional_names_in_declaration_order(self) -> None:
        decl = make_declaration(optional={"x": "1", "y": None, "z": "3"})
        assert decl.optional_names == ("x", "y", "z")

    def test_no_parameters(self) -> None:
        decl = Declaration(name="f", kind=DeclarationKind.CALLABLE, parameters=())
        assert decl.optional_names == ()

    def test_position_mismatch_raises(self) -> None:
        params = (make_parameter("a", 0), make_parameter("b", 2))
        with pytest.raises(ValueError, match="has position 2, expected 1"):
            Declaration(name="f", kind=DeclarationKind.CALLABLE, parameters=params)

    def test_duplicate_names_raise(self) -> None:
        params = (make_parameter("a", 0), make_parameter("a", 1))
        with pytest.raises(ValueError, match="duplicate parameter name 'a'"):
            Declaration(name="f", kind=DeclarationKind.CALLABLE, parameters=params)

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(ValueError, match="declaration name must be an identifier"):
            Declaration(name="not valid", kind=DeclarationKind.CALLABLE, parameters=())


class TestAnnotatedDeclaration:
    """Tests for AnnotatedDeclaration."""

    def test_pairs_declaration_and_config(self) -> None:
        decl = make_declaration()
        config = make_config(shuffle=True)
        item = AnnotatedDeclaration(declaration=decl, config=config)
        assert item.declaration is decl
        assert item.config.shuffled is True
