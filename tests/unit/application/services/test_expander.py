"""Tests for application/services/expander.py."""

import logging

import pytest

from optargs.application.services.expander import Expander
from optargs.domain.exceptions.configuration import ConfigurationError
from optargs.domain.exceptions.structural import ExpansionLimitError, StructuralError
from optargs.domain.model.declaration import AnnotatedDeclaration, Declaration
from optargs.domain.model.enums import DeclarationKind, OrderingMode
from tests.factories import make_config, make_declaration, make_parameter


def _optional(n: int) -> dict[str, str | None]:
    return {f"p{i}": str(i) for i in range(n)}


class TestExpand:
    """Tests for Expander.expand()."""

    def test_uses_defaults_without_config(self) -> None:
        expander = Expander(make_config(shuffle=True))
        expansion = expander.expand(make_declaration())
        assert expansion.config.ordering is OrderingMode.SHUFFLED

    def test_branches_in_enumeration_order(self) -> None:
        decl = make_declaration(optional={"c": "1", "d": "2"})
        expansion = Expander().expand(decl)
        assert expansion.dispatcher is not None
        assert [b.subset for b in expansion.dispatcher.branches] == [
            (),
            ("c",),
            ("d",),
            ("c", "d"),
        ]

    def test_zero_optional_has_single_branch(self) -> None:
        expansion = Expander().expand(make_declaration(optional={}))
        assert expansion.dispatcher is not None
        assert expansion.branch_count == 1
        assert expansion.dispatcher.branches[0].subset == ()
        assert len(expansion.dispatcher) == 2

    def test_idempotent(self) -> None:
        decl = make_declaration(optional={"c": "1", "d": "2", "e": "3"})
        config = make_config(shuffle=True)
        assert Expander().expand(decl, config) == Expander().expand(decl, config)

    def test_builder_skips_enumeration(self) -> None:
        decl = make_declaration(optional=_optional(12))
        expansion = Expander().expand(decl, make_config(builder=True))
        assert expansion.dispatcher is None
        assert len(expansion.signature.optional) == 12

    def test_structural_error_propagates(self) -> None:
        params = (make_parameter("a", 0, default="1"), make_parameter("b", 1))
        decl = Declaration(name="f", kind=DeclarationKind.CALLABLE, parameters=params)
        with pytest.raises(StructuralError):
            Expander().expand(decl)

    def test_rename_to_own_name_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="cannot reuse the declaration name 'f'"):
            Expander().expand(make_declaration(), make_config(rename="f"))


class TestSizeGuard:
    """Tests for max_optional and the size warning."""

    def test_max_optional_names_first_excess_parameter(self) -> None:
        decl = make_declaration(optional=_optional(4))
        with pytest.raises(ExpansionLimitError) as exc_info:
            Expander().expand(decl, make_config(max_optional=2))
        assert exc_info.value.parameter == "p2"
        assert exc_info.value.count == 4
        assert exc_info.value.limit == 2

    def test_max_optional_at_limit_passes(self) -> None:
        decl = make_declaration(optional=_optional(2))
        assert Expander().expand(decl, make_config(max_optional=2)).branch_count == 4

    def test_shuffled_warns_at_threshold(self, caplog: pytest.LogCaptureFixture) -> None:
        decl = make_declaration(optional=_optional(3))
        with caplog.at_level(logging.WARNING, logger="optargs"):
            Expander().expand(decl, make_config(shuffle=True, warn_threshold=3))
        assert "16 branches" in caplog.text
        assert "builder=True" in caplog.text

    def test_sequential_threshold_is_doubled(self, caplog: pytest.LogCaptureFixture) -> None:
        decl = make_declaration(optional=_optional(3))
        with caplog.at_level(logging.WARNING, logger="optargs"):
            Expander().expand(decl, make_config(warn_threshold=2))
        assert caplog.text == ""

    def test_sequential_warns_at_doubled_threshold(self, caplog: pytest.LogCaptureFixture) -> None:
        decl = make_declaration(optional=_optional(4))
        with caplog.at_level(logging.WARNING, logger="optargs"):
            Expander().expand(decl, make_config(warn_threshold=2))
        assert "16 branches" in caplog.text

    def test_no_warning_when_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        decl = make_declaration(optional=_optional(4))
        with caplog.at_level(logging.WARNING, logger="optargs"):
            Expander().expand(decl, make_config(shuffle=True, warn_threshold=None))
        assert caplog.text == ""


class TestExpandAll:
    """Tests for Expander.expand_all()."""

    def test_each_with_own_config(self) -> None:
        items = [
            AnnotatedDeclaration(make_declaration("f"), make_config()),
            AnnotatedDeclaration(make_declaration("g"), make_config(rename="make_g")),
        ]
        expansions = Expander().expand_all(items)
        assert [e.name for e in expansions] == ["f_opt", "make_g"]
