"""Tests for domain/model/expansion.py."""

import pytest

from optargs.application.services.validator import validate_suffix
from optargs.domain.model.expansion import Expansion
from tests.factories import make_config, make_declaration, make_expansion


class TestExpansion:
    """Tests for Expansion."""

    def test_name_follows_config(self) -> None:
        assert make_expansion().name == "f_opt"
        assert make_expansion(rename="call_f").name == "call_f"

    def test_branch_count(self) -> None:
        expansion = make_expansion(make_declaration(optional={"c": "1", "d": "2"}))
        assert expansion.branch_count == 4

    def test_builder_has_no_branches(self) -> None:
        expansion = make_expansion(builder=True)
        assert expansion.dispatcher is None
        assert expansion.branch_count == 0
        assert expansion.name == "f_builder"

    def test_branches_strategy_requires_dispatcher(self) -> None:
        decl = make_declaration()
        with pytest.raises(ValueError, match="requires a dispatcher"):
            Expansion(declaration=decl, config=make_config(), signature=validate_suffix(decl))

    def test_builder_rejects_dispatcher(self) -> None:
        expansion = make_expansion()
        with pytest.raises(ValueError, match="does not enumerate a dispatcher"):
            Expansion(
                declaration=expansion.declaration,
                config=make_config(builder=True),
                signature=expansion.signature,
                dispatcher=expansion.dispatcher,
            )

    def test_dispatcher_for_other_declaration_raises(self) -> None:
        expansion = make_expansion()
        other = make_declaration(name="g")
        with pytest.raises(ValueError, match="dispatcher targets 'f', expected 'g'"):
            Expansion(
                declaration=other,
                config=expansion.config,
                signature=expansion.signature,
                dispatcher=expansion.dispatcher,
            )

    def test_signature_arity_mismatch_raises(self) -> None:
        expansion = make_expansion()
        wider = make_declaration(optional={"c": "5", "d": "6"})
        with pytest.raises(ValueError, match="branch 0 passes 3 argument"):
            Expansion(
                declaration=expansion.declaration,
                config=expansion.config,
                signature=validate_suffix(wider),
                dispatcher=expansion.dispatcher,
            )
