"""Tests for application/reporters/json_reporter.py."""

import json
from io import StringIO

from optargs.application.reporters.json_reporter import JSONReporter
from optargs.domain.model.expansion import Expansion
from tests.factories import make_declaration, make_expansion


def _report(*expansions: Expansion) -> dict[str, object]:
    output = StringIO()
    JSONReporter(output).report(expansions)
    return json.loads(output.getvalue())


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_summary(self) -> None:
        data = _report(make_expansion(), make_expansion(make_declaration("g")))
        assert data["declaration_count"] == 2
        assert data["branch_count"] == 4

    def test_expansion_fields(self) -> None:
        decl = make_declaration(optional={"c": "5", "d": None}, annotations={"d": "int"})
        data = _report(make_expansion(decl, shuffle=True))
        entry = data["expansions"][0]  # type: ignore[index]

        assert entry["declaration"] == "f"
        assert entry["name"] == "f_opt"
        assert entry["kind"] == "callable"
        assert entry["ordering"] == "shuffled"
        assert entry["strategy"] == "branches"
        assert entry["export"] is True
        assert entry["location"] is None
        assert entry["required"] == ["a", "b"]
        assert entry["optional"] == [
            {"name": "c", "default": "5", "implicit": False},
            {"name": "d", "default": "int()", "implicit": True},
        ]

    def test_branches(self) -> None:
        entry = _report(make_expansion())["expansions"][0]  # type: ignore[index]
        assert entry["branches"] == [
            {"keywords": [], "expansion": "f(a, b, 5)"},
            {"keywords": ["c"], "expansion": "f(a, b, c)"},
        ]
        assert "Unrecognized order or name for arguments" in entry["fallback"]

    def test_builder_has_no_branches(self) -> None:
        entry = _report(make_expansion(builder=True))["expansions"][0]  # type: ignore[index]
        assert entry["branches"] == []
        assert entry["fallback"] is None

    def test_compact(self) -> None:
        output = StringIO()
        JSONReporter(output, indent=None).report((make_expansion(),))
        assert output.getvalue().count("\n") == 1
