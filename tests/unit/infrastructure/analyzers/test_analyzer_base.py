"""Tests for infrastructure/analyzers/base.py."""

import ast
from pathlib import Path

import pytest

from optargs.domain.exceptions.parsing import DirectiveError
from optargs.infrastructure.analyzers.base import (
    SourceText,
    annotation_text,
    declaration_location,
    expression_text,
    find_directive,
    is_directive,
    is_ellipsis,
    make_location,
)


def _decorator(code: str) -> ast.expr:
    node = ast.parse(f"{code}\ndef f(): pass").body[0]
    assert isinstance(node, ast.FunctionDef)
    return node.decorator_list[0]


def _strip_default(params: str) -> str:
    source = f"def f({params}): pass"
    text = SourceText(source)
    node = ast.parse(source).body[0]
    assert isinstance(node, ast.FunctionDef)
    arg, default = node.args.args[-1], node.args.defaults[-1]
    start, end = text.default_span(text.end(arg), default)
    return text.splice(0, len(text), [(start, end, "")])


class TestMakeLocation:
    """Tests for make_location function."""

    def test_valid_node(self) -> None:
        node = ast.parse("x = 1").body[0]
        loc = make_location(node, Path("test.py"))
        assert loc.file == Path("test.py")
        assert loc.line == 1
        assert loc.column == 0
        assert loc.end_line == 1

    def test_node_without_lineno_raises(self) -> None:
        with pytest.raises(DirectiveError, match="node has no line info"):
            make_location(ast.expr(), Path("test.py"))


class TestDeclarationLocation:
    """Tests for declaration_location function."""

    def test_starts_at_first_decorator(self) -> None:
        node = ast.parse("\n@a\n@b\ndef f():\n    pass\n").body[0]
        assert isinstance(node, ast.FunctionDef)
        loc = declaration_location(node, Path("test.py"))
        assert loc.line == 2
        assert loc.column == 0
        assert loc.end_line == 5


class TestDirectiveDetection:
    """Tests for is_directive and find_directive."""

    @pytest.mark.parametrize(
        "code",
        ["@opt_args", "@opt_args()", "@opt_args(shuffle=True)", "@optargs.opt_args"],
    )
    def test_recognized(self, code: str) -> None:
        assert is_directive(_decorator(code)) is True

    @pytest.mark.parametrize("code", ["@dataclass", "@functools.cache", "@opt_args_other"])
    def test_not_recognized(self, code: str) -> None:
        assert is_directive(_decorator(code)) is False

    def test_find_directive_among_others(self) -> None:
        node = ast.parse("@dataclass\n@opt_args\nclass P: pass").body[0]
        assert isinstance(node, ast.ClassDef)
        directive = find_directive(node.decorator_list)
        assert directive is node.decorator_list[1]

    def test_find_directive_absent(self) -> None:
        assert find_directive([]) is None


class TestAnnotationHelpers:
    """Tests for annotation_text and is_ellipsis."""

    def test_string_annotation_unquoted(self) -> None:
        assert annotation_text(ast.parse('"Point"', mode="eval").body) == "Point"

    def test_annotation_unparsed(self) -> None:
        assert annotation_text(ast.parse("dict[str, int]", mode="eval").body) == "dict[str, int]"

    def test_is_ellipsis(self) -> None:
        assert is_ellipsis(ast.parse("...", mode="eval").body) is True
        assert is_ellipsis(ast.parse("None", mode="eval").body) is False
        assert is_ellipsis(None) is False


class TestSourceText:
    """Tests for SourceText."""

    def test_segment_with_multibyte_characters(self) -> None:
        source = 's = "héllo"; t = 1\n'
        text = SourceText(source)
        node = ast.parse(source).body[1]
        assert text.segment(node) == "t = 1"

    def test_line_offsets(self) -> None:
        text = SourceText("ab\ncd\n")
        assert text.line_start(2) == 3
        assert text.next_line_start(1) == 3
        assert text.next_line_start(2) == 6
        assert len(text) == 6

    def test_splice(self) -> None:
        text = SourceText("f(a, b)")
        assert text.splice(0, 7, [(5, 6, "x"), (2, 3, "y")]) == "f(y, x)"

    def test_overlapping_edits_raise(self) -> None:
        text = SourceText("abcdef")
        with pytest.raises(ValueError, match="overlaps or leaves region"):
            text.splice(0, 6, [(0, 3, ""), (2, 4, "")])

    def test_line_outside_source_raises(self) -> None:
        with pytest.raises(ValueError, match="outside source"):
            SourceText("x\n").offset(5, 0)


class TestDefaultSpan:
    """Tests for SourceText.default_span and expression_text."""

    @pytest.mark.parametrize(
        "params",
        [
            "b=5",
            "b = (5)",
            "b=((5)  # five\n)",
            "b=('é')",
            "b: (int) = 5",
        ],
    )
    def test_default_removed(self, params: str) -> None:
        name = params.split("=")[0].rstrip()
        assert _strip_default(params) == f"def f({name}): pass"

    def test_following_parameters_untouched(self) -> None:
        assert _strip_default("a=(1), b=(2)") == "def f(a=(1), b): pass"

    def test_walrus_parenthesized(self) -> None:
        source = "def f(b=(y := 3)): pass"
        node = ast.parse(source).body[0]
        assert isinstance(node, ast.FunctionDef)
        assert expression_text(node.args.defaults[0], SourceText(source)) == "(y := 3)"

    def test_plain_expression_verbatim(self) -> None:
        source = "def f(b=[1,  2]): pass"
        node = ast.parse(source).body[0]
        assert isinstance(node, ast.FunctionDef)
        assert expression_text(node.args.defaults[0], SourceText(source)) == "[1,  2]"
