"""
Tests for the responsive rule compiler.
"""

from __future__ import annotations

import pytest

from kayui.components.responsive import (
    CompileResponsiveInput,
    ResponsiveRule,
    compile_responsive,
    responsive_styles,
    run_compile,
)
from kayui.components.tokens import merge_tokens
from kayui.domain import DEFAULT_TOKENS, UnknownBreakpoint


class TestCompileResponsive:
    """compile_responsive ordering and filtering."""

    def test_sm_and_lg(self) -> None:
        """Only supplied breakpoints produce rules, ordered by width."""
        rules = compile_responsive({"lg": {"columns": 3}, "sm": {"columns": 1}})

        assert [(r.min_width, r.breakpoint) for r in rules] == [(600, "sm"), (1200, "lg")]
        assert rules[0].style == {"columns": 1}

    def test_all_breakpoints(self) -> None:
        """All five breakpoints come out in ascending order."""
        fragments = {name: {"n": i} for i, name in enumerate(["xl", "md", "xs", "lg", "sm"])}
        rules = compile_responsive(fragments)
        assert [r.breakpoint for r in rules] == ["xs", "sm", "md", "lg", "xl"]
        assert [r.min_width for r in rules] == [0, 600, 900, 1200, 1536]

    def test_empty_input(self) -> None:
        """No fragments, no rules."""
        assert compile_responsive({}) == []

    def test_media_query(self) -> None:
        """Rules render as min-width media queries."""
        rule = ResponsiveRule(breakpoint="md", min_width=900, style={})
        assert rule.media_query == "@media (min-width: 900px)"

    def test_unknown_breakpoint(self) -> None:
        """Names outside xs..xl are rejected."""
        with pytest.raises(UnknownBreakpoint) as exc_info:
            compile_responsive({"sm": {}, "xxl": {"padding": "8px"}})
        assert exc_info.value.name == "xxl"
        assert exc_info.value.allowed == ("xs", "sm", "md", "lg", "xl")

    def test_empty_fragment_rejected(self) -> None:
        """A breakpoint with no style (an empty YAML key) names the breakpoint."""
        with pytest.raises(ValueError, match="'sm'"):
            compile_responsive({"sm": None})  # type: ignore[dict-item]

    def test_fragments_are_copied(self) -> None:
        """Rules never alias the input fragments."""
        fragment = {"margin": {"top": "4px"}}
        rules = compile_responsive({"md": fragment})

        rules[0].style["margin"]["top"] = "99px"

        assert fragment == {"margin": {"top": "4px"}}

    def test_custom_breakpoints(self) -> None:
        """Widths come from the token tree in use."""
        tokens = merge_tokens(DEFAULT_TOKENS, {"breakpoints": {"sm": 480}})
        rules = compile_responsive({"sm": {"gap": "4px"}}, tokens)
        assert rules[0].min_width == 480


class TestResponsiveStyles:
    """Media-query keyed style objects."""

    def test_keyed_by_query(self) -> None:
        styles = responsive_styles({"xl": {"width": "1200px"}, "sm": {"width": "100%"}})
        assert list(styles) == ["@media (min-width: 600px)", "@media (min-width: 1536px)"]
        assert styles["@media (min-width: 600px)"] == {"width": "100%"}


class TestRunCompile:
    """Component entry point."""

    def test_run_compile(self) -> None:
        out = run_compile(CompileResponsiveInput(fragments={"md": {"display": "flex"}}))
        assert len(out.rules) == 1
        assert out.rules[0].breakpoint == "md"
