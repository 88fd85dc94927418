"""
Responsive rule compiler - per-breakpoint fragments -> ordered min-width rules.

The output is a flat sequence ordered by ascending min-width so a renderer
can apply rules in order and let wider rules override narrower ones.
Breakpoints absent from the input produce no rule.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import BREAKPOINT_NAMES, DesignTokens
from kayui.domain.errors import UnknownBreakpoint

from .models import (
    CompileResponsiveInput,
    CompileResponsiveOutput,
    ResponsiveRule,
    StyleFragment,
)

logger = logging.getLogger(__name__)


def compile_responsive(
    fragments: Mapping[str, StyleFragment],
    tokens: DesignTokens = DEFAULT_TOKENS,
) -> list[ResponsiveRule]:
    """
    Compile per-breakpoint style fragments into ordered conditional rules.

    Args:
        fragments: Breakpoint name -> style fragment (any subset of xs..xl)
        tokens: Token tree providing the breakpoint widths

    Returns:
        One ResponsiveRule per supplied breakpoint, ascending by min-width.
        Fragments are copied; rules never alias the input.

    Raises:
        UnknownBreakpoint: a key outside xs, sm, md, lg, xl
        ValueError: a fragment that is not a mapping
    """
    unknown = [name for name in fragments if name not in BREAKPOINT_NAMES]
    if unknown:
        raise UnknownBreakpoint(str(unknown[0]), BREAKPOINT_NAMES)

    for name, fragment in fragments.items():
        if not isinstance(fragment, Mapping):
            raise ValueError(
                f"Style fragment for breakpoint '{name}' must be a mapping, "
                f"got {type(fragment).__name__}"
            )

    rules = [
        ResponsiveRule(
            breakpoint=name,
            min_width=min_width,
            style=copy.deepcopy(dict(fragments[name])),
        )
        for name, min_width in tokens.breakpoints.items()
        if name in fragments
    ]
    rules.sort(key=lambda rule: rule.min_width)

    logger.debug("Compiled %d responsive rule(s)", len(rules))
    return rules


def responsive_styles(
    fragments: Mapping[str, StyleFragment],
    tokens: DesignTokens = DEFAULT_TOKENS,
) -> dict[str, dict[str, Any]]:
    """
    Compile fragments into a style object keyed by media query.

    Examples:
        >>> responsive_styles({"sm": {"padding": "8px"}})
        {'@media (min-width: 600px)': {'padding': '8px'}}
    """
    return {rule.media_query: rule.style for rule in compile_responsive(fragments, tokens)}


# --- Component Entry Points ---


def run_compile(inp: CompileResponsiveInput) -> CompileResponsiveOutput:
    """
    Compile entry point.

    Args:
        inp: Fragments and token tree.

    Returns:
        CompileResponsiveOutput with the ordered rules.
    """
    rules = compile_responsive(inp.fragments, inp.tokens)
    return CompileResponsiveOutput(rules=tuple(rules))
