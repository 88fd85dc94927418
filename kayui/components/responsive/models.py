"""
Responsive compiler input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import DesignTokens

StyleFragment = Mapping[str, Any]
"""A partial style object (CSS property -> value) applied at one breakpoint."""


@dataclass(frozen=True)
class ResponsiveRule:
    """One conditional style rule: applies from min_width upward."""

    breakpoint: str
    min_width: int
    style: dict[str, Any]

    @property
    def media_query(self) -> str:
        return f"@media (min-width: {self.min_width}px)"


@dataclass(frozen=True)
class CompileResponsiveInput:
    """Input for compiling per-breakpoint fragments."""

    fragments: Mapping[str, StyleFragment]
    tokens: DesignTokens = field(default_factory=lambda: DEFAULT_TOKENS)


@dataclass(frozen=True)
class CompileResponsiveOutput:
    """Output from compiling fragments: rules in ascending min-width order."""

    rules: tuple[ResponsiveRule, ...]
