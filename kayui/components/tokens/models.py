"""
Token store input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import DesignTokens

Override = Mapping[Any, Any]
"""A partial, arbitrarily deep subset of the token tree (JSON-like)."""


@dataclass(frozen=True)
class MergeTokensInput:
    """Input for merging overrides into a base tree."""

    overrides: tuple[Override | DesignTokens, ...] = ()
    base: DesignTokens = field(default_factory=lambda: DEFAULT_TOKENS)


@dataclass(frozen=True)
class MergeTokensOutput:
    """Output from merging overrides."""

    tokens: DesignTokens
    override_count: int = 0
