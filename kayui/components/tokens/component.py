"""
Token store component - default tree plus pure customization merge.

Key behaviors:
- merge_tokens never mutates the base tree or any override
- later overrides win over earlier ones, all overrides win over the base
- sequences (the shadow table) are replaced wholesale, never element-wise
- shape mismatches raise InvalidOverrideShape instead of being coerced
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import DesignTokens
from kayui.domain.errors import InvalidOverrideShape

from ._impl import describe_validation_error, merge_into
from .models import MergeTokensInput, MergeTokensOutput, Override

logger = logging.getLogger(__name__)


def merge_tokens(base: DesignTokens, *overrides: Override | DesignTokens) -> DesignTokens:
    """
    Merge overrides into a base token tree.

    Args:
        base: Tree to customize (left untouched)
        *overrides: Partial trees applied left to right. A full DesignTokens
            value is accepted and treated as a complete override.

    Returns:
        A new DesignTokens value. With no overrides it is value-equal to base.

    Raises:
        InvalidOverrideShape: if an override is not a mapping, merges a
            mapping onto a scalar or sequence, or yields an invalid tree
    """
    acc = base.as_dict()

    for index, override in enumerate(overrides):
        if isinstance(override, DesignTokens):
            override = override.as_dict()
        if not isinstance(override, Mapping):
            raise InvalidOverrideShape(
                "", f"override #{index} must be a mapping, got {type(override).__name__}"
            )
        acc = merge_into(acc, override)

    try:
        merged = DesignTokens.model_validate(acc)
    except ValidationError as e:
        path, reason = describe_validation_error(e)
        raise InvalidOverrideShape(path, reason) from e

    logger.debug("Merged %d override(s) into token tree", len(overrides))
    return merged


def create_theme(overrides: Override | None = None) -> DesignTokens:
    """Customize the default tree with a single optional override."""
    if overrides is None:
        return merge_tokens(DEFAULT_TOKENS)
    return merge_tokens(DEFAULT_TOKENS, overrides)


def spacing_to_css(value: int | float | str, base: int = 8) -> str:
    """
    Convert a spacing value to a CSS length.

    Strings pass through unchanged; numbers are multiples of the base unit.

    Examples:
        >>> spacing_to_css(2)
        '16px'
        >>> spacing_to_css("1rem")
        '1rem'
    """
    if isinstance(value, str):
        return value
    return f"{value * base:g}px"


# --- Component Entry Points ---


def run_merge(inp: MergeTokensInput) -> MergeTokensOutput:
    """
    Merge entry point.

    Args:
        inp: Base tree and overrides.

    Returns:
        MergeTokensOutput with the effective tree.
    """
    tokens = merge_tokens(inp.base, *inp.overrides)
    return MergeTokensOutput(tokens=tokens, override_count=len(inp.overrides))
