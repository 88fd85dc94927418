"""
Style resolver component - StyleIntent -> StyleDescriptor.

Dispatches on the component kind to one rule table per kind (trigger,
field, container). Resolution is pure: every call returns a new descriptor
and nothing is cached or shared.

Failure modes:
- UnknownVariant: variant outside the kind's set (no partial descriptor)
- UnknownColorRole: token tree has no 'primary' ramp to fall back on
Everything else (unknown color role or size, out-of-range elevation)
degrades to a default or is clamped.
"""

from __future__ import annotations

import logging

from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import DesignTokens

from ._impl import RESOLVERS, check_variant
from .models import (
    DEFAULT_CONFIG,
    ResolverConfig,
    ResolveStyleInput,
    ResolveStyleOutput,
    StyleDescriptor,
    StyleIntent,
)

logger = logging.getLogger(__name__)


def resolve_style(
    intent: StyleIntent,
    tokens: DesignTokens = DEFAULT_TOKENS,
    config: ResolverConfig = DEFAULT_CONFIG,
) -> StyleDescriptor:
    """
    Resolve a component's declared intent against a token tree.

    Args:
        intent: Component kind, variant, color role, size and states
        tokens: Effective token tree
        config: Presentation constants

    Returns:
        StyleDescriptor with literal values only

    Raises:
        UnknownVariant: variant outside the kind's fixed set
        UnknownColorRole: token tree lacks the 'primary' fallback
    """
    variant = check_variant(intent.kind, intent.variant)
    values = RESOLVERS[intent.kind](intent, variant, tokens, config)
    logger.debug(
        "Resolved %s/%s role=%s states=%s",
        intent.kind.value,
        variant,
        values["color_role"],
        sorted(intent.states),
    )
    return StyleDescriptor(kind=intent.kind, variant=str(variant), **values)


def class_names(*parts: str | bool | None) -> str:
    """
    Join the truthy string parts with spaces.

    Examples:
        >>> class_names("btn", False, None, "btn-primary")
        'btn btn-primary'
    """
    return " ".join(part for part in parts if isinstance(part, str) and part)


# --- Component Entry Points ---


def run_resolve(inp: ResolveStyleInput) -> ResolveStyleOutput:
    """
    Resolve entry point.

    Args:
        inp: Intent, token tree and resolver configuration.

    Returns:
        ResolveStyleOutput with the descriptor.
    """
    descriptor = resolve_style(inp.intent, inp.tokens, inp.config)
    return ResolveStyleOutput(descriptor=descriptor)
