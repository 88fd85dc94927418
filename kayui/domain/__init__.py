"""
Domain layer: token tree entities, the default tree and the error taxonomy.
"""

from kayui.domain.defaults import DEFAULT_TOKEN_DATA, DEFAULT_TOKENS
from kayui.domain.entities import (
    BREAKPOINT_NAMES,
    MAX_ELEVATION,
    SEMANTIC_ROLES,
    SHADE_STOPS,
    SHADOW_COUNT,
    SPACING_STEPS,
    Breakpoints,
    ColorRamp,
    CommonColors,
    DesignTokens,
    Durations,
    Easing,
    GreyRamp,
    Palette,
    SpacingScale,
    Transitions,
    TypeStyle,
    Typography,
    clamp_elevation,
)
from kayui.domain.errors import (
    InvalidOverrideShape,
    KayUIError,
    UnknownBreakpoint,
    UnknownColorRole,
    UnknownVariant,
)

__all__ = [
    # Entities
    "Breakpoints",
    "ColorRamp",
    "CommonColors",
    "DesignTokens",
    "Durations",
    "Easing",
    "GreyRamp",
    "Palette",
    "SpacingScale",
    "Transitions",
    "TypeStyle",
    "Typography",
    "clamp_elevation",
    # Constants
    "BREAKPOINT_NAMES",
    "MAX_ELEVATION",
    "SEMANTIC_ROLES",
    "SHADE_STOPS",
    "SHADOW_COUNT",
    "SPACING_STEPS",
    "DEFAULT_TOKEN_DATA",
    "DEFAULT_TOKENS",
    # Errors
    "KayUIError",
    "InvalidOverrideShape",
    "UnknownBreakpoint",
    "UnknownColorRole",
    "UnknownVariant",
]
