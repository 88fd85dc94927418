"""
Kay UI design-token engine.

Merges customization overrides into a complete design-token tree, resolves
component style intents (trigger, field, container) into literal style
descriptors, compiles per-breakpoint style fragments into ordered min-width
rules, and ships the debounce/throttle and id helpers the UI layer uses.
"""

from kayui.components.ids import generate_id
from kayui.components.responsive import ResponsiveRule, compile_responsive, responsive_styles
from kayui.components.styles import (
    StyleDescriptor,
    StyleIntent,
    class_names,
    create_transition,
    resolve_style,
)
from kayui.components.timing import debounce, throttle
from kayui.components.tokens import create_theme, merge_tokens, spacing_to_css
from kayui.domain import (
    DEFAULT_TOKENS,
    DesignTokens,
    InvalidOverrideShape,
    KayUIError,
    UnknownBreakpoint,
    UnknownColorRole,
    UnknownVariant,
)

__version__ = "0.1.0"

__all__ = [
    # Tokens
    "DEFAULT_TOKENS",
    "DesignTokens",
    "merge_tokens",
    "create_theme",
    "spacing_to_css",
    # Styles
    "StyleIntent",
    "StyleDescriptor",
    "resolve_style",
    "create_transition",
    "class_names",
    # Responsive
    "ResponsiveRule",
    "compile_responsive",
    "responsive_styles",
    # Timing and ids
    "debounce",
    "throttle",
    "generate_id",
    # Errors
    "KayUIError",
    "InvalidOverrideShape",
    "UnknownVariant",
    "UnknownColorRole",
    "UnknownBreakpoint",
]
