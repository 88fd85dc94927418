"""
Variant style resolution tables.

One resolver per component kind. Each takes a validated variant, the
effective color ramp and the token tree, and returns the keyword arguments
of a StyleDescriptor. Shared rules:

- color precedence: error state -> requested color role -> primary
- disabled vetoes every hover/press affordance but keeps resolved colors
- current hovered/pressed states are folded into the base values
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic.alias_generators import to_snake

from kayui.components.tokens.component import spacing_to_css
from kayui.domain.entities import ColorRamp, DesignTokens, clamp_elevation
from kayui.domain.errors import UnknownColorRole, UnknownVariant

from .models import (
    DEFAULT_VARIANTS,
    VARIANTS,
    BorderSpec,
    ComponentKind,
    ContainerVariant,
    FieldVariant,
    InteractionStyle,
    ResolverConfig,
    Size,
    SizeSpec,
    StyleIntent,
    TransitionSpec,
    TriggerVariant,
)

logger = logging.getLogger(__name__)


# --- Lookups ---


def check_variant(kind: ComponentKind, variant: str | None) -> str:
    """Validate a variant against the kind's fixed set; None selects the default."""
    if variant is None:
        return DEFAULT_VARIANTS[kind]
    allowed = VARIANTS[kind]
    try:
        return allowed(variant)
    except ValueError:
        raise UnknownVariant(kind.value, str(variant), [v.value for v in allowed]) from None


def resolve_ramp(intent: StyleIntent, tokens: DesignTokens) -> tuple[str, ColorRamp]:
    """
    Pick the color ramp for an intent.

    Returns:
        (effective role name, ramp)

    Raises:
        UnknownColorRole: only if 'primary' is missing too
    """
    palette = getattr(tokens, "colors", None)
    candidates = ["error"] if intent.error else []
    candidates.extend([str(intent.color_role), "primary"])

    for role in candidates:
        ramp = palette.ramp(role) if palette is not None else None
        if ramp is None:
            continue
        if role == "primary" and intent.color_role != "primary" and not intent.error:
            logger.warning(
                "Color role '%s' not found in token tree, falling back to 'primary'",
                intent.color_role,
            )
        return role, ramp

    raise UnknownColorRole(str(intent.color_role))


def size_spec(table: Mapping[str, SizeSpec], size: str) -> SizeSpec:
    spec = table.get(size)
    if spec is None:
        logger.warning("Unknown size '%s', using '%s'", size, Size.MEDIUM.value)
        spec = table[Size.MEDIUM]
    return spec


def with_alpha(color: str, alpha: float) -> str:
    """Return a hex color as rgba() with the given alpha; other notations pass through."""
    if not color.startswith("#"):
        return color
    hex_color = color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    if len(hex_color) != 6:
        return color
    r, g, b = (int(hex_color[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def create_transition(
    properties: Iterable[str],
    tokens: DesignTokens,
    duration: str | int = "standard",
    easing: str = "easeInOut",
    delay_ms: int = 0,
) -> TransitionSpec:
    """
    Build a transition spec from named duration and easing tokens.

    Names may be camelCase (as in token documents) or snake_case. An int
    duration is taken as milliseconds.
    """
    transitions = tokens.transitions
    if isinstance(duration, int):
        duration_ms = duration
    else:
        duration_ms = getattr(transitions.duration, to_snake(duration), None)
        if duration_ms is None:
            raise ValueError(f"Unknown transition duration '{duration}'")

    curve = getattr(transitions.easing, to_snake(easing), None)
    if curve is None:
        raise ValueError(f"Unknown transition easing '{easing}'")

    return TransitionSpec(
        properties=tuple(properties),
        duration_ms=duration_ms,
        easing=curve,
        delay_ms=delay_ms,
    )


def apply_interaction(values: dict[str, Any], overlay: InteractionStyle | None) -> None:
    """Fold an interaction overlay into descriptor values (in place, local dict only)."""
    if overlay is None:
        return
    if overlay.background is not None:
        values["background"] = overlay.background
    if overlay.border_color is not None and values.get("border") is not None:
        border: BorderSpec = values["border"]
        values["border"] = BorderSpec(
            width=border.width, color=overlay.border_color, style=border.style, sides=border.sides
        )
    if overlay.shadow is not None:
        values["shadow"] = overlay.shadow
        values["shadow_index"] = overlay.shadow_index
    if overlay.transform is not None:
        values["transform"] = overlay.transform


def _apply_current_states(values: dict[str, Any], intent: StyleIntent) -> None:
    if intent.disabled:
        return
    if intent.hovered:
        apply_interaction(values, values.get("hover"))
    if intent.pressed:
        apply_interaction(values, values.get("active"))


# --- Trigger ---


def resolve_trigger(
    intent: StyleIntent, variant: str, tokens: DesignTokens, config: ResolverConfig
) -> dict[str, Any]:
    role, ramp = resolve_ramp(intent, tokens)
    size = size_spec(config.trigger_sizes, intent.size)
    text = tokens.typography.button
    hover: InteractionStyle | None
    active: InteractionStyle | None = None

    if variant == TriggerVariant.CONTAINED:
        foreground = ramp.contrast_text
        background = ramp.main
        border = None
        hover = InteractionStyle(
            background=ramp.dark,
            shadow_index=config.trigger_hover_shadow,
            shadow=tokens.shadow(config.trigger_hover_shadow),
        )
        active = InteractionStyle(
            shadow_index=config.trigger_pressed_shadow,
            shadow=tokens.shadow(config.trigger_pressed_shadow),
        )
    elif variant == TriggerVariant.OUTLINED:
        foreground = ramp.main
        background = "transparent"
        border = BorderSpec(width=1, color=ramp.main)
        hover = InteractionStyle(background=ramp.light, border_color=ramp.dark)
    else:
        foreground = ramp.main
        background = "transparent"
        border = None
        hover = InteractionStyle(background=config.text_hover_background)

    values: dict[str, Any] = {
        "color_role": role,
        "foreground": foreground,
        "background": background,
        "border": border,
        "border_radius": config.trigger_radius,
        "padding": size.padding,
        "font_family": tokens.typography.font_family,
        "font_size": size.font_size,
        "font_weight": text.font_weight,
        "line_height": text.line_height,
        "letter_spacing": text.letter_spacing,
        "text_transform": text.text_transform,
        "shadow_index": 0,
        "shadow": tokens.shadow(0),
        "opacity": 1.0,
        "cursor": "pointer",
        "pointer_events": "auto",
        "width": "100%" if intent.full_width else "auto",
        "transform": "none",
        "transition": create_transition(
            ("background-color", "color", "border-color", "box-shadow"),
            tokens,
            duration="short",
        ),
        "hover": hover,
        "active": active,
    }

    if intent.disabled:
        values.update(
            opacity=config.trigger_disabled_opacity,
            cursor="not-allowed",
            hover=None,
            active=None,
        )
    _apply_current_states(values, intent)
    return values


# --- Field ---


def resolve_field(
    intent: StyleIntent, variant: str, tokens: DesignTokens, config: ResolverConfig
) -> dict[str, Any]:
    role, ramp = resolve_ramp(intent, tokens)
    size = size_spec(config.field_sizes, intent.size)
    grey = tokens.colors.grey
    text = tokens.typography.body1
    active_focus = intent.focused and not intent.disabled

    # error > focused > neutral; resolve_ramp already put the error ramp first
    neutral = not intent.error and not intent.focused
    border_color = grey.shade(400) if neutral else ramp.main
    border_width = 2 if active_focus else 1
    hover_border = grey.shade(600) if neutral else None

    padding = size.padding
    radius = config.field_radius
    hover: InteractionStyle | None
    if variant == FieldVariant.OUTLINED:
        background = "transparent"
        border = BorderSpec(width=border_width, color=border_color)
        hover = InteractionStyle(border_color=hover_border) if hover_border else None
    elif variant == FieldVariant.FILLED:
        background = grey.shade(100)
        border = BorderSpec(width=border_width, color=border_color, sides="bottom")
        radius = f"{config.field_radius} {config.field_radius} 0 0"
        hover = InteractionStyle(background=grey.shade(200), border_color=hover_border)
    else:
        background = "transparent"
        border = BorderSpec(width=border_width, color=border_color, sides="bottom")
        radius = "0"
        padding = "4px 0"
        hover = InteractionStyle(border_color=hover_border) if hover_border else None

    error_color = ramp.main if intent.error else None
    if intent.disabled:
        foreground = config.text_disabled
        label_color = error_color or config.text_disabled
    else:
        foreground = config.text_primary
        label_color = error_color or config.text_primary

    focus_ring = None
    if active_focus:
        focus_ring = f"0 0 0 2px {with_alpha(ramp.main, config.focus_ring_alpha)}"

    values: dict[str, Any] = {
        "color_role": role,
        "foreground": foreground,
        "background": background,
        "border": border,
        "border_radius": radius,
        "padding": padding,
        "font_family": tokens.typography.font_family,
        "font_size": size.font_size,
        "font_weight": text.font_weight,
        "line_height": text.line_height,
        "letter_spacing": text.letter_spacing,
        "text_transform": text.text_transform,
        "shadow_index": 0,
        "shadow": tokens.shadow(0),
        "opacity": 1.0,
        "cursor": "default" if intent.disabled else "text",
        "pointer_events": "auto",
        "width": "100%" if intent.full_width else "auto",
        "transform": "none",
        "transition": create_transition(("border-color", "box-shadow"), tokens),
        "focus_ring": focus_ring,
        "label_color": label_color,
        "helper_text_color": error_color or config.text_secondary,
        "hover": None if intent.disabled else hover,
        "active": None,
    }
    _apply_current_states(values, intent)
    return values


# --- Container ---


def _spacing(value: str | int | float | None, default: str) -> str:
    return default if value is None else spacing_to_css(value)


def _radius(value: str | int | float | None, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return f"{value:g}px"


def resolve_container(
    intent: StyleIntent, variant: str, tokens: DesignTokens, config: ResolverConfig
) -> dict[str, Any]:
    role, ramp = resolve_ramp(intent, tokens)
    grey = tokens.colors.grey
    text = tokens.typography.body1
    interactive = not intent.disabled

    if variant == ContainerVariant.OUTLINED:
        elevation = 0
        border: BorderSpec | None = BorderSpec(width=1, color=grey.shade(300))
    else:
        requested = intent.elevation + (config.raised_increment if intent.raised else 0)
        elevation = clamp_elevation(requested)
        border = None

    hover: InteractionStyle | None = None
    if interactive and intent.hoverable:
        if variant == ContainerVariant.OUTLINED:
            hover = InteractionStyle(
                border_color=ramp.main,
                shadow=config.outlined_hover_shadow,
                transform=config.lift_transform,
            )
        else:
            lifted = clamp_elevation(elevation + config.hover_lift_steps)
            hover = InteractionStyle(
                shadow_index=lifted,
                shadow=tokens.shadow(lifted),
                transform=config.lift_transform,
            )
    elif interactive and variant == ContainerVariant.OUTLINED:
        hover = InteractionStyle(border_color=ramp.main)

    active = None
    if interactive and intent.clickable:
        active = InteractionStyle(transform=config.rest_transform)

    values: dict[str, Any] = {
        "color_role": role,
        "foreground": config.text_primary,
        "background": intent.background or tokens.colors.common.white,
        "border": border,
        "border_radius": _radius(intent.border_radius, config.container_radius),
        "padding": _spacing(intent.padding, tokens.spacing.md),
        "font_family": tokens.typography.font_family,
        "font_size": text.font_size,
        "font_weight": text.font_weight,
        "line_height": text.line_height,
        "letter_spacing": text.letter_spacing,
        "text_transform": text.text_transform,
        "shadow_index": elevation,
        "shadow": tokens.shadow(elevation),
        "opacity": 1.0 if interactive else config.container_disabled_opacity,
        "cursor": "pointer" if interactive and intent.clickable else "default",
        "pointer_events": "auto" if interactive else "none",
        "width": "100%" if intent.full_width else "auto",
        "transform": "none",
        "transition": create_transition(("transform", "box-shadow"), tokens),
        "gap": _spacing(intent.gap, tokens.spacing.md),
        "hover": hover,
        "active": active,
    }
    _apply_current_states(values, intent)
    return values


RESOLVERS = {
    ComponentKind.TRIGGER: resolve_trigger,
    ComponentKind.FIELD: resolve_field,
    ComponentKind.CONTAINER: resolve_container,
}
