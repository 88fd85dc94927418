"""
Style resolver input/output models.

StyleIntent is what a component declares (kind, variant, color role, size,
interaction states). StyleDescriptor is the resolved output: literal values
only, no references back into the token tree.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import DesignTokens

# --- Enumerations ---


class ComponentKind(StrEnum):
    TRIGGER = "trigger"  # button-like
    FIELD = "field"  # text-input-like
    CONTAINER = "container"  # card-like


class TriggerVariant(StrEnum):
    TEXT = "text"
    CONTAINED = "contained"
    OUTLINED = "outlined"


class FieldVariant(StrEnum):
    OUTLINED = "outlined"
    FILLED = "filled"
    STANDARD = "standard"


class ContainerVariant(StrEnum):
    ELEVATION = "elevation"
    OUTLINED = "outlined"


class ColorRole(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class Size(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class InteractionState(StrEnum):
    DISABLED = "disabled"
    ERROR = "error"
    FOCUSED = "focused"
    HOVERED = "hovered"
    PRESSED = "pressed"


VARIANTS: dict[ComponentKind, type[StrEnum]] = {
    ComponentKind.TRIGGER: TriggerVariant,
    ComponentKind.FIELD: FieldVariant,
    ComponentKind.CONTAINER: ContainerVariant,
}

DEFAULT_VARIANTS: dict[ComponentKind, StrEnum] = {
    ComponentKind.TRIGGER: TriggerVariant.CONTAINED,
    ComponentKind.FIELD: FieldVariant.OUTLINED,
    ComponentKind.CONTAINER: ContainerVariant.ELEVATION,
}


# --- Intent ---


@dataclass(frozen=True)
class StyleIntent:
    """
    Declared intent of a component at render time.

    variant is kept as given and checked by the resolver, so an unknown
    variant fails at resolution rather than at construction. color_role and
    size are plain strings so a resolver can degrade gracefully on values
    outside their enums. states accepts a single state name or any iterable
    of state names.

    elevation, raised, hoverable, clickable and the surface overrides
    (padding, gap, border_radius, background) only affect containers. Numeric
    padding and gap are spacing multiples; a numeric radius is in pixels.
    """

    kind: ComponentKind
    variant: str | None = None
    color_role: str = ColorRole.PRIMARY
    size: str = Size.MEDIUM
    states: frozenset[InteractionState] = frozenset()
    elevation: int = 1
    raised: bool = False
    hoverable: bool = False
    clickable: bool = False
    full_width: bool = False
    padding: str | int | float | None = None
    gap: str | int | float | None = None
    border_radius: str | int | float | None = None
    background: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ComponentKind(self.kind))
        states: Iterable[str] = (self.states,) if isinstance(self.states, str) else self.states
        object.__setattr__(self, "states", frozenset(InteractionState(s) for s in states))

    def has(self, state: InteractionState | str) -> bool:
        return InteractionState(state) in self.states

    @property
    def disabled(self) -> bool:
        return InteractionState.DISABLED in self.states

    @property
    def error(self) -> bool:
        return InteractionState.ERROR in self.states

    @property
    def focused(self) -> bool:
        return InteractionState.FOCUSED in self.states

    @property
    def hovered(self) -> bool:
        return InteractionState.HOVERED in self.states

    @property
    def pressed(self) -> bool:
        return InteractionState.PRESSED in self.states


# --- Descriptor ---


@dataclass(frozen=True)
class BorderSpec:
    """A border drawn on all sides or only along the bottom edge."""

    width: int
    color: str
    style: str = "solid"
    sides: str = "all"  # "all" | "bottom"

    def css(self) -> str:
        return f"{self.width}px {self.style} {self.color}"


@dataclass(frozen=True)
class TransitionSpec:
    properties: tuple[str, ...]
    duration_ms: int
    easing: str
    delay_ms: int = 0

    def css(self) -> str:
        """Render as a CSS transition value, one entry per property."""
        return ",".join(
            f"{prop} {self.duration_ms}ms {self.easing} {self.delay_ms}ms"
            for prop in self.properties
        )


@dataclass(frozen=True)
class InteractionStyle:
    """Values a renderer applies on top of the base style for :hover or :active."""

    background: str | None = None
    border_color: str | None = None
    shadow_index: int | None = None
    shadow: str | None = None
    transform: str | None = None

    def to_css(self) -> dict[str, str]:
        css: dict[str, str] = {}
        if self.background is not None:
            css["background-color"] = self.background
        if self.border_color is not None:
            css["border-color"] = self.border_color
        if self.shadow is not None:
            css["box-shadow"] = self.shadow
        if self.transform is not None:
            css["transform"] = self.transform
        return css


@dataclass(frozen=True)
class StyleDescriptor:
    """
    Resolved style for one component in one interaction state.

    Base values already reflect the current states (a hovered trigger carries
    its hover background). hover/active describe the affordances a renderer
    attaches to pseudo-classes; both are None while disabled.

    shadow_index is the elevation index into the token shadow table, or None
    when shadow holds a literal value outside the table.
    """

    kind: ComponentKind
    variant: str
    color_role: str
    foreground: str
    background: str
    border: BorderSpec | None
    border_radius: str
    padding: str
    font_family: str
    font_size: str
    font_weight: int
    line_height: str
    letter_spacing: str
    text_transform: str | None
    shadow_index: int | None
    shadow: str
    opacity: float
    cursor: str
    pointer_events: str
    width: str
    transform: str
    transition: TransitionSpec
    focus_ring: str | None = None
    gap: str | None = None
    label_color: str | None = None
    helper_text_color: str | None = None
    hover: InteractionStyle | None = None
    active: InteractionStyle | None = None

    def to_css(self) -> dict[str, str]:
        """Base style as a CSS property dict (kebab-case keys)."""
        css: dict[str, str] = {
            "color": self.foreground,
            "background-color": self.background,
            "border-radius": self.border_radius,
            "padding": self.padding,
            "font-family": self.font_family,
            "font-size": self.font_size,
            "font-weight": str(self.font_weight),
            "line-height": self.line_height,
            "letter-spacing": self.letter_spacing,
        }
        if self.text_transform:
            css["text-transform"] = self.text_transform

        if self.border is None:
            css["border"] = "none"
        elif self.border.sides == "bottom":
            css["border"] = "none"
            css["border-bottom"] = self.border.css()
        else:
            css["border"] = self.border.css()

        css["box-shadow"] = self.focus_ring or self.shadow
        css["opacity"] = f"{self.opacity:g}"
        css["cursor"] = self.cursor
        css["pointer-events"] = self.pointer_events
        css["width"] = self.width
        css["transform"] = self.transform
        css["transition"] = self.transition.css()
        if self.gap is not None:
            css["gap"] = self.gap
        return css


# --- Configuration ---


@dataclass(frozen=True)
class SizeSpec:
    padding: str
    font_size: str


def _trigger_sizes() -> Mapping[str, SizeSpec]:
    return MappingProxyType({
        Size.SMALL: SizeSpec(padding="6px 12px", font_size="0.875rem"),
        Size.MEDIUM: SizeSpec(padding="8px 16px", font_size="1rem"),
        Size.LARGE: SizeSpec(padding="10px 20px", font_size="1.125rem"),
    })


def _field_sizes() -> Mapping[str, SizeSpec]:
    return MappingProxyType({
        Size.SMALL: SizeSpec(padding="8px 12px", font_size="0.875rem"),
        Size.MEDIUM: SizeSpec(padding="10px 14px", font_size="0.9375rem"),
        Size.LARGE: SizeSpec(padding="12px 16px", font_size="1rem"),
    })


@dataclass(frozen=True)
class ResolverConfig:
    """Fixed presentation constants used by the resolver."""

    trigger_sizes: Mapping[str, SizeSpec] = field(default_factory=_trigger_sizes)
    field_sizes: Mapping[str, SizeSpec] = field(default_factory=_field_sizes)

    # Disabled presentation
    trigger_disabled_opacity: float = 0.5
    container_disabled_opacity: float = 0.6

    # Elevation
    raised_increment: int = 8
    hover_lift_steps: int = 4
    trigger_hover_shadow: int = 2
    trigger_pressed_shadow: int = 8

    # Transforms
    lift_transform: str = "translateY(-2px)"
    rest_transform: str = "translateY(0)"

    # Text and surfaces
    text_primary: str = "rgba(0, 0, 0, 0.87)"
    text_secondary: str = "rgba(0, 0, 0, 0.6)"
    text_disabled: str = "rgba(0, 0, 0, 0.38)"
    text_hover_background: str = "rgba(0, 0, 0, 0.04)"
    outlined_hover_shadow: str = "0 4px 20px rgba(0, 0, 0, 0.1)"
    focus_ring_alpha: float = 0.2

    # Shape
    trigger_radius: str = "4px"
    field_radius: str = "4px"
    container_radius: str = "8px"

    def __post_init__(self) -> None:
        # Size tables are always read-only mappings
        object.__setattr__(self, "trigger_sizes", MappingProxyType(dict(self.trigger_sizes)))
        object.__setattr__(self, "field_sizes", MappingProxyType(dict(self.field_sizes)))


DEFAULT_CONFIG = ResolverConfig()


# --- Component I/O ---


@dataclass(frozen=True)
class ResolveStyleInput:
    """Input for resolving a component style."""

    intent: StyleIntent
    tokens: DesignTokens = field(default_factory=lambda: DEFAULT_TOKENS)
    config: ResolverConfig = field(default_factory=lambda: DEFAULT_CONFIG)


@dataclass(frozen=True)
class ResolveStyleOutput:
    """Output from resolving a component style."""

    descriptor: StyleDescriptor
