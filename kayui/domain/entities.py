"""
Design token entities.

The token tree is a set of frozen pydantic models. Field names are snake_case
in Python; on the wire (overrides, theme files, dumps) the camelCase names of
the token documents are used, and color shade stops are keyed by
their numeric stop ("50" .. "900").

Invariants:
- every semantic color role carries ten shade stops plus main/light/dark/contrastText
- grey carries only the ten shade stops, common only black/white
- breakpoints are strictly increasing and start at xs = 0
- the shadow table has exactly 25 entries, index 0 meaning "no shadow"
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

SHADE_STOPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
SEMANTIC_ROLES = ("primary", "secondary", "error", "warning", "info", "success")
BREAKPOINT_NAMES = ("xs", "sm", "md", "lg", "xl")
SPACING_STEPS = ("xxxs", "xxs", "xs", "sm", "md", "lg", "xl", "xxl", "xxxl")
SHADOW_COUNT = 25
MAX_ELEVATION = SHADOW_COUNT - 1


class TokenModel(BaseModel):
    """Base for every node of the token tree."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )


# --- Spacing ---


class SpacingScale(TokenModel):
    """Nine-rung spacing scale, smallest to largest."""

    xxxs: str
    xxs: str
    xs: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str
    xxxl: str

    def steps(self) -> tuple[tuple[str, str], ...]:
        """Return (name, length) pairs in scale order."""
        return tuple((name, getattr(self, name)) for name in SPACING_STEPS)


# --- Colors ---


class GreyRamp(TokenModel):
    """Neutral ramp: shade stops only."""

    shade_50: str = Field(alias="50")
    shade_100: str = Field(alias="100")
    shade_200: str = Field(alias="200")
    shade_300: str = Field(alias="300")
    shade_400: str = Field(alias="400")
    shade_500: str = Field(alias="500")
    shade_600: str = Field(alias="600")
    shade_700: str = Field(alias="700")
    shade_800: str = Field(alias="800")
    shade_900: str = Field(alias="900")

    def shade(self, stop: int) -> str:
        """Look up a shade by its numeric stop (50, 100 ... 900)."""
        if stop not in SHADE_STOPS:
            raise ValueError(f"Unknown shade stop {stop}. Expected one of: {SHADE_STOPS}")
        return getattr(self, f"shade_{stop}")


class ColorRamp(GreyRamp):
    """Semantic color family with derived roles."""

    main: str
    light: str
    dark: str
    contrast_text: str


class CommonColors(TokenModel):
    black: str
    white: str


class Palette(TokenModel):
    """Semantic role name -> ramp."""

    primary: ColorRamp
    secondary: ColorRamp
    error: ColorRamp
    warning: ColorRamp
    info: ColorRamp
    success: ColorRamp
    grey: GreyRamp
    common: CommonColors

    def ramp(self, role: str) -> ColorRamp | None:
        """
        Return the semantic ramp for a role, or None.

        None covers unknown role names, the neutral families (which have no
        main color) and roles missing from a tree built without validation.
        """
        value = getattr(self, role, None)
        if isinstance(value, ColorRamp):
            return value
        return None


# --- Typography ---


class TypeStyle(TokenModel):
    font_size: str
    font_weight: int
    line_height: str
    letter_spacing: str
    text_transform: str | None = None


class Typography(TokenModel):
    font_family: str
    h1: TypeStyle
    h2: TypeStyle
    h3: TypeStyle
    h4: TypeStyle
    h5: TypeStyle
    h6: TypeStyle
    subtitle1: TypeStyle
    subtitle2: TypeStyle
    body1: TypeStyle
    body2: TypeStyle
    button: TypeStyle
    caption: TypeStyle
    overline: TypeStyle


# --- Breakpoints ---


class Breakpoints(TokenModel):
    """Minimum viewport widths, in pixels."""

    xs: int
    sm: int
    md: int
    lg: int
    xl: int

    @model_validator(mode="after")
    def _check_order(self) -> Breakpoints:
        if self.xs != 0:
            raise ValueError(f"breakpoint xs must be 0, got {self.xs}")
        widths = [width for _, width in self.items()]
        for lower, upper in zip(widths, widths[1:]):
            if upper <= lower:
                raise ValueError(f"breakpoints must be strictly increasing: {widths}")
        return self

    def items(self) -> tuple[tuple[str, int], ...]:
        """Return (name, min_width) pairs from smallest to largest."""
        return tuple((name, getattr(self, name)) for name in BREAKPOINT_NAMES)


# --- Transitions ---


class Easing(TokenModel):
    ease_in_out: str
    ease_out: str
    ease_in: str
    sharp: str


class Durations(TokenModel):
    """Named durations in milliseconds."""

    shortest: int = Field(ge=0)
    shorter: int = Field(ge=0)
    short: int = Field(ge=0)
    standard: int = Field(ge=0)
    complex: int = Field(ge=0)
    entering_screen: int = Field(ge=0)
    leaving_screen: int = Field(ge=0)


class Transitions(TokenModel):
    easing: Easing
    duration: Durations


# --- Root ---


class DesignTokens(TokenModel):
    """
    Root token tree.

    Never mutated: customization goes through merge_tokens, which builds a
    new tree.
    """

    spacing: SpacingScale
    colors: Palette
    typography: Typography
    breakpoints: Breakpoints
    shadows: tuple[str, ...]
    transitions: Transitions

    @field_validator("shadows")
    @classmethod
    def _check_shadows(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) != SHADOW_COUNT:
            raise ValueError(
                f"shadow table must have exactly {SHADOW_COUNT} entries, got {len(value)}"
            )
        return value

    def shadow(self, index: int) -> str:
        """Shadow for an elevation, clamped to the table range."""
        return self.shadows[clamp_elevation(index)]

    def as_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible tree, keyed the way overrides are written."""
        return self.model_dump(mode="json", by_alias=True)


def clamp_elevation(elevation: int) -> int:
    """Clamp an elevation request to [0, 24]."""
    return max(0, min(MAX_ELEVATION, elevation))
