"""
Styles component - variant style resolution for triggers, fields and containers.
"""

from ._impl import check_variant, create_transition, resolve_ramp, with_alpha
from .component import class_names, resolve_style, run_resolve
from .models import (
    DEFAULT_CONFIG,
    DEFAULT_VARIANTS,
    VARIANTS,
    BorderSpec,
    ColorRole,
    ComponentKind,
    ContainerVariant,
    FieldVariant,
    InteractionState,
    InteractionStyle,
    ResolverConfig,
    ResolveStyleInput,
    ResolveStyleOutput,
    Size,
    SizeSpec,
    StyleDescriptor,
    StyleIntent,
    TransitionSpec,
    TriggerVariant,
)

__all__ = [
    # Entry points
    "run_resolve",
    "resolve_style",
    # Input/output models
    "StyleIntent",
    "StyleDescriptor",
    "BorderSpec",
    "InteractionStyle",
    "TransitionSpec",
    "ResolveStyleInput",
    "ResolveStyleOutput",
    # Enumerations
    "ComponentKind",
    "TriggerVariant",
    "FieldVariant",
    "ContainerVariant",
    "ColorRole",
    "Size",
    "InteractionState",
    "VARIANTS",
    "DEFAULT_VARIANTS",
    # Configuration
    "ResolverConfig",
    "SizeSpec",
    "DEFAULT_CONFIG",
    # Helpers
    "check_variant",
    "class_names",
    "create_transition",
    "resolve_ramp",
    "with_alpha",
]
