"""
Responsive component - breakpoint fragments compiled into min-width rules.
"""

from .component import compile_responsive, responsive_styles, run_compile
from .models import (
    CompileResponsiveInput,
    CompileResponsiveOutput,
    ResponsiveRule,
    StyleFragment,
)

__all__ = [
    # Entry points
    "run_compile",
    "compile_responsive",
    "responsive_styles",
    # Models
    "CompileResponsiveInput",
    "CompileResponsiveOutput",
    "ResponsiveRule",
    "StyleFragment",
]
