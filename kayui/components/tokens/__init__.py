"""
Tokens component - default design tokens and the customization merge.
"""

from ._impl import deep_merge, merge_into
from .component import create_theme, merge_tokens, run_merge, spacing_to_css
from .models import MergeTokensInput, MergeTokensOutput, Override

__all__ = [
    # Entry points
    "run_merge",
    "merge_tokens",
    "create_theme",
    # Models
    "MergeTokensInput",
    "MergeTokensOutput",
    "Override",
    # Functions
    "deep_merge",
    "merge_into",
    "spacing_to_css",
]
