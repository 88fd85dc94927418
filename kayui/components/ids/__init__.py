"""
Identifier component - prefixed pseudo-random element ids.
"""

from .component import DEFAULT_PREFIX, ID_ALPHABET, ID_LENGTH, generate_id
from .ports import RandomPort

__all__ = [
    # Entry points
    "generate_id",
    # Constants
    "DEFAULT_PREFIX",
    "ID_ALPHABET",
    "ID_LENGTH",
    # Ports
    "RandomPort",
]
