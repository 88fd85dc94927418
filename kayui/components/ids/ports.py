"""
Identifier component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class RandomPort(Protocol):
    """Entropy source; random.Random satisfies it."""

    def choices(self, population: Sequence[str], *, k: int = 1) -> list[str]:
        """Draw k elements with replacement."""
        ...
