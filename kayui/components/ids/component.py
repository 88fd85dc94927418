"""
Identifier generator - short non-cryptographic ids for labelling elements.

Ids are `prefix-` followed by nine base-36 characters. Uniqueness is
probabilistic only; do not use them for anything security sensitive.
"""

from __future__ import annotations

import random
import string

from .ports import RandomPort

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9
DEFAULT_PREFIX = "kay-ui"

_rng = random.Random()


def generate_id(prefix: str = DEFAULT_PREFIX, *, rng: RandomPort | None = None) -> str:
    """
    Generate an identifier such as ``kay-ui-4fzyo82mv``.

    Args:
        prefix: Leading label, joined with a hyphen
        rng: Entropy source (defaults to a module-level random.Random)
    """
    suffix = "".join((rng or _rng).choices(ID_ALPHABET, k=ID_LENGTH))
    return f"{prefix}-{suffix}"
