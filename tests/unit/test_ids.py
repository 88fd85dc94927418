"""
Tests for the identifier generator.
"""

from __future__ import annotations

import random
import re

from kayui.components.ids import ID_ALPHABET, generate_id

ID_PATTERN = re.compile(r"^kay-ui-[0-9a-z]{9}$")


class TestGenerateId:
    """generate_id format and entropy source."""

    def test_default_format(self) -> None:
        """Default ids are kay-ui- plus nine base-36 characters."""
        assert ID_PATTERN.match(generate_id())

    def test_custom_prefix(self) -> None:
        value = generate_id("dialog-title")
        assert value.startswith("dialog-title-")
        assert len(value) == len("dialog-title-") + 9

    def test_seeded_rng_is_reproducible(self) -> None:
        """A seeded generator gives repeatable ids."""
        assert generate_id(rng=random.Random(7)) == generate_id(rng=random.Random(7))

    def test_rng_port(self) -> None:
        """Any object with choices() can supply the suffix."""

        class ZeroRandom:
            def choices(self, population: str, *, k: int = 1) -> list[str]:
                return [population[0]] * k

        assert generate_id("x", rng=ZeroRandom()) == "x-000000000"

    def test_collisions_are_rare(self) -> None:
        """A thousand ids are all distinct."""
        ids = {generate_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_alphabet(self) -> None:
        assert ID_ALPHABET == "0123456789abcdefghijklmnopqrstuvwxyz"
