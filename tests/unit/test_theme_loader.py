"""
Tests for YAML theme files and theme inheritance.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from kayui.domain import DEFAULT_TOKENS, InvalidOverrideShape
from kayui.rules import ThemeFile, load_theme, load_theme_file, load_yaml_document

BRAND_THEME = """
name: brand
description: Brand colors
tokens:
  colors:
    primary:
      main: "#123456"
  spacing:
    md: 20px
"""


@pytest.fixture
def brand_path(tmp_path: Path) -> Path:
    path = tmp_path / "brand.yaml"
    path.write_text(BRAND_THEME)
    return path


class TestLoadThemeFile:
    """Single theme file loading and validation."""

    def test_load_valid_file(self, brand_path: Path) -> None:
        theme = load_theme_file(brand_path)

        assert isinstance(theme, ThemeFile)
        assert theme.name == "brand"
        assert theme.extends == []
        assert theme.tokens["spacing"] == {"md": "20px"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_theme_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_theme_file(path)

    def test_schema_error(self, tmp_path: Path) -> None:
        """Unknown top-level keys fail validation."""
        path = tmp_path / "bad.yaml"
        path.write_text("name: x\npalette: {}\n")
        with pytest.raises(ValueError, match="Theme validation failed"):
            load_theme_file(path)

    def test_missing_name(self, tmp_path: Path) -> None:
        path = tmp_path / "anon.yaml"
        path.write_text("tokens: {}\n")
        with pytest.raises(ValueError):
            load_theme_file(path)

    def test_markdown_fence(self, tmp_path: Path) -> None:
        """A theme wrapped in a markdown yaml fence is accepted."""
        path = tmp_path / "theme.md"
        path.write_text("# Brand theme\n\n```yaml\nname: fenced\ntokens: {}\n```\n\nNotes.\n")
        assert load_theme_file(path).name == "fenced"

    def test_json_document(self, tmp_path: Path) -> None:
        """JSON is valid YAML."""
        path = tmp_path / "frag.json"
        path.write_text('{"sm": {"padding": "8px"}}')
        assert load_yaml_document(path) == {"sm": {"padding": "8px"}}


class TestLoadTheme:
    """Theme files merged onto the defaults."""

    def test_applies_tokens(self, brand_path: Path) -> None:
        tokens = load_theme(brand_path)
        assert tokens.colors.primary.main == "#123456"
        assert tokens.spacing.md == "20px"
        assert tokens.colors.secondary == DEFAULT_TOKENS.colors.secondary

    def test_extends_applied_first(self, tmp_path: Path, brand_path: Path) -> None:
        """The child file wins over its parents."""
        child = tmp_path / "child.yaml"
        child.write_text(
            "name: child\nextends: [brand.yaml]\ntokens:\n  spacing:\n    md: 24px\n"
        )

        tokens = load_theme(child)

        assert tokens.spacing.md == "24px"
        assert tokens.colors.primary.main == "#123456"

    def test_extends_left_to_right(self, tmp_path: Path) -> None:
        (tmp_path / "a.yaml").write_text("name: a\ntokens: {spacing: {md: 1px, lg: 2px}}\n")
        (tmp_path / "b.yaml").write_text("name: b\ntokens: {spacing: {md: 3px}}\n")
        child = tmp_path / "c.yaml"
        child.write_text("name: c\nextends: [a.yaml, b.yaml]\n")

        tokens = load_theme(child)

        assert tokens.spacing.md == "3px"
        assert tokens.spacing.lg == "2px"

    def test_extends_relative_to_file(self, tmp_path: Path, brand_path: Path) -> None:
        nested = tmp_path / "themes"
        nested.mkdir()
        child = nested / "child.yaml"
        child.write_text("name: child\nextends: [../brand.yaml]\n")

        assert load_theme(child).colors.primary.main == "#123456"

    def test_cycle_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "a.yaml").write_text("name: a\nextends: [b.yaml]\n")
        (tmp_path / "b.yaml").write_text("name: b\nextends: [a.yaml]\n")

        with pytest.raises(ValueError, match="cycle"):
            load_theme(tmp_path / "a.yaml")

    def test_missing_parent(self, tmp_path: Path) -> None:
        child = tmp_path / "child.yaml"
        child.write_text("name: child\nextends: [nowhere.yaml]\n")
        with pytest.raises(FileNotFoundError):
            load_theme(child)

    def test_bad_override_shape(self, tmp_path: Path) -> None:
        """Token shape errors surface as InvalidOverrideShape."""
        path = tmp_path / "bad.yaml"
        path.write_text("name: bad\ntokens:\n  spacing:\n    md:\n      value: 20px\n")
        with pytest.raises(InvalidOverrideShape):
            load_theme(path)

    def test_custom_base(self, brand_path: Path) -> None:
        from kayui.components.tokens import merge_tokens

        base = merge_tokens(DEFAULT_TOKENS, {"spacing": {"lg": "40px"}})
        tokens = load_theme(brand_path, base=base)
        assert tokens.spacing.lg == "40px"
        assert tokens.spacing.md == "20px"
