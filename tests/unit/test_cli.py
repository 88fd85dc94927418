"""
Tests for the kayui command line.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kayui.app_shell.cli import build_parser, main


def run_cli(capsys: pytest.CaptureFixture[str], *argv: str) -> object:
    main(list(argv))
    return json.loads(capsys.readouterr().out)


class TestTokensCommand:
    def test_dump_defaults(self, capsys: pytest.CaptureFixture[str]) -> None:
        data = run_cli(capsys, "tokens")
        assert isinstance(data, dict)
        assert data["colors"]["primary"]["main"] == "#1976d2"
        assert len(data["shadows"]) == 25

    def test_dump_with_theme(self, capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
        theme = tmp_path / "theme.yaml"
        theme.write_text("name: t\ntokens:\n  spacing:\n    md: 18px\n")

        data = run_cli(capsys, "tokens", "--theme", str(theme))

        assert isinstance(data, dict)
        assert data["spacing"]["md"] == "18px"


class TestResolveCommand:
    def test_resolve_descriptor(self, capsys: pytest.CaptureFixture[str]) -> None:
        data = run_cli(capsys, "resolve", "trigger", "--variant", "outlined", "--color", "secondary")

        assert isinstance(data, dict)
        assert data["kind"] == "trigger"
        assert data["variant"] == "outlined"
        assert data["border"]["color"] == "#c2185b"
        assert data["hover"]["background"] == "#f06292"

    def test_resolve_css(self, capsys: pytest.CaptureFixture[str]) -> None:
        data = run_cli(capsys, "resolve", "field", "--state", "error", "--state", "focused", "--css")

        assert isinstance(data, dict)
        assert data["border"] == "2px solid #d32f2f"

    def test_resolve_container_flags(self, capsys: pytest.CaptureFixture[str]) -> None:
        data = run_cli(capsys, "resolve", "container", "--elevation", "20", "--raised")
        assert isinstance(data, dict)
        assert data["shadow_index"] == 24

    def test_unknown_variant_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "trigger", "--variant", "ghost"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    def test_unknown_kind_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["resolve", "slider"])
        assert exc_info.value.code == 2


class TestResponsiveCommand:
    def test_compile_file(self, capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
        frag = tmp_path / "layout.yaml"
        frag.write_text("lg:\n  columns: 3\nsm:\n  columns: 1\n")

        data = run_cli(capsys, "responsive", str(frag))

        assert data == [
            {
                "breakpoint": "sm",
                "minWidth": 600,
                "mediaQuery": "@media (min-width: 600px)",
                "style": {"columns": 1},
            },
            {
                "breakpoint": "lg",
                "minWidth": 1200,
                "mediaQuery": "@media (min-width: 1200px)",
                "style": {"columns": 3},
            },
        ]

    def test_unknown_breakpoint_exits(self, tmp_path: Path) -> None:
        frag = tmp_path / "layout.yaml"
        frag.write_text("xxl:\n  columns: 3\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["responsive", str(frag)])
        assert exc_info.value.code == 1

    def test_non_mapping_file_exits(self, tmp_path: Path) -> None:
        frag = tmp_path / "layout.yaml"
        frag.write_text("- sm\n- lg\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["responsive", str(frag)])
        assert exc_info.value.code == 1

    def test_empty_breakpoint_exits(self, tmp_path: Path) -> None:
        frag = tmp_path / "layout.yaml"
        frag.write_text("sm:\nlg:\n  columns: 3\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["responsive", str(frag)])
        assert exc_info.value.code == 1

    def test_missing_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["responsive", str(tmp_path / "nope.yaml")])
        assert exc_info.value.code == 1


class TestIdCommand:
    def test_default_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        value = run_cli(capsys, "id")
        assert isinstance(value, str)
        assert value.startswith("kay-ui-")

    def test_custom_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        value = run_cli(capsys, "id", "--prefix", "menu")
        assert isinstance(value, str)
        assert value.startswith("menu-")
