"""
Structure lint tests.
Verify that every engine component follows the package layout conventions.
"""

import importlib
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
COMPONENTS_DIR = PROJECT_ROOT / "kayui" / "components"

COMPONENTS = ["tokens", "styles", "responsive", "timing", "ids"]
ENTRY_POINTS = {
    "tokens": "run_merge",
    "styles": "run_resolve",
    "responsive": "run_compile",
}


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_core_directories_exist(self) -> None:
        """Core package directories must exist."""
        for name in ("domain", "components", "adapters", "rules", "app_shell"):
            assert (PROJECT_ROOT / "kayui" / name).is_dir(), name

    def test_tests_structure_exists(self) -> None:
        """Test directories must follow conventions."""
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()

    @pytest.mark.parametrize("component", COMPONENTS)
    def test_component_layout(self, component: str) -> None:
        """Each component has a package init and a component module."""
        path = COMPONENTS_DIR / component
        assert (path / "__init__.py").is_file()
        assert (path / "component.py").is_file()

    @pytest.mark.parametrize("component", COMPONENTS)
    def test_component_exports_resolve(self, component: str) -> None:
        """Every name in __all__ is importable from the component package."""
        module = importlib.import_module(f"kayui.components.{component}")
        for name in module.__all__:
            assert hasattr(module, name), f"{component}.{name}"

    @pytest.mark.parametrize(("component", "entry_point"), sorted(ENTRY_POINTS.items()))
    def test_entry_points_exported(self, component: str, entry_point: str) -> None:
        """Components with I/O models expose a run_* entry point."""
        module = importlib.import_module(f"kayui.components.{component}")
        assert entry_point in module.__all__
        assert callable(getattr(module, entry_point))
