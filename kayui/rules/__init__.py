"""
Theme configuration: YAML theme files layered onto the default tokens.
"""

from kayui.rules.loader import load_theme, load_theme_file, load_yaml_document
from kayui.rules.models import ThemeFile

__all__ = ["ThemeFile", "load_theme", "load_theme_file", "load_yaml_document"]
