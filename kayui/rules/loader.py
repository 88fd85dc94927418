import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from kayui.components.tokens import merge_tokens
from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import DesignTokens
from kayui.rules.models import ThemeFile

logger = logging.getLogger(__name__)


def _strip_fence(content: str) -> str:
    """Return the body of the first ```yaml block, or the whole text if none."""
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_yaml_document(path: Path) -> object:
    """
    Read a YAML (or JSON) file, accepting a markdown ```yaml fence.
    Raises FileNotFoundError if file missing.
    Raises ValueError on a syntax error.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        return yaml.safe_load(_strip_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in {path}: {e}") from e


def load_theme_file(path: Path) -> ThemeFile:
    """
    Load and validate a single theme file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    data = load_yaml_document(path)
    try:
        return ThemeFile.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Theme validation failed for {path}:\n{e}") from e


def _collect_overrides(path: Path, stack: tuple[Path, ...]) -> list[dict]:
    resolved = path.resolve()
    if resolved in stack:
        chain = " -> ".join(str(p) for p in (*stack, resolved))
        raise ValueError(f"Theme inheritance cycle: {chain}")

    theme = load_theme_file(path)
    overrides: list[dict] = []
    for parent in theme.extends:
        overrides.extend(_collect_overrides(path.parent / parent, (*stack, resolved)))
    overrides.append(theme.tokens)
    return overrides


def load_theme(path: Path, base: DesignTokens = DEFAULT_TOKENS) -> DesignTokens:
    """
    Build a token tree from a theme file.

    Parent themes listed under `extends` are applied first, left to right,
    each with its own parents before it; the file's own tokens win last.
    Paths in `extends` are relative to the file naming them.
    """
    overrides = _collect_overrides(Path(path), ())
    logger.info("Loaded theme %s (%d override layers)", path, len(overrides))
    return merge_tokens(base, *overrides)
