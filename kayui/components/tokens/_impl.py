"""
Structural merge for token trees.

Pure functions over plain nested mappings. Nothing here mutates its inputs:
every merge builds new dicts along the paths it touches, and leaf values
taken from an override are deep-copied so the result never aliases caller
data.

Merge rules, for a key present in both the accumulator and an override:
- mapping onto mapping merges recursively
- anything else replaces the accumulated value wholesale (sequences
  included, so a shadow table override must be complete)
- a mapping onto a scalar or sequence is a shape error
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from kayui.domain.errors import InvalidOverrideShape

_MISSING = object()


def _normalise_key(key: Any, path: str) -> str:
    """Shade stops may be written as ints in Python overrides; the tree keys are strings."""
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    if not isinstance(key, str):
        raise InvalidOverrideShape(path, f"keys must be strings, got {key!r}")
    return key


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def merge_into(acc: Mapping[str, Any], override: Mapping[Any, Any], path: str = "") -> dict[str, Any]:
    """
    Merge one override into an accumulated tree.

    Args:
        acc: Accumulated tree (left untouched)
        override: Partial tree whose values take precedence
        path: Dotted path of acc within the root, used in error messages

    Returns:
        A new dict. Subtrees the override does not touch are shared with acc.

    Raises:
        InvalidOverrideShape: if a mapping is merged onto a non-mapping value
    """
    result = dict(acc)
    for raw_key, value in override.items():
        key = _normalise_key(raw_key, path)
        child_path = _join(path, key)
        current = result.get(key, _MISSING)

        if isinstance(value, Mapping):
            if current is _MISSING:
                result[key] = merge_into({}, value, child_path)
            elif isinstance(current, Mapping):
                result[key] = merge_into(current, value, child_path)
            else:
                raise InvalidOverrideShape(
                    child_path,
                    f"cannot merge a mapping onto a {type(current).__name__} value",
                )
        else:
            result[key] = copy.deepcopy(value)

    return result


def deep_merge(target: Mapping[Any, Any], *sources: Mapping[Any, Any]) -> dict[str, Any]:
    """
    Merge sources into target, left to right, returning a new dict.

    Later sources take precedence over earlier ones and over target.
    """
    result = merge_into({}, target)
    for index, source in enumerate(sources):
        if not isinstance(source, Mapping):
            raise InvalidOverrideShape(
                "", f"source #{index} must be a mapping, got {type(source).__name__}"
            )
        result = merge_into(result, source)
    return result


def describe_validation_error(exc: ValidationError) -> tuple[str, str]:
    """
    Turn a pydantic ValidationError into (path, reason).

    The path is the dotted location of the first error; the reason lists
    every error message with its location.
    """
    errors = exc.errors()
    if not errors:
        return "", str(exc)

    def loc_of(error: Mapping[str, Any]) -> str:
        loc = error.get("loc", ())
        return ".".join(str(part) for part in loc)

    first_path = loc_of(errors[0])
    reasons = []
    for error in errors:
        where = loc_of(error)
        msg = error.get("msg", "Invalid value")
        reasons.append(f"{where}: {msg}" if where else msg)

    return first_path, "; ".join(reasons)
