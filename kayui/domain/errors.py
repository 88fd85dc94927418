"""
Error taxonomy for the token engine.

All errors are local, synchronous, caller-facing failures. They indicate a
programming error at the call site and are never retried or recovered
internally.
"""

from __future__ import annotations

from collections.abc import Iterable


class KayUIError(Exception):
    """Base token engine error."""

    pass


class InvalidOverrideShape(KayUIError):
    """An override does not fit the structure of the token tree."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        where = path or "<root>"
        super().__init__(f"Invalid override at '{where}': {reason}")


class UnknownVariant(KayUIError):
    """A variant outside the component kind's fixed set was requested."""

    def __init__(self, kind: str, variant: str, allowed: Iterable[str]) -> None:
        self.kind = kind
        self.variant = variant
        self.allowed = tuple(allowed)
        super().__init__(
            f"Unknown {kind} variant '{variant}'. Expected one of: {', '.join(self.allowed)}"
        )


class UnknownColorRole(KayUIError):
    """Neither the requested role nor the primary fallback exists in the tree."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(
            f"Color role '{role}' cannot be resolved: token tree has no 'primary' ramp"
        )


class UnknownBreakpoint(KayUIError):
    """A breakpoint name outside the recognized set was supplied."""

    def __init__(self, name: str, allowed: Iterable[str]) -> None:
        self.name = name
        self.allowed = tuple(allowed)
        super().__init__(
            f"Unknown breakpoint '{name}'. Expected one of: {', '.join(self.allowed)}"
        )
