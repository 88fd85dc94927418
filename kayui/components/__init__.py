"""
Engine components.

Each component follows the same layout:
- models.py: frozen input/output dataclasses
- ports.py: Protocol interfaces for swappable dependencies (where needed)
- _impl.py: internal helpers
- component.py: pure functions plus run_* entry points
"""
