# flux_minimal/core/actions/__init__.py
"""Named action registry.

Public API:
    - Actions: declare actions, register handlers, call, subscribe
    - ActionRecord: per-action subscribers and handler
"""
from flux_minimal.core.actions.record import ActionRecord
from flux_minimal.core.actions.registry import Actions

__all__ = ["Actions", "ActionRecord"]
