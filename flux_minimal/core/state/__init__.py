# flux_minimal/core/state/__init__.py
"""Subscribable state container.

Public API:
    - DataStore: mutable state tree with merge/replace and change subscribers
    - ValueKind: LEAF / MAPPING / SEQUENCE classification used by the merge
    - merge_patch: the recursive merge, usable on plain dicts
"""
from flux_minimal.core.state.merge import ValueKind, classify, merge_patch
from flux_minimal.core.state.store import DataStore

__all__ = ["DataStore", "ValueKind", "classify", "merge_patch"]
