# flux_minimal/core/state/merge.py
"""Recursive key merge used by DataStore.set_state.

Values in a state tree fall into three kinds:

- MAPPING: nested key/value mappings, merged key by key
- SEQUENCE: lists and tuples, always replaced wholesale (never merged)
- LEAF: everything else (str, bytes, numbers, bool, arbitrary objects)

A ``None`` value in a patch deletes the key from the target.
"""

from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Classification of a state value for merging."""

    LEAF = "leaf"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of ``value``.

    str and bytes are sequences in the abc sense but are leaves here.
    """
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.LEAF


def is_patch(value: Any) -> bool:
    """True if ``value`` can be passed to merge_patch as a patch."""
    return classify(value) is ValueKind.MAPPING


def merge_patch(patch: Mapping[str, Any], stem: MutableMapping[str, Any]) -> None:
    """Merge ``patch`` into ``stem`` in place.

    For each key of the patch, in iteration order:
    - None deletes the key from stem (missing keys are ignored)
    - a mapping over a mutable mapping recurses
    - anything else overwrites stem[key] verbatim

    Keys of stem that the patch does not mention are left untouched.
    The patch may be stem itself or one of its subtrees.
    """
    # Snapshot: deleting from stem may resize the patch when they alias
    for key, value in list(patch.items()):
        if value is None:
            stem.pop(key, None)
            continue

        current = stem.get(key)
        if classify(value) is ValueKind.MAPPING and isinstance(current, MutableMapping):
            merge_patch(value, current)
        else:
            # SEQUENCE and LEAF values, or a mapping replacing a non-mapping
            stem[key] = value
