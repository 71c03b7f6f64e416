# flux_minimal/core/state/store.py
"""Subscribable state container.

Usage:
    store = DataStore({"hello": "world"})
    store.on_state_changed(lambda state: print(state))

    store.set_state({"hello": "hey"})      # merge, prints {'hello': 'hey'}
    store.set_state({"hello": None})       # None deletes the key
    store.replace_state({"fresh": True})   # swap the whole tree

Locking:
- The store lock is held across the mutation and the notification loop, so
  concurrent writers never interleave their notifications
- The lock is re-entrant: a subscriber may call set_state on the same store
- Subscriber exceptions propagate to the caller of set_state/replace_state
  and abort the remaining notifications of that cycle
"""

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, Optional

from flux_minimal.common.options import DEFAULT_OPTIONS, FluxOptions, make_lock
from flux_minimal.core.errors import InvalidArgumentError
from flux_minimal.core.state.merge import is_patch, merge_patch
from flux_minimal.core.subscribers import SubscriberList

StateCallback = Callable[[Any], Any]

# Values replace_state refuses to store as the state
_PRIMITIVES = (str, bytes, bool, int, float, complex)


def _get_logger() -> logging.Logger:
    """Get module logger (lazy to avoid side effect at import time)."""
    return logging.getLogger(__name__)


class DataStore:
    """Mutable state tree with merge/replace mutation and change subscribers.

    Example:
        >>> store = DataStore({"something": {"nothing": 1, "anything": 2}})
        >>> store.set_state({"something": {"nothing": None}})
        >>> store.state
        {'something': {'anything': 2}}
    """

    def __init__(self, initial_state: Any = None, *, options: Optional[FluxOptions] = None) -> None:
        """Create a store.

        Args:
            initial_state: Initial tree, kept by reference. None starts with an empty dict.
                           The shape is not validated.
            options: Locking/tracing options (defaults to FluxOptions())
        """
        self._options = options or DEFAULT_OPTIONS
        self._state = initial_state if initial_state is not None else {}
        self._subscribers = SubscriberList(self._options)
        self._lock = make_lock(self._options)

    @property
    def state(self) -> Any:
        """The current state tree (read it freely, mutate it through the store)."""
        return self._state

    @property
    def subscribers(self) -> tuple[StateCallback, ...]:
        return self._subscribers.snapshot()

    def set_state(self, patch: Mapping[str, Any], stem: Optional[MutableMapping[str, Any]] = None) -> None:
        """Non-destructive set state.

        Keys set to None are deleted, nested mappings are merged recursively,
        everything else (including lists) replaces the existing value.
        Keys missing from the patch are left as they are.

        Args:
            patch: Partial state to merge
            stem: Subtree to merge into (defaults to the root state). Subscribers
                  are notified only when the merge target is the root state.

        Raises:
            InvalidArgumentError: patch is not a mapping, or stem is not a mutable mapping
        """
        if not is_patch(patch):
            raise InvalidArgumentError(
                "DataStore.set_state: patch must be a mapping",
                context={"type": type(patch).__name__},
            )

        with self._lock:
            target = self._state if stem is None else stem
            if not isinstance(target, MutableMapping):
                raise InvalidArgumentError(
                    "DataStore.set_state: cannot merge into a non-mapping",
                    context={"type": type(target).__name__},
                )

            merge_patch(patch, target)

            # Only the outer layer notifies
            if target is self._state:
                self._trace("merged %d key(s)", len(patch))
                self._notify()

    def replace_state(self, new_state: Any) -> None:
        """Replace the whole state tree and notify subscribers.

        Any object is accepted (mappings, lists, dataclass instances, ...).
        None and primitives (str, bytes, numbers, bool) are ignored silently:
        no error, no change, no notification.
        """
        if new_state is None or isinstance(new_state, _PRIMITIVES):
            self._trace("replace_state ignored %s value", type(new_state).__name__)
            return

        with self._lock:
            self._state = new_state
            self._trace("replaced state")
            self._notify()

    def on_state_changed(self, callback: StateCallback) -> Optional[StateCallback]:
        """Subscribe to state changes.

        Returns:
            The callback (use it to unsubscribe), or None if it is not callable
            or already subscribed
        """
        if not callable(callback):
            return None
        added = self._subscribers.add(callback)
        if added is None:
            self._trace("duplicate state subscriber ignored")
        return added

    def unsubscribe(self, callback: StateCallback) -> None:
        """Unsubscribe by passing in the same callback. Unknown callbacks are ignored."""
        self._subscribers.remove(callback)

    def _notify(self) -> None:
        count = self._subscribers.notify(self._state)
        self._trace("notified %d state subscriber(s)", count)

    def _trace(self, msg: str, *args: Any) -> None:
        if self._options.trace:
            _get_logger().debug("[DataStore] " + msg, *args)
