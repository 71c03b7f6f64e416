# flux_minimal/core/subscribers.py
"""Ordered, de-duplicated callback list.

Both DataStore and every action record keep their subscribers in a
SubscriberList. It owns the bookkeeping only; callers decide when to notify.

Semantics:
- Insertion order is notification order
- A callback already present is not added again (compared with ``==``, which
  is identity for functions and "same object, same method" for bound methods)
- ``snapshot()`` copies the list under the lock, so callbacks added or removed
  while a notification is running only affect the next notification
- Callback exceptions are not caught: the first failure aborts the loop
"""

from collections.abc import Callable, Iterator
from typing import Any, Optional

from flux_minimal.common.options import DEFAULT_OPTIONS, FluxOptions, make_lock

Callback = Callable[..., Any]


class SubscriberList:
    """Thread-safe ordered set of callbacks."""

    def __init__(self, options: FluxOptions = DEFAULT_OPTIONS) -> None:
        self._callbacks: list[Callback] = []
        self._lock = make_lock(options)

    def add(self, callback: Callback) -> Optional[Callback]:
        """Append ``callback`` unless it is already subscribed.

        Returns:
            The callback if it was added, otherwise None
        """
        with self._lock:
            if callback in self._callbacks:
                return None
            self._callbacks.append(callback)
            return callback

    def remove(self, callback: Callback) -> bool:
        """Remove the first matching callback.

        Returns:
            True if a callback was removed, False if it was not subscribed
        """
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                return False
            return True

    def snapshot(self) -> tuple[Callback, ...]:
        with self._lock:
            return tuple(self._callbacks)

    def notify(self, *args: Any) -> int:
        """Call every subscriber in order with ``args``.

        Returns:
            Number of callbacks invoked
        """
        callbacks = self.snapshot()
        for callback in callbacks:
            callback(*args)
        return len(callbacks)

    def clear(self) -> None:
        """Drop all subscribers (primarily for testing)."""
        with self._lock:
            self._callbacks.clear()

    def __contains__(self, callback: object) -> bool:
        with self._lock:
            return callback in self._callbacks

    def __len__(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def __iter__(self) -> Iterator[Callback]:
        return iter(self.snapshot())
