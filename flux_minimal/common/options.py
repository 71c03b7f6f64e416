# flux_minimal/common/options.py
"""Typed, frozen options for DataStore and Actions.

Options are plain frozen dataclasses so one instance can be shared between
stores, registries and threads.
"""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FluxOptions:
    """Behaviour switches shared by DataStore and Actions.

    Thread-safety: Immutable (frozen=True)

    Attributes:
        thread_safe: Guard subscriber lists and the state tree with an RLock.
                     Disable only when every call comes from a single thread.
        trace: Emit DEBUG log records for registrations, calls and notifications.
    """

    thread_safe: bool = True
    trace: bool = False


DEFAULT_OPTIONS = FluxOptions()


def make_lock(options: FluxOptions) -> AbstractContextManager[Any]:
    """Return a re-entrant lock, or a no-op context manager when thread safety is off."""
    if options.thread_safe:
        return threading.RLock()
    return nullcontext()
