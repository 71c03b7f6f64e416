# flux_minimal/__init__.py
"""Minimal observable state and observable actions.

Public API:
    - DataStore: subscribable state tree (merge with set_state, swap with replace_state)
    - Actions: named actions with optional handlers and completion subscribers
    - FluxOptions: locking/tracing options shared by both
    - FluxError, InvalidArgumentError, NotFoundError, AlreadyRegisteredError

Example:
    >>> from flux_minimal import Actions, DataStore
    >>>
    >>> store = DataStore({"todos": []})
    >>> actions = Actions({"add_todo": None})
    >>>
    >>> def add_todo(done, text):
    ...     store.set_state({"todos": store.state["todos"] + [text]})
    ...     done(text)
    >>>
    >>> actions.register("add_todo", add_todo)
    >>> actions.call("add_todo", "write docs")
    >>> store.state
    {'todos': ['write docs']}
"""
from flux_minimal.common.options import FluxOptions
from flux_minimal.core.actions import ActionRecord, Actions
from flux_minimal.core.errors import (
    AlreadyRegisteredError,
    FluxError,
    InvalidArgumentError,
    NotFoundError,
)
from flux_minimal.core.state import DataStore

__version__ = "1.0.0"

__all__ = [
    "Actions",
    "ActionRecord",
    "DataStore",
    "FluxOptions",
    "FluxError",
    "InvalidArgumentError",
    "NotFoundError",
    "AlreadyRegisteredError",
]
