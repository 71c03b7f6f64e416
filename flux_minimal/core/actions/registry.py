# flux_minimal/core/actions/registry.py
"""Named actions: register what they do, call them, subscribe to their results.

Usage:
    actions = Actions({"load_user": None})

    # Attach work (possibly async) to an action. The handler must call done()
    # to publish; whatever it passes to done() reaches the subscribers.
    def load_user(done, user_id):
        threading.Thread(target=lambda: done(fetch_user(user_id))).start()

    actions.register("load_user", load_user)

    actions.on("load_user", lambda user: print(user))
    actions.call("load_user", 42)

An action without a handler publishes immediately (with no data) when called.

Threading:
- Subscriber lists are snapshotted before each publish, so done() may be
  called from any thread and a subscriber added during a publish only sees
  the next one
- Subscriber exceptions propagate to whoever triggered the publish (the caller
  of call(), or the thread that invoked done())
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, Optional

from flux_minimal.common.options import DEFAULT_OPTIONS, FluxOptions, make_lock
from flux_minimal.core.actions.record import ActionRecord, DoneCallback, Handler
from flux_minimal.core.errors import AlreadyRegisteredError, InvalidArgumentError, NotFoundError

ActionCallback = Callable[[Any], Any]


def _get_logger() -> logging.Logger:
    """Get module logger (lazy to avoid side effect at import time)."""
    return logging.getLogger(__name__)


class Actions:
    """Registry of a fixed set of named actions.

    Example:
        >>> actions = Actions({"save": None})
        >>> received = []
        >>> _ = actions.on("save", received.append)
        >>> actions.register("save", lambda done, data: done({"saved": data}))
        >>> actions.call("save", 1)
        >>> received
        [{'saved': 1}]
    """

    def __init__(
        self,
        actions: Optional[Mapping[str, Any] | Iterable[str]] = None,
        *,
        options: Optional[FluxOptions] = None,
    ) -> None:
        """Declare the supported actions.

        Args:
            actions: Mapping whose keys are the action names (values are ignored),
                     or an iterable of names. None declares nothing.
            options: Locking/tracing options (defaults to FluxOptions())

        Raises:
            InvalidArgumentError: actions is a bare string, or a name is not a str
        """
        if isinstance(actions, (str, bytes)):
            raise InvalidArgumentError(
                "Actions: pass a mapping or an iterable of names, not a single string",
                context={"actions": actions},
            )
        self._options = options or DEFAULT_OPTIONS
        self._lock = make_lock(self._options)
        records: dict[str, ActionRecord] = {}
        for name in actions or ():
            if not isinstance(name, str):
                raise InvalidArgumentError(
                    "Actions: action names must be strings", context={"name": repr(name)}
                )
            records[name] = ActionRecord.create(name, self._options)
        # Read-only view: records can't be replaced or added after construction
        self._actions = MappingProxyType(records)

    @property
    def actions(self) -> Mapping[str, ActionRecord]:
        return self._actions

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._actions)

    def __contains__(self, name: object) -> bool:
        return self._lookup(name) is not None

    def is_registered(self, name: str) -> bool:
        record = self._lookup(name)
        return record is not None and record.has_handler

    def register(self, name: str, handler: Handler) -> None:
        """Register a function to an action.

        Needed when the action does work before publishing (API calls, timers).
        The handler is called as ``handler(done, args)`` and must call
        ``done(result)`` to publish.

        Raises:
            InvalidArgumentError: name is not a str or handler is not callable
            NotFoundError: the action was not declared in the constructor
            AlreadyRegisteredError: a handler is already bound to the action
        """
        if not isinstance(name, str):
            raise InvalidArgumentError(
                "Actions.register: name argument must be a string", context={"name": repr(name)}
            )
        if not callable(handler):
            raise InvalidArgumentError(
                "Actions.register: handler argument must be callable", context={"name": name}
            )
        record = self._require(name, "register")

        with self._lock:
            if record.has_handler:
                raise AlreadyRegisteredError(
                    f"Actions.register: action {name!r} already registered",
                    context={"name": name, "handler": repr(record.handler)},
                )
            record.bind(handler)
        self._trace("registered handler for %r", name)

    def call(self, name: str, args: Any = None) -> None:
        """Call an action. Undeclared names are ignored.

        With a handler, the handler receives a done callback and ``args``.
        Without one, subscribers are notified immediately with no data.
        """
        record = self._lookup(name)
        if record is None:
            self._trace("call ignored for undeclared action %r", name)
            return

        handler = record.handler
        if handler is not None:
            self._trace("calling handler for %r", name)
            handler(self.build_done_function(name), args)
        else:
            self.publish(name)

    def build_done_function(self, name: str) -> DoneCallback:
        """Factory for the completion callback passed to an action's handler."""

        def done(data: Any = None) -> None:
            self.publish(name, data)

        return done

    def publish(self, name: str, data: Any = None) -> None:
        """Call all subscribers of an action with ``data``. Undeclared names are ignored."""
        record = self._lookup(name)
        if record is None:
            return
        count = record.subscribers.notify(data)
        self._trace("published %r to %d subscriber(s)", name, count)

    def on(self, name: str, callback: ActionCallback) -> Optional[ActionCallback]:
        """Subscribe to an action's completion.

        Returns:
            The callback (use it to unsubscribe), or None if it was already subscribed

        Raises:
            InvalidArgumentError: name is not a str or callback is not callable
            NotFoundError: the action was not declared in the constructor
        """
        if not isinstance(name, str):
            raise InvalidArgumentError("Actions.on: name argument must be a string", context={"name": repr(name)})
        if not callable(callback):
            raise InvalidArgumentError("Actions.on: callback argument must be callable", context={"name": name})
        record = self._require(name, "on")

        added = record.subscribers.add(callback)
        if added is None:
            self._trace("duplicate subscriber ignored for %r", name)
        return added

    def unsubscribe(self, name: str, callback: ActionCallback) -> None:
        """Remove a callback from an action. Unknown actions and callbacks are ignored."""
        record = self._lookup(name)
        if record is not None:
            record.subscribers.remove(callback)

    def _lookup(self, name: object) -> Optional[ActionRecord]:
        if not isinstance(name, str):
            return None
        return self._actions.get(name)

    def _require(self, name: str, operation: str) -> ActionRecord:
        record = self._lookup(name)
        if record is None:
            raise NotFoundError(
                f"Actions.{operation}: action {name!r} not declared, add it to the constructor",
                context={"name": name, "declared": list(self._actions)},
            )
        return record

    def _trace(self, msg: str, *args: Any) -> None:
        if self._options.trace:
            _get_logger().debug("[Actions] " + msg, *args)
