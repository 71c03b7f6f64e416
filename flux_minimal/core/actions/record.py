# flux_minimal/core/actions/record.py
"""Per-action bookkeeping for Actions."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from flux_minimal.common.options import DEFAULT_OPTIONS, FluxOptions
from flux_minimal.core.subscribers import SubscriberList

DoneCallback = Callable[..., None]
Handler = Callable[[DoneCallback, Any], Any]


@dataclass(eq=False)
class ActionRecord:
    """One declared action: its completion subscribers and optional handler.

    Attributes:
        name: The action's name
        subscribers: Callbacks notified when the action completes
        handler: Function bound by Actions.register, or None

    Note:
        The handler is set at most once. Actions.register checks ``has_handler``
        before calling ``bind`` and the record itself is never swapped out.
    """

    name: str
    subscribers: SubscriberList = field(default_factory=SubscriberList)
    handler: Optional[Handler] = None

    @classmethod
    def create(cls, name: str, options: FluxOptions = DEFAULT_OPTIONS) -> "ActionRecord":
        return cls(name=name, subscribers=SubscriberList(options))

    @property
    def has_handler(self) -> bool:
        return self.handler is not None

    def bind(self, handler: Handler) -> None:
        self.handler = handler
