"""
flux-minimal exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for argument, lookup and registration errors.
"""

from typing import Any, Dict, Optional


class FluxError(Exception):
    """Base exception for flux-minimal errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class InvalidArgumentError(FluxError, TypeError):
    """Wrong argument type (non-str name, non-callable callback, non-mapping patch)."""

    pass


class NotFoundError(FluxError, KeyError):
    """An action name that was never declared in the constructor."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message
        return self.args[0] if self.args else ""


class AlreadyRegisteredError(FluxError):
    """A handler is already bound to the action."""

    pass
