"""Exceptions for caseforge.

Expected failures (validation, not found, business rules) never raise: they
travel as notifications on a failure response. The exceptions below signal
configuration mistakes, broken envelope contracts and cancellation.
"""

from __future__ import annotations

from typing import Any


class CaseForgeError(Exception):
    """Root exception for the entire caseforge package."""


class HandlerError(CaseForgeError):
    """Base class for all handler related errors (registration, lookup)."""


class HandlerRegistrationError(HandlerError):
    """Raised when a handler registration conflict is detected.

    Usage: HandlerRegistry raises this when trying to register a second
    handler for a request type, or a handler whose kind does not match the
    response shape the request expects.
    """


class HandlerNotFoundError(HandlerError):
    """Raised when no handler is registered for a request's concrete type."""

    def __init__(self, request_type: type[Any]) -> None:
        self.request_type = request_type
        super().__init__(f"No handler registered for {request_type.__name__}")


class ResponseInvariantError(CaseForgeError, ValueError):
    """Raised when a Response/PagedResponse would break its success contract."""


class OperationCancelledError(CaseForgeError):
    """Raised when a cancellation token is observed as cancelled."""
