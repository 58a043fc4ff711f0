"""Primitives: exceptions, cancellation."""

from __future__ import annotations

from .cancellation import CancellationToken
from .exceptions import (
    CaseForgeError,
    HandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    OperationCancelledError,
    ResponseInvariantError,
)

__all__ = [
    "CancellationToken",
    "CaseForgeError",
    "HandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "OperationCancelledError",
    "ResponseInvariantError",
]
