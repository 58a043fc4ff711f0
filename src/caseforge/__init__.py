"""caseforge — in-process mediator for application use cases.

Commands and queries are dispatched to exactly one handler, validated
before any business logic runs, and answered with a uniform
``Response`` / ``PagedResponse`` carrying structured notifications.
"""

from __future__ import annotations

# ── CQRS ─────────────────────────────────────────────────────────
from .cqrs import (
    Command,
    CommandHandler,
    EmptyPagePolicy,
    Handler,
    HandlerRegistry,
    Mediator,
    PagedQuery,
    PagedQueryHandler,
    PagedResponse,
    Query,
    QueryHandler,
    Request,
    Response,
)

# ── Middleware ───────────────────────────────────────────────────
from .middleware import LoggingMiddleware, build_pipeline

# ── Notifications ────────────────────────────────────────────────
from .notifications import Notification, Notificator

# ── Ports ────────────────────────────────────────────────────────
from .ports import IMediator, IMiddleware, INotificator, IValidator

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    CancellationToken,
    CaseForgeError,
    HandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    OperationCancelledError,
    ResponseInvariantError,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    CompositeValidator,
    PydanticValidator,
    ValidationFailure,
    ValidationResult,
)

__all__: list[str] = [
    # CQRS
    "Command",
    "CommandHandler",
    "EmptyPagePolicy",
    "Handler",
    "HandlerRegistry",
    "Mediator",
    "PagedQuery",
    "PagedQueryHandler",
    "PagedResponse",
    "Query",
    "QueryHandler",
    "Request",
    "Response",
    # Notifications
    "Notification",
    "Notificator",
    # Ports
    "IMediator",
    "IMiddleware",
    "INotificator",
    "IValidator",
    # Middleware
    "LoggingMiddleware",
    "build_pipeline",
    # Validation
    "CompositeValidator",
    "PydanticValidator",
    "ValidationFailure",
    "ValidationResult",
    # Primitives
    "CancellationToken",
    "CaseForgeError",
    "HandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "OperationCancelledError",
    "ResponseInvariantError",
]
