"""CQRS primitives: requests, responses, handlers, registry, mediator."""

from __future__ import annotations

from .command import Command
from .handler import (
    CommandHandler,
    EmptyPagePolicy,
    Handler,
    PagedQueryHandler,
    QueryHandler,
)
from .mediator import Mediator
from .query import PagedQuery, Query
from .registry import HandlerRegistry
from .request import Request
from .response import PagedResponse, Response

__all__ = [
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
]
