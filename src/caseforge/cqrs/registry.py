"""Handler registry — the request-type to handler-factory table."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import HandlerRegistrationError
from .command import Command
from .handler import CommandHandler, PagedQueryHandler, QueryHandler
from .query import PagedQuery, Query
from .request import Request
from .response import PagedResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.notificator import INotificator
    from .handler import Handler

    HandlerFactory = Callable[[INotificator], Handler]

logger = logging.getLogger(__name__)

_MARKER_TYPES: frozenset[type[Any]] = frozenset({Request, Command, Query, PagedQuery})


def _generic_origin(request_type: type[Any]) -> type[Any] | None:
    metadata = getattr(request_type, "__pydantic_generic_metadata__", None) or {}
    return metadata.get("origin")


def request_key(request_type: type[Any]) -> type[Any]:
    """The class a request type is registered and looked up under.

    Parametrizing a generic request (``Lookup[int]``) makes pydantic build a
    new class whose generic origin is ``Lookup``. Both name the same request
    declaration, so they share one key. A subclass is its own declaration
    and keeps its own key.
    """
    origin = _generic_origin(request_type)
    while origin is not None:
        request_type = origin
        origin = _generic_origin(request_type)
    return request_type


def is_marker_type(request_type: type[Any]) -> bool:
    """True for the abstract request bases and their parametrized forms.

    ``Command`` or ``Query[OrderDTO]`` only describe a result shape; handlers
    are registered against the concrete subclasses built on them.
    """
    return request_key(request_type) in _MARKER_TYPES


def expected_handler_kind(request_type: type[Any]) -> type[Handler]:
    """Handler base a request type's handler must derive from.

    A request whose ``response_shape`` is paged needs a ``PagedQueryHandler``.
    Otherwise commands go to a ``CommandHandler`` and everything else to a
    ``QueryHandler``.
    """
    if issubclass(request_type.response_shape, PagedResponse):
        return PagedQueryHandler
    if issubclass(request_type, Command):
        return CommandHandler
    return QueryHandler


def _factory_class(factory: Any) -> type[Any] | None:
    """The handler class behind *factory*, when it can be told without calling it."""
    if inspect.isclass(factory):
        return factory
    if isinstance(factory, functools.partial) and inspect.isclass(factory.func):
        return factory.func
    return None


def _factory_name(factory: Any) -> str:
    cls = _factory_class(factory)
    if cls is not None:
        return cls.__name__
    return getattr(factory, "__qualname__", repr(factory))


class HandlerRegistry:
    """Maps each concrete request type to the one factory that builds its handler.

    A factory is any callable taking the dispatch's notificator and
    returning a handler. A handler class qualifies on its own; bind other
    constructor arguments with :func:`functools.partial` or a lambda::

        registry.register(GetOrder, partial(GetOrderHandler, orders=repo))

    Lookup is by **exact** type: registering ``CreateOrder`` says nothing
    about a subclass of it, which needs its own registration. The one
    normalisation is :func:`request_key`: ``Lookup[int]`` and ``Lookup`` are
    the same request declaration and share a handler.

    Populate the registry at startup. Every misconfiguration raises
    :class:`HandlerRegistrationError` immediately:

    * ``request_type`` is not a concrete request class;
    * another factory is already registered for it;
    * the factory is a handler class of the wrong kind for the request's
      response shape (e.g. a ``QueryHandler`` for a ``PagedQuery``).
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], HandlerFactory] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(self, request_type: type[Any], factory: HandlerFactory) -> None:
        if not (inspect.isclass(request_type) and issubclass(request_type, Request)):
            msg = f"{request_type!r} is not a Command, Query or PagedQuery subclass"
            raise HandlerRegistrationError(msg)
        if is_marker_type(request_type):
            msg = (
                f"Cannot register a handler for the base type {request_type.__name__}; "
                "register the concrete request class instead"
            )
            raise HandlerRegistrationError(msg)

        handler_cls = _factory_class(factory)
        expected = expected_handler_kind(request_type)
        if handler_cls is not None and not issubclass(handler_cls, expected):
            msg = (
                f"{handler_cls.__name__} cannot handle {request_type.__name__}: "
                f"expected a {expected.__name__} subclass"
            )
            raise HandlerRegistrationError(msg)

        key = request_key(request_type)
        existing = self._handlers.get(key)
        if existing is not None and existing is not factory:
            msg = (
                f"Duplicate handler for {key.__name__}: "
                f"{_factory_name(existing)} already registered, "
                f"cannot register {_factory_name(factory)}"
            )
            raise HandlerRegistrationError(msg)
        self._handlers[key] = factory
        logger.debug(
            "Registered handler %s -> %s",
            key.__name__,
            _factory_name(factory),
        )

    def handles(self, request_type: type[Any]) -> Callable[[type[Any]], type[Any]]:
        """Decorator-style registration of a handler class.

        Usage::

            @registry.handles(GetOrder)
            class GetOrderHandler(QueryHandler[GetOrder, OrderDTO]): ...
        """

        def wrapper(handler_cls: type[Any]) -> type[Any]:
            self.register(request_type, handler_cls)
            return handler_cls

        return wrapper

    # ── Lookup ───────────────────────────────────────────────────

    def get_handler_factory(self, request_type: type[Any]) -> HandlerFactory | None:
        return self._handlers.get(request_key(request_type))

    def __contains__(self, request_type: object) -> bool:
        if not inspect.isclass(request_type):
            return False
        return request_key(request_type) in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    # ── Introspection ────────────────────────────────────────────

    def get_registered_handlers(self) -> dict[str, str]:
        """Return a snapshot of all registered handlers (for debugging)."""
        return {k.__name__: _factory_name(v) for k, v in self._handlers.items()}

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Clear all registered handlers (testing utility)."""
        self._handlers.clear()


__all__ = [
    "HandlerRegistry",
    "expected_handler_kind",
    "is_marker_type",
    "request_key",
]
