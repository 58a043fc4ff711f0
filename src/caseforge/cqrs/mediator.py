"""Mediator — central dispatch point with a per-dispatch notificator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ..middleware.pipeline import build_pipeline
from ..notifications.notificator import Notificator
from ..ports.mediator import IMediator
from ..primitives.cancellation import CancellationToken
from ..primitives.exceptions import HandlerNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.middleware import IMiddleware
    from ..ports.notificator import INotificator
    from .command import Command
    from .query import PagedQuery, Query
    from .registry import HandlerRegistry
    from .request import Request
    from .response import PagedResponse, Response

logger = logging.getLogger(__name__)

TResult = TypeVar("TResult")


class Mediator(IMediator):
    """Routes each request to the one handler registered for its exact type.

    The Mediator resolves and invokes, nothing else: it does not validate
    and never looks at notifications. Whatever the handler returns (or
    raises) reaches the caller unchanged.

    **Notificator scope:** every dispatch gets a brand-new notificator
    from ``notificator_factory``, handed to the handler factory. Concurrent
    dispatches therefore never share a collector.

    Parameters
    ----------
    registry:
        :class:`~caseforge.cqrs.registry.HandlerRegistry` populated at startup.
    middlewares:
        Optional list of :class:`~caseforge.ports.middleware.IMiddleware`
        wrapped around handler invocation, first = outermost.
    notificator_factory:
        Zero-argument callable producing the per-dispatch collector.
        Defaults to :class:`~caseforge.notifications.notificator.Notificator`.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        *,
        middlewares: list[IMiddleware] | None = None,
        notificator_factory: Callable[[], INotificator] | None = None,
    ) -> None:
        self._registry = registry
        self._middlewares: list[IMiddleware] = list(middlewares or [])
        self._notificator_factory: Callable[[], INotificator] = (
            notificator_factory or Notificator
        )

    # ── Public API ───────────────────────────────────────────────

    @overload
    async def dispatch(
        self,
        request: PagedQuery[TResult],
        cancellation: CancellationToken | None = None,
    ) -> PagedResponse[TResult]: ...

    @overload
    async def dispatch(
        self,
        request: Command[TResult] | Query[TResult],
        cancellation: CancellationToken | None = None,
    ) -> Response[TResult]: ...

    async def dispatch(
        self,
        request: Request[Any],
        cancellation: CancellationToken | None = None,
    ) -> Any:
        """Dispatch *request* to its handler and return the handler's envelope.

        Raises :class:`~caseforge.primitives.exceptions.HandlerNotFoundError`
        when nothing is registered for ``type(request)``.
        """
        request_type = type(request)
        factory = self._registry.get_handler_factory(request_type)
        if factory is None:
            logger.error("No handler registered for %s", request_type.__name__)
            raise HandlerNotFoundError(request_type)

        token = cancellation if cancellation is not None else CancellationToken.none()
        handler = factory(self._notificator_factory())
        logger.debug(
            "Dispatching %s to %s", request_type.__name__, type(handler).__name__
        )

        async def _innermost(message: Request[Any]) -> Response[Any]:
            return await handler.execute(message, token)

        return await build_pipeline(self._middlewares, _innermost)(request)
