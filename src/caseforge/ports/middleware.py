"""IMiddleware — hook around a single handler invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..cqrs.request import Request
    from ..cqrs.response import Response

NextHandler: TypeAlias = "Callable[[Request[Any]], Awaitable[Response[Any]]]"


@runtime_checkable
class IMiddleware(Protocol):
    """Sees every request on its way to the handler and the envelope coming back.

    ``next_handler`` runs the rest of the chain and finally the handler.
    Middleware may log, time or veto by raising, but the envelope it
    returns is the one ``next_handler`` produced. A ``PagedResponse``
    stays a ``PagedResponse``.
    """

    async def __call__(
        self, message: Request[Any], next_handler: NextHandler
    ) -> Response[Any]: ...
