"""IMediator — single generic dispatch entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..cqrs.request import Request
    from ..primitives.cancellation import CancellationToken


class IMediator(Protocol):
    """
    Interface for dispatching requests to the one handler registered for them.
    """

    async def dispatch(
        self,
        request: Request[Any],
        cancellation: CancellationToken | None = None,
    ) -> Any: ...
