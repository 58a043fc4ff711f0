"""Cooperative cancellation token passed from dispatch into every awaited call."""

from __future__ import annotations

import asyncio

from .exceptions import OperationCancelledError


class CancellationToken:
    """Signal that an in-flight dispatch should stop.

    Backed by an :class:`asyncio.Event`. The caller owns the token and calls
    :meth:`cancel`; handlers check it between awaited collaborator calls and
    pass it on unchanged::

        async def execute(self, request, cancellation):
            order = await self._orders.get(request.order_id, cancellation)
            cancellation.raise_if_cancelled()
            ...

    A handler observing cancellation fails the operation by raising
    :class:`OperationCancelledError` instead of returning a partial success.
    """

    __slots__ = ("_event", "_reason")

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: str | None = None

    @classmethod
    def none(cls) -> CancellationToken:
        """Return a fresh token nobody will cancel."""
        return cls()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation. Repeated calls keep the first reason."""
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            msg = "Operation was cancelled"
            if self._reason:
                msg += f": {self._reason}"
            raise OperationCancelledError(msg)

    async def wait(self) -> None:
        """Block until the token is cancelled."""
        await self._event.wait()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled})"
