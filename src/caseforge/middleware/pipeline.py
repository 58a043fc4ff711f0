"""build_pipeline — wrap a handler invocation in dispatch middleware."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..cqrs.request import Request
    from ..cqrs.response import Response
    from ..ports.middleware import IMiddleware, NextHandler


def _link(next_handler: NextHandler, middleware: IMiddleware) -> NextHandler:
    async def step(request: Request[Any]) -> Response[Any]:
        return await middleware(request, next_handler)

    step.__qualname__ = f"{type(middleware).__name__}.step"
    return step


def build_pipeline(
    middlewares: Sequence[IMiddleware], handler_fn: NextHandler
) -> NextHandler:
    """Chain *middlewares* around *handler_fn*; the first one is outermost.

    Each request passes the middlewares in list order before reaching
    *handler_fn*, and the envelope travels back in reverse. With no
    middlewares the handler call is returned as is.
    """
    return functools.reduce(_link, reversed(middlewares), handler_fn)
