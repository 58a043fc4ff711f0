"""LoggingMiddleware — logs request dispatch details."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from ..cqrs.request import Request
    from ..cqrs.response import Response
    from ..ports.middleware import NextHandler

logger = logging.getLogger("caseforge.middleware")


class LoggingMiddleware(IMiddleware):
    """Logs request handling — name, duration, outcome.

    Failure envelopes are logged at WARNING with their code and number of
    notifications. Exceptions are logged and re-raised untouched.
    """

    async def __call__(
        self,
        message: Request[Any],
        next_handler: NextHandler,
    ) -> Response[Any]:
        """Log the request handling."""
        msg_name = type(message).__name__
        command_id = getattr(message, "command_id", None)
        if command_id is not None:
            logger.info("Handling %s (command_id=%s)", msg_name, command_id)
        else:
            logger.info("Handling %s", msg_name)
        start = time.perf_counter()
        try:
            result = await next_handler(message)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("%s failed after %.2fms", msg_name, elapsed)
            raise

        elapsed = (time.perf_counter() - start) * 1000
        if result.is_success:
            logger.info("%s completed in %.2fms", msg_name, elapsed)
        else:
            logger.warning(
                "%s returned failure (code=%s, notifications=%d) in %.2fms",
                msg_name,
                result.code,
                len(result.notifications),
                elapsed,
            )
        return result
