"""Command base class — immutable intent to change state."""

from __future__ import annotations

from typing import Generic
from uuid import UUID, uuid4

from pydantic import Field

from .request import Request, TResult


class Command(Request[TResult], Generic[TResult]):
    """
    Base for all commands.

    Commands represent write operations that change system state. They:
    - Are named with imperative verbs (e.g., CreateOrder, CancelOrder)
    - Are answered with a ``Response[TResult]``
    - Carry a ``command_id`` generated once, when the command is built

    The id is a regular model field, so reading it twice returns the same
    value and ``model_copy`` keeps it.

    Usage::

        class CreateOrder(Command[UUID]):
            customer_id: UUID
            items: list[OrderItem]
    """

    command_id: UUID = Field(default_factory=uuid4)
