"""Request base class — the marker every command and query derives from."""

from __future__ import annotations

from typing import Any, ClassVar, Generic

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeVar

from .response import Response

TResult = TypeVar("TResult", default=None)


class Request(BaseModel, Generic[TResult]):
    """Base for everything the Mediator can dispatch.

    Requests are immutable once built. ``response_shape`` names the envelope
    the request's handler returns: :class:`Response` for commands and
    queries, :class:`PagedResponse` for paged queries.

    Do not subclass ``Request`` directly: use
    :class:`~caseforge.cqrs.command.Command`,
    :class:`~caseforge.cqrs.query.Query` or
    :class:`~caseforge.cqrs.query.PagedQuery`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    response_shape: ClassVar[type[Response[Any]]] = Response
