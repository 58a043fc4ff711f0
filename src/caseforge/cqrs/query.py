"""Query base classes — immutable requests for data."""

from __future__ import annotations

from typing import Any, ClassVar, Generic

from pydantic import Field

from .request import Request, TResult
from .response import PagedResponse, Response

DEFAULT_PAGE_SIZE = 10


class Query(Request[TResult], Generic[TResult]):
    """Base class for all Queries.

    Queries are read-only and **must** be immutable. Their handlers answer
    with a ``Response[TResult]``.
    """


class PagedQuery(Request[TResult], Generic[TResult]):
    """Query for one page of a larger result set.

    ``page_number`` is 1-based. Both values are validated at construction:
    ``page_number < 1`` or ``page_size < 1`` raises a pydantic
    ``ValidationError`` instead of being silently adjusted.

    Handlers answer with a ``PagedResponse[TResult]``.
    """

    response_shape: ClassVar[type[Response[Any]]] = PagedResponse

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return (self.page_number - 1) * self.page_size
