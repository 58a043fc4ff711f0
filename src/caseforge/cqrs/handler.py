"""Handler base classes.

Every handler receives the notificator created for the current dispatch in
its constructor and records failures into it. The Mediator builds a new
handler and a new notificator per dispatch, so notifications never outlive
the request that produced them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..notifications.notification import Notification
from .command import Command
from .query import PagedQuery, Query
from .response import FAILURE_CODE, PagedResponse, Response

if TYPE_CHECKING:
    from ..ports.notificator import INotificator
    from ..ports.validation import IValidator
    from ..primitives.cancellation import CancellationToken

TCommand = TypeVar("TCommand", bound=Command[Any])
TQuery = TypeVar("TQuery", bound=Query[Any])
TPagedQuery = TypeVar("TPagedQuery", bound=PagedQuery[Any])
TResult = TypeVar("TResult")


class Handler(ABC):
    """Validation-and-notification workflow shared by all handler kinds.

    Concrete handlers follow a fixed protocol inside ``execute``:

    1. ``if not await self.execute_validation(validator, request)``:
       return ``self.failure()`` without touching any collaborator
       (``self.failure(request=request)`` in a paged handler).
    2. Run the business logic.
    3. On a domain failure, ``self.notify(...)`` and return
       ``self.failure(code=...)``.
    4. On success, return ``Response.success(data)`` directly.
    """

    def __init__(self, notificator: INotificator) -> None:
        self._notificator = notificator

    @property
    def notificator(self) -> INotificator:
        return self._notificator

    async def execute_validation(self, validator: IValidator, request: Any) -> bool:
        """Validate *request*, recording one notification per failure.

        Returns ``False`` when the validator reported anything. Business
        logic must not run in that case.
        """
        result = await validator.validate(request)
        valid = True
        for field_path, message in result:
            self._notificator.handle_notification(Notification(field_path, message))
            valid = False
        return valid

    def notify(self, message: str, field_path: str = "") -> None:
        """Record a business-rule failure found during execution."""
        self._notificator.handle_notification(Notification(field_path, message))

    def get_notifications(self) -> list[Notification]:
        return self._notificator.get_notifications()

    def has_notification(self) -> bool:
        return self._notificator.has_notification()

    @abstractmethod
    async def execute(
        self, request: Any, cancellation: CancellationToken
    ) -> Response[Any]:
        """Handle *request* and return its Response or PagedResponse."""
        ...

    def failure(self, code: int = FAILURE_CODE) -> Response[Any]:
        """Failure envelope built from everything recorded so far."""
        return Response.failure(self.get_notifications(), code=code)


class CommandHandler(Handler, Generic[TCommand, TResult]):
    """Base class for command handlers.

    Usage::

        class CreateOrderHandler(CommandHandler[CreateOrder, UUID]):
            def __init__(self, notificator, orders, validator) -> None:
                super().__init__(notificator)
                ...

            async def execute(
                self, request: CreateOrder, cancellation: CancellationToken
            ) -> Response[UUID]:
                ...
    """

    @abstractmethod
    async def execute(
        self, request: TCommand, cancellation: CancellationToken
    ) -> Response[TResult]:
        """Execute the command and return a Response."""
        ...


class QueryHandler(Handler, Generic[TQuery, TResult]):
    """Base class for query handlers.

    Usage::

        class GetOrderHandler(QueryHandler[GetOrder, OrderDTO]):
            async def execute(
                self, request: GetOrder, cancellation: CancellationToken
            ) -> Response[OrderDTO]:
                ...
    """

    @abstractmethod
    async def execute(
        self, request: TQuery, cancellation: CancellationToken
    ) -> Response[TResult]:
        """Execute the query and return a Response."""
        ...


class EmptyPagePolicy(str, Enum):
    """How :meth:`PagedQueryHandler.build_page` treats zero matching rows."""

    SUCCESS = "success"
    FAILURE = "failure"


class PagedQueryHandler(Handler, Generic[TPagedQuery, TResult]):
    """Base class for paged query handlers.

    ``build_page`` turns a repository page into the envelope and applies
    the empty-result policy. The defaults below can be overridden on a
    subclass or per instance through the constructor keywords.
    """

    empty_page_policy: EmptyPagePolicy = EmptyPagePolicy.FAILURE
    empty_page_message: str = "No results found."
    empty_page_code: int = 404

    def __init__(
        self,
        notificator: INotificator,
        *,
        empty_page_policy: EmptyPagePolicy | None = None,
        empty_page_message: str | None = None,
        empty_page_code: int | None = None,
    ) -> None:
        super().__init__(notificator)
        if empty_page_policy is not None:
            self.empty_page_policy = empty_page_policy
        if empty_page_message is not None:
            self.empty_page_message = empty_page_message
        if empty_page_code is not None:
            self.empty_page_code = empty_page_code

    @abstractmethod
    async def execute(
        self, request: TPagedQuery, cancellation: CancellationToken
    ) -> PagedResponse[TResult]:
        """Execute the query and return a PagedResponse."""
        ...

    def failure(  # type: ignore[override]
        self, code: int = FAILURE_CODE, *, request: PagedQuery[Any]
    ) -> PagedResponse[Any]:
        """Paged failure envelope echoing *request*'s page number and size."""
        return PagedResponse.failure(
            self.get_notifications(),
            code=code,
            page_number=request.page_number,
            page_size=request.page_size,
        )

    def build_page(
        self, data: TResult, total_count: int, request: PagedQuery[Any]
    ) -> PagedResponse[TResult]:
        """Wrap one page of results, honouring ``empty_page_policy``.

        Only a query matching nothing at all (``total_count == 0``) counts
        as empty. A page past the end of a non-empty set is a success.
        """
        if total_count == 0 and self.empty_page_policy is EmptyPagePolicy.FAILURE:
            self.notify(self.empty_page_message)
            return self.failure(code=self.empty_page_code, request=request)
        return PagedResponse.success(
            data,
            total_count=total_count,
            page_number=request.page_number,
            page_size=request.page_size,
        )
