from unittest.mock import AsyncMock

import pytest

from caseforge.cqrs.command import Command
from caseforge.cqrs.handler import (
    CommandHandler,
    EmptyPagePolicy,
    PagedQueryHandler,
)
from caseforge.cqrs.query import PagedQuery
from caseforge.cqrs.response import PagedResponse, Response
from caseforge.notifications import Notification, Notificator
from caseforge.ports.validation import IValidator
from caseforge.primitives.cancellation import CancellationToken
from caseforge.validation.result import ValidationResult

# --- Test Models ---


class Rename(Command[str]):
    name: str


class ListThings(PagedQuery[list]):
    pass


class RenameHandler(CommandHandler[Rename, str]):
    async def execute(
        self, request: Rename, cancellation: CancellationToken
    ) -> Response[str]:
        return Response.success(request.name)


class ListThingsHandler(PagedQueryHandler[ListThings, list]):
    def __init__(self, notificator, rows=None, **kwargs) -> None:
        super().__init__(notificator, **kwargs)
        self._rows = rows or []

    async def execute(
        self, request: ListThings, cancellation: CancellationToken
    ) -> PagedResponse[list]:
        page = self._rows[request.offset : request.offset + request.page_size]
        return self.build_page(page, len(self._rows), request)


def _validator(result: ValidationResult) -> AsyncMock:
    validator = AsyncMock(spec=IValidator)
    validator.validate.return_value = result
    return validator


# --- execute_validation ---


@pytest.mark.asyncio
async def test_execute_validation_passes() -> None:
    handler = RenameHandler(Notificator())
    request = Rename(name="ok")
    validator = _validator(ValidationResult.success())

    assert await handler.execute_validation(validator, request) is True
    assert not handler.has_notification()
    validator.validate.assert_awaited_once_with(request)


@pytest.mark.asyncio
async def test_execute_validation_records_every_failure_in_order() -> None:
    handler = RenameHandler(Notificator())
    validator = _validator(
        ValidationResult.failure(
            [("name", "is required"), ("name", "too short"), ("", "bad request")]
        )
    )

    assert await handler.execute_validation(validator, Rename(name="")) is False
    assert handler.get_notifications() == [
        Notification("name", "is required"),
        Notification("name", "too short"),
        Notification("", "bad request"),
    ]


@pytest.mark.asyncio
async def test_execute_validation_accepts_plain_pairs() -> None:
    handler = RenameHandler(Notificator())
    validator = AsyncMock()
    validator.validate.return_value = [("name", "is required")]

    assert await handler.execute_validation(validator, Rename(name="")) is False
    assert handler.get_notifications() == [Notification("name", "is required")]


@pytest.mark.asyncio
async def test_execute_validation_propagates_validator_errors() -> None:
    handler = RenameHandler(Notificator())
    validator = AsyncMock()
    validator.validate.side_effect = RuntimeError("rule engine down")

    with pytest.raises(RuntimeError, match="rule engine down"):
        await handler.execute_validation(validator, Rename(name="x"))
    assert not handler.has_notification()


# --- notify / failure ---


def test_notify_uses_empty_field_path() -> None:
    notificator = Notificator()
    handler = RenameHandler(notificator)

    handler.notify("Order not found.")

    assert handler.has_notification()
    assert notificator.get_notifications() == [Notification("", "Order not found.")]


def test_notify_with_field_path() -> None:
    handler = RenameHandler(Notificator())

    handler.notify("already taken", field_path="name")

    assert handler.get_notifications() == [Notification("name", "already taken")]


def test_failure_builds_response_from_notifications() -> None:
    handler = RenameHandler(Notificator())
    handler.notify("Order not found.")

    response = handler.failure(code=404)

    assert type(response) is Response
    assert not response.is_success
    assert response.code == 404
    assert response.messages == ["Order not found."]


def test_handler_exposes_its_notificator() -> None:
    notificator = Notificator()

    assert RenameHandler(notificator).notificator is notificator


# --- PagedQueryHandler ---


@pytest.mark.asyncio
async def test_build_page_success() -> None:
    handler = ListThingsHandler(Notificator(), rows=list(range(25)))

    response = await handler.execute(
        ListThings(page_number=3, page_size=10), CancellationToken.none()
    )

    assert response.is_success
    assert response.data == [20, 21, 22, 23, 24]
    assert response.total_count == 25
    assert response.total_pages == 3


@pytest.mark.asyncio
async def test_empty_page_fails_by_default() -> None:
    handler = ListThingsHandler(Notificator())

    response = await handler.execute(
        ListThings(page_size=5), CancellationToken.none()
    )

    assert isinstance(response, PagedResponse)
    assert not response.is_success
    assert response.code == 404
    assert response.messages == ["No results found."]
    assert response.page_size == 5


@pytest.mark.asyncio
async def test_empty_page_policy_success() -> None:
    handler = ListThingsHandler(
        Notificator(), empty_page_policy=EmptyPagePolicy.SUCCESS
    )

    response = await handler.execute(ListThings(), CancellationToken.none())

    assert response.is_success
    assert response.data == []
    assert response.total_count == 0
    assert response.total_pages == 0
    assert not handler.has_notification()


@pytest.mark.asyncio
async def test_empty_page_message_and_code_overrides() -> None:
    handler = ListThingsHandler(
        Notificator(), empty_page_message="No orders found", empty_page_code=400
    )

    response = await handler.execute(ListThings(), CancellationToken.none())

    assert response.code == 400
    assert response.messages == ["No orders found"]


@pytest.mark.asyncio
async def test_page_past_the_end_is_not_empty() -> None:
    handler = ListThingsHandler(Notificator(), rows=[1, 2, 3])

    response = await handler.execute(
        ListThings(page_number=5, page_size=10), CancellationToken.none()
    )

    assert response.is_success
    assert response.data == []
    assert response.total_count == 3


def test_policy_subclass_override() -> None:
    class LenientHandler(ListThingsHandler):
        empty_page_policy = EmptyPagePolicy.SUCCESS

    assert LenientHandler(Notificator()).empty_page_policy is EmptyPagePolicy.SUCCESS
    assert ListThingsHandler(Notificator()).empty_page_policy is EmptyPagePolicy.FAILURE


def test_paged_failure_echoes_request_paging() -> None:
    handler = ListThingsHandler(Notificator())
    handler.notify("page_size too large", field_path="page_size")

    response = handler.failure(request=ListThings(page_number=3, page_size=20))

    assert isinstance(response, PagedResponse)
    assert response.code == 400
    assert (response.page_number, response.page_size) == (3, 20)
    assert response.total_count == 0
    assert response.notifications == (Notification("page_size", "page_size too large"),)


def test_paged_failure_requires_the_request() -> None:
    handler = ListThingsHandler(Notificator())
    handler.notify("boom")

    with pytest.raises(TypeError):
        handler.failure(code=422)


@pytest.mark.asyncio
async def test_paged_validation_short_circuit_keeps_paging() -> None:
    class ValidatedListHandler(ListThingsHandler):
        def __init__(self, notificator, validator) -> None:
            super().__init__(notificator)
            self._validator = validator

        async def execute(self, request, cancellation) -> PagedResponse[list]:
            if not await self.execute_validation(self._validator, request):
                return self.failure(request=request)
            return await super().execute(request, cancellation)

    validator = _validator(ValidationResult.failure([("page_size", "too large")]))
    handler = ValidatedListHandler(Notificator(), validator)

    response = await handler.execute(
        ListThings(page_number=4, page_size=50), CancellationToken.none()
    )

    assert not response.is_success
    assert (response.page_number, response.page_size) == (4, 50)
