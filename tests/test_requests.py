from uuid import UUID

import pytest
from pydantic import ValidationError

from caseforge.cqrs.command import Command
from caseforge.cqrs.query import PagedQuery, Query
from caseforge.cqrs.request import Request
from caseforge.cqrs.response import PagedResponse, Response

# --- Test Models ---


class CreateOrder(Command[UUID]):
    customer_id: UUID


class GetOrder(Query[dict]):
    order_id: UUID


class ListOrders(PagedQuery[list]):
    customer_id: UUID | None = None


CUSTOMER = UUID("9f1c0a52-3b8e-4b7e-9d57-1a2b3c4d5e6f")


# --- Tests ---


def test_command_id_is_assigned_once() -> None:
    cmd = CreateOrder(customer_id=CUSTOMER)

    assert isinstance(cmd.command_id, UUID)
    assert cmd.command_id == cmd.command_id


def test_command_ids_are_unique() -> None:
    ids = {CreateOrder(customer_id=CUSTOMER).command_id for _ in range(50)}

    assert len(ids) == 50


def test_command_id_survives_copy() -> None:
    cmd = CreateOrder(customer_id=CUSTOMER)

    assert cmd.model_copy().command_id == cmd.command_id


def test_requests_are_immutable() -> None:
    cmd = CreateOrder(customer_id=CUSTOMER)
    qry = GetOrder(order_id=CUSTOMER)

    with pytest.raises(ValidationError):
        cmd.customer_id = UUID(int=0)  # type: ignore[misc]
    with pytest.raises(ValidationError):
        qry.order_id = UUID(int=0)  # type: ignore[misc]


def test_query_has_no_identity() -> None:
    assert "command_id" not in GetOrder.model_fields


def test_paged_query_defaults() -> None:
    qry = ListOrders()

    assert qry.page_number == 1
    assert qry.page_size == 10
    assert qry.offset == 0


def test_paged_query_offset() -> None:
    assert ListOrders(page_number=3, page_size=20).offset == 40


@pytest.mark.parametrize(
    "kwargs",
    [{"page_number": 0}, {"page_number": -1}, {"page_size": 0}, {"page_size": -10}],
)
def test_paged_query_rejects_bad_paging(kwargs) -> None:
    with pytest.raises(ValidationError):
        ListOrders(**kwargs)


def test_response_shapes() -> None:
    assert CreateOrder.response_shape is Response
    assert GetOrder.response_shape is Response
    assert ListOrders.response_shape is PagedResponse


def test_all_variants_are_requests() -> None:
    assert issubclass(CreateOrder, Request)
    assert issubclass(GetOrder, Request)
    assert issubclass(ListOrders, Request)
    assert not issubclass(ListOrders, Query)
