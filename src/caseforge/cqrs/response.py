"""Response envelopes returned by every handler.

A handler never raises for an expected failure. It returns a failure
envelope whose notifications explain what went wrong and whose ``code``
callers map onto their own transport (e.g. an HTTP status).

Invariants, checked on construction:

* ``is_success`` implies ``data is not None`` and no notifications;
* a failure carries at least one notification and no data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..notifications.notification import Notification
from ..primitives.exceptions import ResponseInvariantError

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")

SUCCESS_CODE = 200
FAILURE_CODE = 400


def default_notifications_factory() -> tuple[Notification, ...]:
    return ()


@dataclass(frozen=True)
class Response(Generic[T]):
    """Uniform success/failure result of a command or query.

    Build instances through :meth:`success` and :meth:`failure`::

        return Response.success(order_dto)
        return Response.failure(self.get_notifications(), code=404)
    """

    is_success: bool
    data: T | None = None
    notifications: tuple[Notification, ...] = field(
        default_factory=default_notifications_factory
    )
    code: int = SUCCESS_CODE

    def __post_init__(self) -> None:
        # Callers may hand in any iterable (usually a list from a Notificator).
        object.__setattr__(self, "notifications", tuple(self.notifications))
        if self.is_success:
            if self.data is None:
                raise ResponseInvariantError("A successful response must carry data")
            if self.notifications:
                raise ResponseInvariantError(
                    "A successful response cannot carry notifications"
                )
        else:
            if not self.notifications:
                raise ResponseInvariantError(
                    "A failed response needs at least one notification"
                )
            if self.data is not None:
                raise ResponseInvariantError("A failed response cannot carry data")

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, data: T, *, code: int = SUCCESS_CODE) -> Response[T]:
        return cls(is_success=True, data=data, code=code)

    @classmethod
    def failure(
        cls, notifications: Iterable[Notification], *, code: int = FAILURE_CODE
    ) -> Response[T]:
        return cls(is_success=False, notifications=tuple(notifications), code=code)

    # ── Introspection ────────────────────────────────────────────

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_success": self.is_success,
            "data": self.data,
            "notifications": [n.to_dict() for n in self.notifications],
            "code": self.code,
        }


@dataclass(frozen=True)
class PagedResponse(Response[T]):
    """Response for one page of a larger result set.

    ``PagedResponse.success`` rejects ``page_number < 1``, ``page_size < 1``
    and a negative ``total_count`` with :class:`ResponseInvariantError`.
    Values are never clamped.
    """

    total_count: int = 0
    page_number: int = 1
    page_size: int = 1

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.page_number < 1:
            raise ResponseInvariantError(
                f"page_number must be >= 1, got {self.page_number}"
            )
        if self.page_size < 1:
            raise ResponseInvariantError(f"page_size must be >= 1, got {self.page_size}")
        if self.total_count < 0:
            raise ResponseInvariantError(
                f"total_count must be >= 0, got {self.total_count}"
            )

    @property
    def total_pages(self) -> int:
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(  # type: ignore[override]
        cls,
        data: T,
        total_count: int,
        page_number: int,
        page_size: int,
        *,
        code: int = SUCCESS_CODE,
    ) -> PagedResponse[T]:
        return cls(
            is_success=True,
            data=data,
            code=code,
            total_count=total_count,
            page_number=page_number,
            page_size=page_size,
        )

    @classmethod
    def failure(
        cls,
        notifications: Iterable[Notification],
        *,
        code: int = FAILURE_CODE,
        page_number: int = 1,
        page_size: int = 1,
    ) -> PagedResponse[T]:
        return cls(
            is_success=False,
            notifications=tuple(notifications),
            code=code,
            page_number=page_number,
            page_size=page_size,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            total_count=self.total_count,
            page_number=self.page_number,
            page_size=self.page_size,
            total_pages=self.total_pages,
        )
        return payload
