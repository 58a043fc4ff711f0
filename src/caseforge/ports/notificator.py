"""INotificator — request-scoped notification collector protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..notifications.notification import Notification


@runtime_checkable
class INotificator(Protocol):
    """Protocol for the collector a handler records its failures into.

    One instance exists per dispatched request.
    """

    def handle_notification(self, notification: Notification) -> None: ...

    def get_notifications(self) -> list[Notification]: ...

    def has_notification(self) -> bool: ...
