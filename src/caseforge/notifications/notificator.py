"""Notificator — per-dispatch collector of notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ports.notificator import INotificator

if TYPE_CHECKING:
    from .notification import Notification


class Notificator(INotificator):
    """Collects the notifications raised while handling ONE request.

    The Mediator builds a new instance for every dispatch and hands it to
    the handler factory, so a collector never outlives its request and is
    never shared between concurrent dispatches.
    """

    __slots__ = ("_notifications",)

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    def handle_notification(self, notification: Notification) -> None:
        self._notifications.append(notification)

    def get_notifications(self) -> list[Notification]:
        """Return a copy, in insertion order."""
        return list(self._notifications)

    def has_notification(self) -> bool:
        return len(self._notifications) > 0

    def __len__(self) -> int:
        return len(self._notifications)

    def __repr__(self) -> str:
        return f"Notificator(notifications={len(self._notifications)})"
