"""Notifications: the failure record and its request-scoped collector."""

from __future__ import annotations

from .notification import Notification
from .notificator import Notificator

__all__ = ["Notification", "Notificator"]
