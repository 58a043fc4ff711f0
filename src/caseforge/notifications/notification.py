"""Notification — one structured failure record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A ``(field_path, message)`` pair.

    ``field_path`` is empty for failures that are not tied to a request
    field, e.g. a business rule violated during execution.
    """

    field_path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field_path": self.field_path, "message": self.message}

    def __str__(self) -> str:
        if self.field_path:
            return f"{self.field_path}: {self.message}"
        return self.message
