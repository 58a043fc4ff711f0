"""ValidationResult — ordered, field-level validation failures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class ValidationFailure(NamedTuple):
    """One rule violation reported by a validator."""

    field_path: str
    message: str


def default_failures_factory() -> list[ValidationFailure]:
    """Factory for mutable default list in ValidationResult dataclass fields."""
    return []


@dataclass
class ValidationResult:
    """Collects field-level validation failures in the order they were found.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"name": ["is required"]})
        result = ValidationResult.failure([("customer_id", "cannot be empty")])
    """

    failures: list[ValidationFailure] = field(default_factory=default_failures_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.failures) == 0

    @property
    def errors(self) -> dict[str, list[str]]:
        """Failures grouped by field path, keeping first-seen field order."""
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field_path, []).append(failure.message)
        return grouped

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(
        cls,
        errors: Mapping[str, Iterable[str]] | Iterable[tuple[str, str]],
    ) -> ValidationResult:
        """Build a result from ``{field: [messages]}`` or ``(field, message)`` pairs."""
        result = cls()
        if isinstance(errors, Mapping):
            for field_path, messages in errors.items():
                for message in messages:
                    result.add_error(field_path, message)
        else:
            for field_path, message in errors:
                result.add_error(field_path, message)
        return result

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result with *other*'s failures appended to ours."""
        return ValidationResult(failures=[*self.failures, *other.failures])

    def add_error(self, field_path: str, message: str) -> None:
        """Add a single failure for *field_path*."""
        self.failures.append(ValidationFailure(field_path, message))

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self.failures)

    def __bool__(self) -> bool:
        return self.is_valid
