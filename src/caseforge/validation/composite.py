"""CompositeValidator — one validator built from several."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.validation import IValidator
    from .result import ValidationFailure


class CompositeValidator:
    """Runs validators in registration order and concatenates their failures.

    The failures keep the order in which they were reported, validator by
    validator, so the handler turns them into notifications in that same
    order. With ``stop_on_failure=True`` the validators after the first one
    that reports anything are skipped, which suits cheap shape checks placed
    in front of checks that hit a repository.

    Usage::

        validator = CompositeValidator(
            [PydanticValidator(), CustomerExistsValidator(customers)],
            stop_on_failure=True,
        )
    """

    def __init__(
        self,
        validators: Iterable[IValidator] = (),
        *,
        stop_on_failure: bool = False,
    ) -> None:
        self._validators: list[IValidator] = list(validators)
        self.stop_on_failure = stop_on_failure

    def add(self, validator: IValidator) -> None:
        self._validators.append(validator)

    def __len__(self) -> int:
        return len(self._validators)

    async def validate(self, request: Any) -> ValidationResult:
        failures: list[ValidationFailure] = []
        for validator in self._validators:
            reported = (await validator.validate(request)).failures
            failures.extend(reported)
            if reported and self.stop_on_failure:
                break
        return ValidationResult(failures=failures)
