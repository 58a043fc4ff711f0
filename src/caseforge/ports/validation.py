"""IValidator — request-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for request validators.

    Validators are composable via
    :class:`~caseforge.validation.composite.CompositeValidator` and are
    consumed by :meth:`~caseforge.cqrs.handler.Handler.execute_validation`.
    """

    async def validate(self, request: Any) -> ValidationResult:
        """Validate *request* and return a
        :class:`~caseforge.validation.result.ValidationResult`.

        Must return :meth:`ValidationResult.success()` or
        :meth:`ValidationResult.failure(errors)`, with failures in the order
        they were detected.
        """
        ...
