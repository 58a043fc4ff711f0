"""PydanticValidator — leverages Pydantic model validation."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult


class PydanticValidator:
    """Validates requests using Pydantic model validation.

    Requests are frozen models, so their field constraints normally hold
    already. This re-validates the request data through its model class,
    which catches instances built with ``model_construct`` and model
    validators that depend on external state, and converts every pydantic
    error into one failure with a dotted field path.
    """

    async def validate(self, request: Any) -> ValidationResult:
        if not hasattr(request, "model_validate"):
            return ValidationResult.success()

        try:
            type(request).model_validate(request.model_dump())
            return ValidationResult.success()
        except PydanticValidationError as exc:
            result = ValidationResult()
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ()))
                result.add_error(loc, error.get("msg", "validation error"))
            return result
