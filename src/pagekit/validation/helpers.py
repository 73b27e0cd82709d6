# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Pydantic integration helpers for validation."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from pagekit.kernel.exceptions import ValidationException
from pagekit.kernel.types import FieldError

T = TypeVar("T", bound=BaseModel)


def validate_model(model: type[T], data: Any) -> T:
    """Validate data against a Pydantic model.

    Raises:
        ValidationException: If validation fails, with structured error details.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise _to_validation_exception(exc) from exc


def validate_model_json(model: type[T], text: str | bytes) -> T:
    """Parse and validate a JSON document against a Pydantic model.

    Malformed JSON is reported the same way as a schema violation.

    Raises:
        ValidationException: If parsing or validation fails.
    """
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        raise _to_validation_exception(exc) from exc


def field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten a pydantic ValidationError into FieldError values."""
    return [
        FieldError(
            field=".".join(str(loc) for loc in e["loc"]) or "<root>",
            message=e["msg"],
            rejected_value=e.get("input"),
        )
        for e in exc.errors()
    ]


def _to_validation_exception(exc: ValidationError) -> ValidationException:
    fields = field_errors(exc)
    detail = "; ".join(f"{fe.field}: {fe.message}" for fe in fields)
    return ValidationException(
        f"Validation failed: {detail}",
        code="VALIDATION_ERROR",
        context={"errors": exc.errors(), "field_errors": fields},
    )
