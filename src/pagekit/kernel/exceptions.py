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
"""Unified exception hierarchy for pagekit.

All pagekit exceptions inherit from PagekitException, so callers can catch
one base type or target specific subclasses.

Categories:
- ValidationException: structured input (JSON payloads, dicts) that cannot be read
- OutOfRangeException: arithmetic preconditions violated by a direct calculator call
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class PagekitException(Exception):
    """Base exception for all pagekit errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "VALIDATION_ERROR").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(PagekitException):
    """Paging rule violations."""


class ValidationException(BusinessException):
    """Input validation failures."""


class OutOfRangeException(BusinessException):
    """An argument lies outside the range a paging calculation accepts.

    These are programmer errors, never transient conditions.
    """

    def __init__(self, parameter: str, value: Any, message: str) -> None:
        super().__init__(
            message,
            code="OUT_OF_RANGE",
            context={"parameter": parameter, "value": value},
        )
        self.parameter = parameter
        self.value = value
