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
"""Structured (JSON) form of the paging value types.

Only the authoritative fields are read: ``Number``/``Size`` for a locator,
the three item numbers for a span, and ``CurrentPage``/``TotalItems`` for a
paging state. Derived fields in a payload are ignored and recomputed, so an
inconsistent payload never fails a read. Missing required fields, values of
the wrong type, a page size outside ``0..255`` and malformed JSON raise
:class:`~pagekit.kernel.exceptions.ValidationException`.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar, overload

import structlog
from pydantic import BaseModel, ConfigDict, Field

from pagekit.kernel.exceptions import ValidationException
from pagekit.paging.locator import MAX_PAGE_SIZE, UNBOUNDED_PAGE_SIZE, PageLocator
from pagekit.paging.resources import PagingResources
from pagekit.paging.span import ItemSpan
from pagekit.paging.state import PagingState
from pagekit.validation.helpers import validate_model, validate_model_json

logger = structlog.get_logger("pagekit.paging.serialization")

V = TypeVar("V", PageLocator, ItemSpan, PagingState)

# =============================================================================
# Wire models
# =============================================================================


class PageLocatorModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    number: int = Field(alias="Number")
    size: int = Field(alias="Size", ge=UNBOUNDED_PAGE_SIZE, le=MAX_PAGE_SIZE)

    def to_value(self) -> PageLocator:
        return PageLocator(number=self.number, size=self.size)


class ItemSpanModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    page_number: int = Field(alias="PageNumber")
    first_item_number: int = Field(alias="FirstItemNumber")
    last_item_number: int = Field(alias="LastItemNumber")

    def to_value(self) -> ItemSpan:
        return ItemSpan(self.page_number, self.first_item_number, self.last_item_number)


class PagingStateModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    current_page: PageLocatorModel = Field(alias="CurrentPage")
    total_items: int = Field(alias="TotalItems")
    # Only the presence of AllPages matters; the spans are recomputed.
    all_pages: Any = Field(default=None, alias="AllPages")

    def to_value(self) -> PagingState:
        return PagingState(
            self.current_page.to_value(),
            self.total_items,
            include_all_pages="all_pages" in self.model_fields_set,
        )


_MODELS: dict[type, type[PageLocatorModel] | type[ItemSpanModel] | type[PagingStateModel]] = {
    PageLocator: PageLocatorModel,
    ItemSpan: ItemSpanModel,
    PagingState: PagingStateModel,
}

# =============================================================================
# Reading
# =============================================================================


def parse_page_locator(data: Any) -> PageLocator:
    """Read a PageLocator from its structured form."""
    return _parse(PageLocator, data)


def parse_item_span(data: Any) -> ItemSpan:
    """Read an ItemSpan from its structured form."""
    return _parse(ItemSpan, data)


def parse_paging_state(data: Any) -> PagingState:
    """Read a PagingState from its structured form."""
    return _parse(PagingState, data)


def loads(kind: type[V], text: str | bytes) -> V:
    """Read a value of type *kind* from a JSON document."""
    model = _model_for(kind)
    try:
        parsed = validate_model_json(model, text)
    except ValidationException as exc:
        logger.warning("payload_rejected", kind=kind.__name__, error=str(exc))
        raise
    return parsed.to_value()  # type: ignore[return-value]


def _parse(kind: type[V], data: Any) -> V:
    model = _model_for(kind)
    try:
        parsed = validate_model(model, data)
    except ValidationException as exc:
        logger.warning("payload_rejected", kind=kind.__name__, error=str(exc))
        raise
    return parsed.to_value()  # type: ignore[return-value]


def _model_for(kind: type) -> type[PageLocatorModel] | type[ItemSpanModel] | type[PagingStateModel]:
    try:
        return _MODELS[kind]
    except KeyError:
        raise TypeError(f"{kind.__name__} has no structured form") from None


# =============================================================================
# Writing
# =============================================================================


@overload
def to_dict(value: PagingState, include_all_pages: bool | None = None) -> dict[str, Any]: ...
@overload
def to_dict(value: PageLocator | ItemSpan | PagingResources) -> dict[str, Any]: ...


def to_dict(value: Any, include_all_pages: bool | None = None) -> dict[str, Any]:
    """Structured form of any paging value."""
    if isinstance(value, PagingState):
        return value.to_dict(include_all_pages=include_all_pages)
    if isinstance(value, (PageLocator, ItemSpan, PagingResources)):
        return value.to_dict()
    raise TypeError(f"{type(value).__name__} has no structured form")


def dumps(
    value: PageLocator | ItemSpan | PagingState | PagingResources,
    indent: int | None = None,
    include_all_pages: bool | None = None,
) -> str:
    """JSON document for any paging value."""
    return json.dumps(to_dict(value, include_all_pages=include_all_pages), indent=indent)
