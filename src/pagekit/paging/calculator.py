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
"""Stateless paging arithmetic.

Total-page counts, the clamped "turn to page" rule, and generation of the
item spans of every page. Python integers do not overflow, so the division
in :func:`total_pages` is exact for any collection size.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, overload

import structlog

from pagekit.kernel.exceptions import OutOfRangeException
from pagekit.paging.locator import FIRST_PAGE_NUMBER, PageLocator
from pagekit.paging.span import ItemSpan

if TYPE_CHECKING:
    from pagekit.paging.state import PagingState

logger = structlog.get_logger("pagekit.paging.calculator")


def total_pages(page_size: int, total_items: int) -> int:
    """Number of pages needed to hold *total_items* at *page_size* per page.

    Raises:
        OutOfRangeException: If *page_size* is not positive or *total_items*
            is negative.
    """
    if page_size <= 0:
        raise OutOfRangeException(
            "page_size",
            page_size,
            "There must be at least one item per page or there could be division by zero!",
        )
    if total_items < 0:
        raise OutOfRangeException(
            "total_items",
            total_items,
            "The number of items in the list must not be negative!",
        )
    return (total_items + page_size - 1) // page_size


def turn_to_page(state: PagingState, requested_number: int) -> PageLocator:
    """Locator for *requested_number* using the page size of *state*.

    The number is clamped into ``[1, state.total_pages]``. An unbounded state
    always returns its own locator and an invalid state returns Empty.
    """
    if not state.has_value:
        return PageLocator.EMPTY

    current = state.current_page
    if current.is_unbounded:
        return current

    last_number = state.total_pages
    number = min(max(requested_number, FIRST_PAGE_NUMBER), last_number)
    if number != requested_number:
        logger.debug(
            "page_clamped",
            requested=requested_number,
            clamped=number,
            total_pages=last_number,
        )
    return PageLocator(number=number, size=current.size)


def all_pages_and_item_numbers(locator: PageLocator, total_items: int) -> ItemSpanSequence:
    """Item spans of every page in a collection of *total_items*."""
    return ItemSpanSequence(locator, total_items)


class ItemSpanSequence(Sequence[ItemSpan]):
    """Lazy, restartable sequence of one ItemSpan per page.

    Spans are computed on access, so iterating twice yields the same values
    without holding the whole list in memory.
    """

    __slots__ = ("_size", "_total_items", "_count")

    def __init__(self, locator: PageLocator, total_items: int) -> None:
        self._total_items = total_items
        if not locator.has_value or total_items < 0:
            self._size = 0
            self._count = 0
        elif locator.is_unbounded or total_items == 0:
            # One page: every item, or none.
            self._size = 0
            self._count = 1
        else:
            self._size = locator.size
            self._count = total_pages(locator.size, total_items)

    def __len__(self) -> int:
        return self._count

    @overload
    def __getitem__(self, index: int) -> ItemSpan: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[ItemSpan]: ...

    def __getitem__(self, index: int | slice) -> ItemSpan | Sequence[ItemSpan]:
        if isinstance(index, slice):
            return [self._span(i) for i in range(*index.indices(self._count))]
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("page index out of range")
        return self._span(index)

    def __iter__(self) -> Iterator[ItemSpan]:
        for i in range(self._count):
            yield self._span(i)

    def _span(self, index: int) -> ItemSpan:
        if self._size == 0:
            return ItemSpan.for_page(PageLocator.UNBOUNDED, self._total_items)
        number = index + FIRST_PAGE_NUMBER
        last_item_number = min(number * self._size, self._total_items)
        first_item_number = (number - 1) * self._size + 1
        return ItemSpan(number, first_item_number, last_item_number)

    def __repr__(self) -> str:
        return f"ItemSpanSequence(pages={self._count}, total_items={self._total_items})"
