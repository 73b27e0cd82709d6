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
"""PagingState: a page locator combined with a total item count."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Any, ClassVar

from pagekit.paging import calculator
from pagekit.paging.locator import FIRST_PAGE_NUMBER, PageLocator
from pagekit.paging.span import ItemSpan

if TYPE_CHECKING:
    from pagekit.paging.resources import PagingResources


@dataclass(frozen=True)
class PagingState:
    """Every derived fact about one page of a paged collection.

    Only ``current_page`` and ``total_items`` are stored. When both are valid
    the current page is normalized on construction: an unbounded page becomes
    :attr:`PageLocator.UNBOUNDED`, an empty collection resets to page one, and
    a page past the end moves to the last page. Invalid inputs are kept
    verbatim and reported through :attr:`has_value`; every derived accessor
    then returns an Empty-shaped value instead of raising.

    Equality and hashing consider ``current_page`` and ``total_items`` only.

    Attributes:
        current_page: The page this state describes.
        total_items: Number of items in the whole collection.
        include_all_pages: Whether :attr:`all_pages` (and the ``AllPages``
            field of the structured form) is populated.
    """

    current_page: PageLocator = PageLocator.EMPTY
    total_items: int = 0
    include_all_pages: bool = field(default=False, compare=False, repr=False)

    EMPTY: ClassVar[PagingState]

    def __post_init__(self) -> None:
        if not self.has_value:
            return
        page = self.current_page
        if page.is_unbounded:
            page = PageLocator.UNBOUNDED
        elif self.total_items == 0:
            page = PageLocator(FIRST_PAGE_NUMBER, page.size)
        else:
            last_number = calculator.total_pages(page.size, self.total_items)
            if page.number > last_number:
                page = PageLocator(last_number, page.size)
        object.__setattr__(self, "current_page", page)

    @staticmethod
    def from_values(
        number: int, size: int, total_items: int, include_all_pages: bool = False
    ) -> PagingState:
        """Create a state from a raw page number, page size and total."""
        return PagingState(PageLocator(number, size), total_items, include_all_pages=include_all_pages)

    # -- validity and page counts -------------------------------------------

    @property
    def has_value(self) -> bool:
        return self.current_page.has_value and self.total_items >= 0

    @property
    def total_pages(self) -> int:
        """Number of pages; an empty collection still has one (empty) page."""
        if not self.has_value:
            return 0
        if self.current_page.is_unbounded or self.total_items == 0:
            return 1
        return calculator.total_pages(self.current_page.size, self.total_items)

    @property
    def is_first_page(self) -> bool:
        return self.has_value and self.current_page.number == FIRST_PAGE_NUMBER

    @property
    def is_last_page(self) -> bool:
        return self.has_value and self.current_page.number == self.total_pages

    # -- navigation ---------------------------------------------------------

    @property
    def first_page(self) -> PageLocator:
        if not self.has_value:
            return PageLocator.EMPTY
        if self.is_first_page:
            return self.current_page
        return PageLocator(FIRST_PAGE_NUMBER, self.current_page.size)

    @property
    def last_page(self) -> PageLocator:
        if not self.has_value:
            return PageLocator.EMPTY
        if self.is_last_page:
            return self.current_page
        return PageLocator(self.total_pages, self.current_page.size)

    @property
    def previous_page(self) -> PageLocator:
        if not self.has_value or self.is_first_page:
            return PageLocator.EMPTY
        return PageLocator(self.current_page.number - 1, self.current_page.size)

    @property
    def next_page(self) -> PageLocator:
        if not self.has_value or self.is_last_page:
            return PageLocator.EMPTY
        return PageLocator(self.current_page.number + 1, self.current_page.size)

    # -- item numbers -------------------------------------------------------

    @property
    def current_span(self) -> ItemSpan:
        """Item numbers covered by the current page."""
        if not self.has_value:
            return ItemSpan.EMPTY
        page = self.current_page
        if page.is_unbounded or self.total_items == 0:
            return ItemSpan.for_page(PageLocator.UNBOUNDED, self.total_items)
        last_item_number = min(page.number * page.size, self.total_items)
        return ItemSpan(page.number, (page.number - 1) * page.size + 1, last_item_number)

    @property
    def first_item_number(self) -> int:
        return self.current_span.first_item_number

    @property
    def last_item_number(self) -> int:
        return self.current_span.last_item_number

    @property
    def first_item_index(self) -> int:
        return self.first_item_number - 1

    @property
    def last_item_index(self) -> int:
        return self.last_item_number - 1

    @property
    def item_count(self) -> int:
        """Number of items on the current page."""
        return self.current_span.item_count

    # -- all pages ----------------------------------------------------------

    @cached_property
    def _all_pages(self) -> tuple[ItemSpan, ...]:
        return tuple(calculator.all_pages_and_item_numbers(self.current_page, self.total_items))

    def calculate_all_pages_and_item_numbers(self) -> tuple[ItemSpan, ...]:
        """Item spans of every page, computed once per instance."""
        return self._all_pages

    @property
    def all_pages(self) -> tuple[ItemSpan, ...] | None:
        """Item spans of every page, or ``None`` unless requested on construction."""
        if not self.include_all_pages:
            return None
        return self._all_pages

    # -- derived states -----------------------------------------------------

    def turn_to_page(self, number: int) -> PageLocator:
        """Locator for another page of the same size, clamped to this collection."""
        return calculator.turn_to_page(self, number)

    def turn_to(self, number: int, total_items: int | None = None) -> PagingState:
        """State for another page, optionally with a fresh total item count.

        The number is clamped the same way as :meth:`turn_to_page`; against a
        new total the constructor applies the upper bound.
        """
        if not self.has_value:
            return PagingState.EMPTY
        if total_items is None:
            return PagingState(
                calculator.turn_to_page(self, number),
                self.total_items,
                include_all_pages=self.include_all_pages,
            )
        page = self.current_page
        if not page.is_unbounded:
            page = page.on_page(max(number, FIRST_PAGE_NUMBER))
        return PagingState(page, total_items, include_all_pages=self.include_all_pages)

    def with_total_items(self, total_items: int) -> PagingState:
        """Same requested page against a different total item count."""
        return PagingState(self.current_page, total_items, include_all_pages=self.include_all_pages)

    def with_items_per_page(self, size: int, total_items: int | None = None) -> PagingState:
        """Same page number with a different page size."""
        return PagingState(
            self.current_page.items_per_page(size),
            self.total_items if total_items is None else total_items,
            include_all_pages=self.include_all_pages,
        )

    def calculate_paging_resources(self) -> PagingResources:
        """Navigation locators for the current page."""
        from pagekit.paging.resources import PagingResources

        return PagingResources.from_state(self)

    # -- rendering ----------------------------------------------------------

    def to_dict(self, include_all_pages: bool | None = None) -> dict[str, Any]:
        """Serialize to the structured form.

        ``AllPages`` is written when *include_all_pages* is true, or when it is
        ``None`` and the state was built with ``include_all_pages``.
        """
        result: dict[str, Any] = {
            "CurrentPage": self.current_page.to_dict(),
            "TotalItems": self.total_items,
            "TotalPages": self.total_pages,
            "IsFirstPage": self.is_first_page,
            "IsLastPage": self.is_last_page,
            "FirstItemNumber": self.first_item_number,
            "LastItemNumber": self.last_item_number,
            "FirstItemIndex": self.first_item_index,
            "LastItemIndex": self.last_item_index,
            "ItemCount": self.item_count,
            "NextPage": self.next_page.to_dict(),
            "PreviousPage": self.previous_page.to_dict(),
            "FirstPage": self.first_page.to_dict(),
            "LastPage": self.last_page.to_dict(),
        }
        if include_all_pages is None:
            include_all_pages = self.include_all_pages
        if include_all_pages:
            result["AllPages"] = [span.to_dict() for span in self.calculate_all_pages_and_item_numbers()]
        return result

    def __str__(self) -> str:
        return f"PagingInfo[{self.current_page},TotalItems={self.total_items}]"


PagingState.EMPTY = PagingState()

PagingInfo = PagingState


def with_total_items(locator: PageLocator, total_items: int, include_all_pages: bool = False) -> PagingState:
    """Combine *locator* with a total item count; equivalent to the constructor."""
    return PagingState(locator, total_items, include_all_pages=include_all_pages)
