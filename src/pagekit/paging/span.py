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
"""ItemSpan: the inclusive item numbers covered by one page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pagekit.paging.locator import FIRST_PAGE_NUMBER, PageLocator


@dataclass(frozen=True, order=True)
class ItemSpan:
    """First and last one-based item numbers on a page.

    Spans sort by page number. The zero-item page ``(1, 0, 0)`` is a valid
    span; the Empty span ``(0, 0, 0)`` is not.
    """

    page_number: int = 0
    first_item_number: int = 0
    last_item_number: int = 0

    EMPTY: ClassVar[ItemSpan]

    @staticmethod
    def for_page(locator: PageLocator, last_item_number: int) -> ItemSpan:
        """Span of *locator* ending at *last_item_number*.

        The first item number is derived from the page size, so inconsistent
        inputs produce a span with ``has_value == False``.
        """
        if locator.is_unbounded:
            first_item_number = 1 if last_item_number > 0 else 0
        else:
            first_item_number = last_item_number - locator.size + 1
        return ItemSpan(locator.number, first_item_number, last_item_number)

    @property
    def has_value(self) -> bool:
        if self.page_number < FIRST_PAGE_NUMBER:
            return False
        if self.first_item_number == 0 and self.last_item_number == 0:
            return True
        return 1 <= self.first_item_number <= self.last_item_number

    @property
    def item_count(self) -> int:
        """Number of items on the page; zero for the empty or an invalid span."""
        if not self.has_value or self.last_item_number == 0:
            return 0
        return self.last_item_number - self.first_item_number + 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "PageNumber": self.page_number,
            "FirstItemNumber": self.first_item_number,
            "LastItemNumber": self.last_item_number,
        }

    def __str__(self) -> str:
        return (
            f"Page[Number={self.page_number},"
            f"FirstItemNumber={self.first_item_number},"
            f"LastItemNumber={self.last_item_number}]"
        )


ItemSpan.EMPTY = ItemSpan()
