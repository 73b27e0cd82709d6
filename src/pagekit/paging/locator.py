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
"""PageLocator: "page N of size S" within a paged collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from pagekit.paging.state import PagingState

FIRST_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
UNBOUNDED_PAGE_SIZE = 0
MAX_PAGE_SIZE = 255


@dataclass(frozen=True, order=True)
class PageLocator:
    """The one-based ordinal number of a page and the number of items per page.

    A size of zero means the page is *unbounded*: a single page holds the
    whole collection. Construction never raises; a locator with a number
    below one or a size outside ``0..255`` is kept as given and reports
    ``has_value == False``.

    Attributes:
        number: One-based page ordinal (``0`` for the Empty locator).
        size: Items per page, ``0`` for unbounded.
    """

    number: int = 0
    size: int = 0

    DEFAULT: ClassVar[PageLocator]
    UNBOUNDED: ClassVar[PageLocator]
    EMPTY: ClassVar[PageLocator]

    @staticmethod
    def of(number: int, size: int = DEFAULT_PAGE_SIZE) -> PageLocator:
        """Create a locator for the given page number and size."""
        return PageLocator(number=number, size=size)

    @staticmethod
    def unbounded(number: int = FIRST_PAGE_NUMBER) -> PageLocator:
        """Create an unbounded locator (size fixed at zero)."""
        return PageLocator(number=number, size=UNBOUNDED_PAGE_SIZE)

    @property
    def has_value(self) -> bool:
        """Whether the number and size describe a real page."""
        return self.number >= FIRST_PAGE_NUMBER and UNBOUNDED_PAGE_SIZE <= self.size <= MAX_PAGE_SIZE

    @property
    def index(self) -> int:
        """Zero-based page index, or -1 when the locator is invalid."""
        return self.number - 1 if self.has_value else -1

    @property
    def is_unbounded(self) -> bool:
        """Whether this is the single page holding every item."""
        return self.size == UNBOUNDED_PAGE_SIZE and self.number >= FIRST_PAGE_NUMBER

    def on_page(self, number: int) -> PageLocator:
        """Same page size, different page number. No clamping is applied."""
        return PageLocator(number=number, size=self.size)

    def items_per_page(self, size: int) -> PageLocator:
        """Same page number, different page size."""
        return PageLocator(number=self.number, size=size)

    def with_total_items(self, total_items: int, include_all_pages: bool = False) -> PagingState:
        """Combine this locator with a total item count."""
        from pagekit.paging.state import PagingState

        return PagingState(self, total_items, include_all_pages=include_all_pages)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the structured form, derived fields included."""
        return {
            "Number": self.number,
            "Size": self.size,
            "Index": self.index,
            "IsUnbounded": self.is_unbounded,
        }

    def __str__(self) -> str:
        return f"Page[Number={self.number},Size={self.size}]"


PageLocator.DEFAULT = PageLocator(FIRST_PAGE_NUMBER, DEFAULT_PAGE_SIZE)
PageLocator.UNBOUNDED = PageLocator(FIRST_PAGE_NUMBER, UNBOUNDED_PAGE_SIZE)
PageLocator.EMPTY = PageLocator()
