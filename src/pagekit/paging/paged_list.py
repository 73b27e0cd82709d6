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
"""PagedList: one page of items together with its paging state."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar, overload

from pagekit.kernel.exceptions import ValidationException
from pagekit.paging.locator import PageLocator
from pagekit.paging.state import PagingState

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """The items of one page plus the paging facts that locate it.

    The number of items must equal ``paging.item_count``.

    Attributes:
        items: The items on this page.
        paging: Paging state of the page within the whole collection.
    """

    items: tuple[T, ...]
    paging: PagingState

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        if len(self.items) != self.paging.item_count:
            raise ValidationException(
                f"The number of items in the given collection ({len(self.items)}) does not match "
                f"the expected number of items for the current page ({self.paging.item_count}).",
                code="ITEM_COUNT_MISMATCH",
                context={"item_count": len(self.items), "expected": self.paging.item_count},
            )

    @staticmethod
    def of(items: Iterable[T], locator: PageLocator, total_items: int) -> PagedList[T]:
        """Wrap a fetched page; an invalid locator means the unbounded single page."""
        page = locator if locator.has_value else PageLocator.UNBOUNDED
        return PagedList(items=tuple(items), paging=PagingState(page, total_items))

    @staticmethod
    def from_collection(collection: Sequence[T], locator: PageLocator) -> PagedList[T]:
        """Cut the page described by *locator* out of a complete in-memory collection."""
        page = locator if locator.has_value else PageLocator.UNBOUNDED
        paging = PagingState(page, len(collection))
        items = collection[paging.first_item_index : paging.last_item_number] if paging.item_count else ()
        return PagedList(items=tuple(items), paging=paging)

    def map(self, func: Callable[[T], U]) -> PagedList[U]:
        """Transform items using a mapping function, preserving paging metadata."""
        return PagedList(items=tuple(func(item) for item in self.items), paging=self.paging)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self.items[index]
