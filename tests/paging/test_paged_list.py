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
"""Tests for PagedList."""

from __future__ import annotations

import pytest

from pagekit.kernel.exceptions import ValidationException
from pagekit.paging.locator import PageLocator
from pagekit.paging.paged_list import PagedList
from pagekit.paging.state import PagingState

ITEMS = [f"item-{n}" for n in range(1, 28)]


class TestPagedListConstruction:
    def test_of_wraps_fetched_page(self) -> None:
        page = PagedList.of(["a", "b", "c"], PageLocator(2, 3), 9)
        assert page.items == ("a", "b", "c")
        assert page.paging == PagingState(PageLocator(2, 3), 9)

    def test_item_count_mismatch_raises(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            PagedList.of(["a", "b"], PageLocator(1, 10), 27)
        assert exc_info.value.code == "ITEM_COUNT_MISMATCH"
        assert exc_info.value.context == {"item_count": 2, "expected": 10}

    def test_invalid_locator_means_single_unbounded_page(self) -> None:
        page = PagedList.of(["a", "b"], PageLocator.EMPTY, 2)
        assert page.paging.current_page == PageLocator.UNBOUNDED
        assert page.paging.item_count == 2

    def test_empty_collection(self) -> None:
        page = PagedList.of([], PageLocator(1, 10), 0)
        assert len(page) == 0
        assert page.paging.total_pages == 1


class TestPagedListFromCollection:
    def test_middle_page(self) -> None:
        page = PagedList.from_collection(ITEMS, PageLocator(2, 10))
        assert list(page) == ITEMS[10:20]
        assert page.paging.total_items == 27

    def test_short_last_page(self) -> None:
        page = PagedList.from_collection(ITEMS, PageLocator(3, 10))
        assert list(page) == ["item-21", "item-22", "item-23", "item-24", "item-25", "item-26", "item-27"]

    def test_page_past_end_gives_last_page(self) -> None:
        page = PagedList.from_collection(ITEMS, PageLocator(50, 10))
        assert page.paging.current_page == PageLocator(3, 10)
        assert len(page) == 7

    def test_unbounded(self) -> None:
        page = PagedList.from_collection(ITEMS, PageLocator.UNBOUNDED)
        assert len(page) == 27

    def test_empty_collection(self) -> None:
        page = PagedList.from_collection([], PageLocator(1, 10))
        assert page.items == ()


class TestPagedListBehaviour:
    def test_map_keeps_paging(self) -> None:
        page = PagedList.from_collection(ITEMS, PageLocator(1, 5))
        mapped = page.map(str.upper)
        assert mapped.items[0] == "ITEM-1"
        assert mapped.paging is page.paging

    def test_indexing(self) -> None:
        page = PagedList.from_collection(ITEMS, PageLocator(1, 5))
        assert page[0] == "item-1"
        assert page[-1] == "item-5"
        assert page[1:3] == ("item-2", "item-3")
