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
"""Tests for the stateless paging calculator."""

from __future__ import annotations

import itertools

import pytest

from pagekit.kernel.exceptions import OutOfRangeException
from pagekit.paging import calculator
from pagekit.paging.calculator import ItemSpanSequence, all_pages_and_item_numbers, total_pages, turn_to_page
from pagekit.paging.locator import PageLocator
from pagekit.paging.span import ItemSpan
from pagekit.paging.state import PagingState

PAGE_SIZES = [1, 2, 3, 4, 5, 7, 10, 20, 255]
TOTALS = [*range(0, 42), 119, 255, 256, 1138]
OVERSHOOTS = [0, 1, 2, 3, 136, 10**6]

# ---------------------------------------------------------------------------
# total_pages
# ---------------------------------------------------------------------------


class TestTotalPages:
    def test_exact_multiple(self) -> None:
        assert total_pages(10, 120) == 12

    def test_partial_last_page(self) -> None:
        assert total_pages(10, 119) == 12
        assert total_pages(10, 1138) == 114
        assert total_pages(20, 1138) == 57

    def test_zero_items(self) -> None:
        assert total_pages(10, 0) == 0

    def test_single_item_per_page(self) -> None:
        assert total_pages(1, 39) == 39

    def test_large_collections_do_not_overflow(self) -> None:
        assert total_pages(10, 2**31 - 1) == 214748365
        assert total_pages(1, 10**30) == 10**30
        assert total_pages(255, 2**63) == (2**63 + 254) // 255

    def test_zero_page_size_raises(self) -> None:
        with pytest.raises(OutOfRangeException) as exc_info:
            total_pages(0, 10)
        assert exc_info.value.code == "OUT_OF_RANGE"
        assert exc_info.value.parameter == "page_size"
        assert exc_info.value.context == {"parameter": "page_size", "value": 0}

    def test_negative_page_size_raises(self) -> None:
        with pytest.raises(OutOfRangeException):
            total_pages(-1, 10)

    def test_negative_total_raises(self) -> None:
        with pytest.raises(OutOfRangeException) as exc_info:
            total_pages(10, -1)
        assert exc_info.value.parameter == "total_items"
        assert exc_info.value.value == -1


# ---------------------------------------------------------------------------
# turn_to_page
# ---------------------------------------------------------------------------


class TestTurnToPage:
    def test_within_range(self) -> None:
        state = PagingState(PageLocator(1, 10), 1138)
        assert turn_to_page(state, 57) == PageLocator(57, 10)

    def test_clamps_past_last_page(self) -> None:
        state = PagingState(PageLocator(1, 10), 1138)
        assert turn_to_page(state, 250) == PageLocator(114, 10)

    def test_clamps_below_first_page(self) -> None:
        state = PagingState(PageLocator(5, 10), 1138)
        assert turn_to_page(state, 0) == PageLocator(1, 10)
        assert turn_to_page(state, -3) == PageLocator(1, 10)

    def test_zero_items_stays_on_first_page(self) -> None:
        state = PagingState(PageLocator(1, 20), 0)
        assert turn_to_page(state, 4) == PageLocator(1, 20)

    def test_unbounded_returns_current(self) -> None:
        state = PagingState(PageLocator.UNBOUNDED, 57)
        assert turn_to_page(state, 9) == PageLocator.UNBOUNDED

    def test_invalid_state_returns_empty(self) -> None:
        assert turn_to_page(PagingState.EMPTY, 3) == PageLocator.EMPTY
        assert turn_to_page(PagingState(PageLocator(1, 10), -5), 3) == PageLocator.EMPTY

    def test_module_function_matches_method(self) -> None:
        state = PagingState(PageLocator(3, 20), 1138)
        assert calculator.turn_to_page(state, 80) == state.turn_to_page(80)

    @pytest.mark.parametrize(
        ("size", "total", "overshoot"),
        list(itertools.product([1, 3, 10, 20], [0, 1, 9, 10, 11, 39, 1138], OVERSHOOTS)),
    )
    def test_any_page_past_the_end_is_the_last_page(self, size: int, total: int, overshoot: int) -> None:
        state = PagingState(PageLocator(1, size), total)
        last = state.total_pages
        assert turn_to_page(state, last + overshoot) == turn_to_page(state, last)
        assert turn_to_page(state, last + overshoot) == PageLocator(last, size)


# ---------------------------------------------------------------------------
# all_pages_and_item_numbers
# ---------------------------------------------------------------------------


class TestAllPagesAndItemNumbers:
    def test_twelve_pages_with_short_last_page(self) -> None:
        spans = all_pages_and_item_numbers(PageLocator(1, 10), 119)
        assert len(spans) == 12
        assert spans[0] == ItemSpan(1, 1, 10)
        assert spans[10] == ItemSpan(11, 101, 110)
        assert spans[-1] == ItemSpan(12, 111, 119)

    def test_spans_are_contiguous(self) -> None:
        spans = list(all_pages_and_item_numbers(PageLocator(4, 20), 1138))
        assert len(spans) == 57
        assert [s.page_number for s in spans] == list(range(1, 58))
        for previous, current in zip(spans, spans[1:]):
            assert current.first_item_number == previous.last_item_number + 1
        assert spans[-1].last_item_number == 1138
        assert all(s.has_value for s in spans)

    @pytest.mark.parametrize(("size", "total"), list(itertools.product(PAGE_SIZES, TOTALS)))
    def test_spans_cover_every_item_once(self, size: int, total: int) -> None:
        spans = list(all_pages_and_item_numbers(PageLocator(1, size), total))
        assert len(spans) == max(total_pages(size, total), 1)
        assert sum(s.item_count for s in spans) == total
        assert spans[-1].last_item_number == total
        assert [s.page_number for s in spans] == list(range(1, len(spans) + 1))
        for previous, current in zip(spans, spans[1:]):
            assert current.first_item_number == previous.last_item_number + 1
        assert all(s.has_value for s in spans)
        assert all(s.item_count <= size for s in spans)

    def test_page_of_locator_does_not_matter(self) -> None:
        assert list(all_pages_and_item_numbers(PageLocator(3, 10), 27)) == list(
            all_pages_and_item_numbers(PageLocator(1, 10), 27)
        )

    def test_zero_items_gives_one_empty_page(self) -> None:
        spans = list(all_pages_and_item_numbers(PageLocator(1, 20), 0))
        assert spans == [ItemSpan(1, 0, 0)]
        assert spans[0].has_value

    def test_unbounded_gives_one_page_with_every_item(self) -> None:
        assert list(all_pages_and_item_numbers(PageLocator.UNBOUNDED, 57)) == [ItemSpan(1, 1, 57)]

    def test_unbounded_with_large_total(self) -> None:
        total = (2**31 - 1) // 33
        assert total == 65075262
        assert list(all_pages_and_item_numbers(PageLocator.UNBOUNDED, total)) == [ItemSpan(1, 1, 65075262)]

    def test_unbounded_with_zero_items(self) -> None:
        assert list(all_pages_and_item_numbers(PageLocator.UNBOUNDED, 0)) == [ItemSpan(1, 0, 0)]

    def test_invalid_locator_gives_empty_sequence(self) -> None:
        assert len(all_pages_and_item_numbers(PageLocator.EMPTY, 10)) == 0
        assert list(all_pages_and_item_numbers(PageLocator(-7, 10), 10)) == []

    def test_negative_total_gives_empty_sequence(self) -> None:
        assert list(all_pages_and_item_numbers(PageLocator(1, 10), -1)) == []


class TestItemSpanSequence:
    def test_is_restartable(self) -> None:
        spans = all_pages_and_item_numbers(PageLocator(1, 10), 27)
        assert list(spans) == list(spans)

    def test_is_lazy_for_huge_collections(self) -> None:
        spans = all_pages_and_item_numbers(PageLocator(1, 1), 10**12)
        assert len(spans) == 10**12
        assert spans[-1] == ItemSpan(10**12, 10**12, 10**12)

    def test_slicing(self) -> None:
        spans = all_pages_and_item_numbers(PageLocator(1, 10), 27)
        assert list(spans[1:]) == [ItemSpan(2, 11, 20), ItemSpan(3, 21, 27)]

    def test_index_out_of_range(self) -> None:
        spans = all_pages_and_item_numbers(PageLocator(1, 10), 27)
        with pytest.raises(IndexError):
            spans[3]

    def test_supports_sequence_protocol(self) -> None:
        spans = all_pages_and_item_numbers(PageLocator(1, 10), 27)
        assert isinstance(spans, ItemSpanSequence)
        assert ItemSpan(2, 11, 20) in spans
        assert spans.index(ItemSpan(3, 21, 27)) == 2

    def test_repr(self) -> None:
        assert repr(all_pages_and_item_numbers(PageLocator(1, 10), 27)) == "ItemSpanSequence(pages=3, total_items=27)"
