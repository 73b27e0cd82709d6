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
"""pagekit paging: page locators, item spans, paging state and their arithmetic."""

from pagekit.paging.locator import (
    DEFAULT_PAGE_SIZE,
    FIRST_PAGE_NUMBER,
    MAX_PAGE_SIZE,
    UNBOUNDED_PAGE_SIZE,
    PageLocator,
)
from pagekit.paging.span import ItemSpan
from pagekit.paging.calculator import (
    ItemSpanSequence,
    all_pages_and_item_numbers,
    total_pages,
    turn_to_page,
)
from pagekit.paging.state import PagingInfo, PagingState, with_total_items
from pagekit.paging.resources import PagingResources
from pagekit.paging.paged_list import PagedList
from pagekit.paging.serialization import (
    dumps,
    loads,
    parse_item_span,
    parse_page_locator,
    parse_paging_state,
)
from pagekit.paging.properties import PagingProperties

__all__ = [
    # Constants
    "DEFAULT_PAGE_SIZE",
    "FIRST_PAGE_NUMBER",
    "MAX_PAGE_SIZE",
    "UNBOUNDED_PAGE_SIZE",
    # Values
    "ItemSpan",
    "PageLocator",
    "PagedList",
    "PagingInfo",
    "PagingResources",
    "PagingState",
    # Calculator
    "ItemSpanSequence",
    "all_pages_and_item_numbers",
    "total_pages",
    "turn_to_page",
    "with_total_items",
    # Structured form
    "dumps",
    "loads",
    "parse_item_span",
    "parse_page_locator",
    "parse_paging_state",
    # Configuration
    "PagingProperties",
]
