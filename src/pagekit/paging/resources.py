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
"""PagingResources: the locators needed to render navigation links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from pagekit.paging.locator import PageLocator

if TYPE_CHECKING:
    from pagekit.paging.state import PagingState


@dataclass(frozen=True)
class PagingResources:
    """First, previous, current, next and last page of a paging state.

    Locators with no corresponding page (e.g. ``previous_page`` on the first
    page) are :attr:`PageLocator.EMPTY`.
    """

    first_page: PageLocator = PageLocator.EMPTY
    previous_page: PageLocator = PageLocator.EMPTY
    current_page: PageLocator = PageLocator.EMPTY
    next_page: PageLocator = PageLocator.EMPTY
    last_page: PageLocator = PageLocator.EMPTY

    EMPTY: ClassVar[PagingResources]

    @staticmethod
    def from_state(state: PagingState) -> PagingResources:
        if not state.has_value:
            return PagingResources.EMPTY
        return PagingResources(
            first_page=state.first_page,
            previous_page=state.previous_page,
            current_page=state.current_page,
            next_page=state.next_page,
            last_page=state.last_page,
        )

    @property
    def has_value(self) -> bool:
        return self.current_page.has_value

    def to_dict(self) -> dict[str, Any]:
        return {
            "FirstPage": self.first_page.to_dict(),
            "PreviousPage": self.previous_page.to_dict(),
            "CurrentPage": self.current_page.to_dict(),
            "NextPage": self.next_page.to_dict(),
            "LastPage": self.last_page.to_dict(),
        }

    def __str__(self) -> str:
        return f"PagingResources[CurrentPage={self.current_page}]"


PagingResources.EMPTY = PagingResources()
