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
"""Configuration properties for paging defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pagekit.core.config import config_properties
from pagekit.paging.locator import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


@config_properties(prefix="pagekit.paging")
class PagingProperties(BaseModel):
    """Defaults applied when a caller does not choose a page size."""

    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    include_all_pages: bool = False
