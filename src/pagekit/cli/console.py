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
"""Shared Rich console for CLI output."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from pagekit.paging.span import ItemSpan
from pagekit.paging.state import PagingState

PAGEKIT_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "pagekit": "bold magenta",
    "dim": "dim",
})

console = Console(theme=PAGEKIT_THEME)


def print_banner() -> None:
    """Print the pagekit name and version."""
    from pagekit import __version__

    console.print(f"[pagekit]pagekit[/pagekit] [dim](v{__version__})[/dim]")
    console.print("  [dim]Copyright 2026 Firefly Software Solutions Inc. | Apache 2.0 License[/dim]\n")


def print_paging_state(state: PagingState) -> None:
    """Print every derived fact of a paging state as a two-column table."""
    if not state.has_value:
        console.print(f"[warning]No such page:[/warning] {escape(str(state))}")
        return

    table = Table(title=f"[pagekit]{escape(str(state))}[/pagekit]", show_header=False, border_style="dim")
    table.add_column("Key", style="info")
    table.add_column("Value")
    table.add_row("Current page", str(state.current_page.number))
    table.add_row("Page size", "unbounded" if state.current_page.is_unbounded else str(state.current_page.size))
    table.add_row("Total items", str(state.total_items))
    table.add_row("Total pages", str(state.total_pages))
    table.add_row("Items", f"{state.first_item_number}..{state.last_item_number}")
    table.add_row("Item count", str(state.item_count))
    table.add_row("First page", _page_label(state.first_page.number))
    table.add_row("Previous page", _page_label(state.previous_page.number))
    table.add_row("Next page", _page_label(state.next_page.number))
    table.add_row("Last page", _page_label(state.last_page.number))
    console.print(table)

    if state.all_pages is not None:
        print_item_spans(state.all_pages)


def print_item_spans(spans: Sequence[ItemSpan], limit: int | None = None) -> None:
    """Print one row per page with its item range, at most *limit* rows."""
    table = Table(title="Pages", border_style="dim")
    table.add_column("Page", style="info", justify="right")
    table.add_column("First item", justify="right")
    table.add_column("Last item", justify="right")
    table.add_column("Items", style="dim", justify="right")
    for span in itertools.islice(spans, limit):
        table.add_row(
            str(span.page_number),
            str(span.first_item_number),
            str(span.last_item_number),
            str(span.item_count),
        )
    console.print(table)
    if limit is not None and len(spans) > limit:
        console.print(f"[dim]... {len(spans) - limit} more page(s)[/dim]")


def _page_label(number: int) -> str:
    return str(number) if number > 0 else "-"
