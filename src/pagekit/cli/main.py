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
"""pagekit CLI: inspect paging states from the command line."""

from __future__ import annotations

from pathlib import Path

import click

from pagekit.cli.console import console, print_banner, print_item_spans, print_paging_state
from pagekit.core.config import Config
from pagekit.logging.structlog_adapter import StructlogAdapter
from pagekit.paging.calculator import all_pages_and_item_numbers
from pagekit.paging.locator import PageLocator
from pagekit.paging.properties import PagingProperties
from pagekit.paging.serialization import dumps
from pagekit.paging.state import PagingState

DEFAULT_ROW_LIMIT = 50


class PagekitCLI(click.Group):
    """Custom Click group that shows the pagekit banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


def _load_properties(config_path: Path | None) -> PagingProperties:
    """Paging defaults from *config_path*, or the built-in defaults."""
    config = Config.defaults() if config_path is None else Config.from_file(config_path)
    StructlogAdapter().configure(config)
    try:
        return config.bind(PagingProperties)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _page_size(size: int | None, properties: PagingProperties) -> int:
    return properties.default_page_size if size is None else size


_size_option = click.option(
    "--size",
    "-s",
    type=click.IntRange(0, 255),
    default=None,
    help="Items per page (0 for a single unbounded page). Defaults to pagekit.paging.default_page_size.",
)
_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML or TOML configuration file.",
)


@click.group(cls=PagekitCLI)
@click.version_option(package_name="pagekit")
def cli() -> None:
    """pagekit: page locators and paging arithmetic."""


@cli.command("info")
@click.argument("number", type=int)
@click.argument("total", type=int)
@_size_option
@click.option("--all-pages", is_flag=True, help="Also list the item span of every page.")
@click.option("--json", "as_json", is_flag=True, help="Print the structured JSON form.")
@_config_option
def info_command(
    number: int,
    total: int,
    size: int | None,
    all_pages: bool,
    as_json: bool,
    config_path: Path | None,
) -> None:
    """Show page NUMBER of a collection of TOTAL items."""
    properties = _load_properties(config_path)
    state = PagingState(
        PageLocator(number, _page_size(size, properties)),
        total,
        include_all_pages=all_pages or properties.include_all_pages,
    )
    if as_json:
        click.echo(dumps(state, indent=2))
        return
    print_paging_state(state)


@cli.command("pages")
@click.argument("total", type=click.IntRange(min=0))
@_size_option
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_ROW_LIMIT,
    show_default=True,
    help="Most pages to list; the page count is always printed.",
)
@_config_option
def pages_command(total: int, size: int | None, limit: int, config_path: Path | None) -> None:
    """List the item span of every page of a collection of TOTAL items."""
    properties = _load_properties(config_path)
    spans = all_pages_and_item_numbers(PageLocator(1, _page_size(size, properties)), total)
    print_item_spans(spans, limit=limit)
    console.print(f"[dim]{len(spans)} page(s)[/dim]")
