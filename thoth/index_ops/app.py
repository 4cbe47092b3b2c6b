# thoth-index-ops
# Copyright(C) 2022 Red Hat, Inc.
#
# This program is free software: you can redistribute it and / or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

"""Command line access to index set operations."""

from __future__ import annotations

import json
import logging

from typing import List, Tuple, Union

import click
from thoth.common import init_logging
from prometheus_client import generate_latest

from . import __version__
from .colors import RGB, BLACK, get_font_color, get_gray_value
from .lazy_set_ops import for_each_remaining
from .lazy_set_ops import sorted_set_difference
from .metrics import prometheus_registry
from .sorting import first_unsorted_index
from .sorting import require_sorted
from .timing import timing
from .urls import get_query_strings

init_logging()
_LOGGER = logging.getLogger("thoth.index_ops")

Number = Union[int, float]


def _parse_number(value: str) -> Number:
    try:
        return int(value)
    except ValueError:
        return float(value)


def _parse_numbers(ctx, param, value: str) -> List[Number]:
    try:
        return [_parse_number(item.strip()) for item in value.split(",") if item.strip()]
    except ValueError:
        raise click.BadParameter("expected a comma separated list of numbers")


def _format_numbers(values: List[Number]) -> str:
    return ",".join(str(v) for v in values)


@click.group()
@click.option("--debug", is_flag=True, help="Run in a debug mode", envvar="THOTH_INDEX_OPS_DEBUG", default=False)
@click.option(
    "--metrics",
    is_flag=True,
    help="Print collected metrics after the command finished.",
    envvar="THOTH_INDEX_OPS_METRICS",
    default=False,
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, metrics: bool) -> None:
    """Index set operations on comma separated lists of numbers."""
    if debug:
        _LOGGER.setLevel(logging.DEBUG)
        _LOGGER.debug("Debug mode is on.")

    _LOGGER.debug("Running index operations in version %r", __version__)

    if metrics:
        ctx.call_on_close(lambda: click.echo(generate_latest(prometheus_registry).decode("utf-8"), nl=False))


@cli.command()
@click.argument("minuend", metavar="1,2,3", callback=_parse_numbers)
@click.argument("subtrahend", metavar="2", callback=_parse_numbers)
@click.option("--stream", is_flag=True, help="Print each remaining value on its own line as it is computed.")
@click.option("--copy", "copy_", is_flag=True, help="Sort copies of unsorted inputs instead of the inputs.")
def difference(minuend: List[Number], subtrahend: List[Number], stream: bool, copy_: bool) -> None:
    """Print values of MINUEND not matched by a value of SUBTRAHEND."""
    if stream:
        for_each_remaining(minuend, subtrahend, click.echo, in_place=not copy_)
        return

    result = timing("difference", sorted_set_difference, minuend, subtrahend, in_place=not copy_)
    click.echo(_format_numbers(result))


@cli.command("sort-check")
@click.argument("values", metavar="3,1,2", callback=_parse_numbers)
def sort_check(values: List[Number]) -> None:
    """Print VALUES in ascending order, reporting whether they had to be sorted."""
    first_violation = first_unsorted_index(values)
    if first_violation is None:
        click.echo("sorted")
    else:
        click.echo(f"not sorted at index {first_violation}")
        require_sorted(values)

    click.echo(_format_numbers(values))


@cli.command()
@click.argument("url", type=str, metavar="https://example.com/?q=1")
def query(url: str) -> None:
    """Print GET arguments of URL as JSON."""
    click.echo(json.dumps(get_query_strings(url), sort_keys=True, indent=2))


@cli.command("font-color")
@click.argument("channels", nargs=3, type=click.IntRange(0, 255), metavar="R G B")
def font_color(channels: Tuple[int, int, int]) -> None:
    """Print the font color readable on the background color R G B."""
    color = RGB(*channels)
    name = "black" if get_font_color(color) == BLACK else "white"
    click.echo(f"{name} {get_gray_value(color):.4f}")


__name__ == "__main__" and cli()
