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

"""Lazy set-like operations on sorted sequences."""

from __future__ import annotations

from typing import Callable, Iterator, List, Tuple, TypeVar, TYPE_CHECKING

from .sorting import ensure_sorted
from .sorting import ensure_sorted_copy

if TYPE_CHECKING:
    from _typeshed import SupportsDunderLT

    T = TypeVar("T", bound=SupportsDunderLT)


def _sorted_operands(minuend: List[T], subtrahend: List[T], in_place: bool) -> Tuple[List[T], List[T]]:
    if in_place:
        ensure_sorted(minuend)
        ensure_sorted(subtrahend)
        return minuend, subtrahend

    return ensure_sorted_copy(minuend), ensure_sorted_copy(subtrahend)


def sorted_iter_set_difference(minuend: List[T], subtrahend: List[T], *, in_place: bool = True) -> Iterator[T]:
    """Compute the set difference of two sorted lists.

    Each value of the subtrahend removes at most one equal value of the
    minuend. Both lists are checked to be in ascending order when the
    iteration starts; with ``in_place`` the caller's lists are sorted in place
    if they are not, otherwise sorted copies are used.
    """
    if not minuend or not subtrahend:
        yield from minuend
        return

    _minuend, _subtrahend = _sorted_operands(minuend, subtrahend, in_place)
    source = iter(_minuend)
    dest = iter(_subtrahend)
    d = next(dest, None)

    for s in source:
        while d is not None and d < s:
            d = next(dest, None)
        if d is None:
            yield s
            break
        elif s == d:
            d = next(dest, None)
        else:
            yield s

    yield from source


def sorted_set_difference(minuend: List[T], subtrahend: List[T], *, in_place: bool = True) -> List[T]:
    """Compute the set difference of two sorted lists into a new list."""
    return list(sorted_iter_set_difference(minuend, subtrahend, in_place=in_place))


def for_each_remaining(
    minuend: List[T], subtrahend: List[T], consumer: Callable[[T], object], *, in_place: bool = True
) -> None:
    """Call consumer on each value of the set difference of two sorted lists, in ascending order."""
    for value in sorted_iter_set_difference(minuend, subtrahend, in_place=in_place):
        consumer(value)
