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

"""Check that sequences are sorted, repair them when they are not.

Callers usually hand in data which is already in ascending order, so the
check is a single linear scan. Only when the scan finds a value lower than
its predecessor the sequence gets sorted, and the event is reported both as
a log record and as a Prometheus counter increment so that the producer of
the unsorted data can be tracked down.
"""

from __future__ import annotations

import itertools
import logging

from typing import Iterable, List, Optional, Sequence, TypeVar, TYPE_CHECKING

from .metrics import record_unsorted_input

if TYPE_CHECKING:
    from _typeshed import SupportsDunderLT

    T = TypeVar("T", bound=SupportsDunderLT)

_LOGGER = logging.getLogger("thoth.index_ops.sorting")


def first_unsorted_index(sequence: Sequence[T]) -> Optional[int]:
    """Get index of the first value lower than its predecessor, None if the sequence is sorted."""
    if not sequence:
        return None

    prev = sequence[0]
    for idx in range(1, len(sequence)):
        value = sequence[idx]
        if value < prev:
            return idx
        prev = value

    return None


def unsorted_runs(sequence: Sequence[T]) -> List[T]:
    """Collect values breaking the ascending order.

    Each run of values lower than their predecessor is prefixed with the last
    in-order value preceding it. Runs follow each other in the returned list.

    >>> unsorted_runs([1, 5, 3, 2, 4, 0])
    [5, 3, 2, 4, 0]
    """
    swapped: List[T] = []
    run = False
    for prev, value in zip(sequence, itertools.islice(sequence, 1, None)):
        if value < prev:
            if not run:
                swapped.append(prev)
            swapped.append(value)
            run = True
        else:
            run = False

    return swapped


def require_sorted(sequence: List[T]) -> None:
    """Sort the given list in place if it is not sorted, reporting the values out of order."""
    _LOGGER.debug("Running full sort order check on %d values", len(sequence))
    swapped = unsorted_runs(sequence)
    if not swapped:
        return

    first_violation = first_unsorted_index(sequence)
    _LOGGER.warning(
        "Sequence of %d values is not sorted (first violation at index %r), sorting it; values out of order: %r",
        len(sequence),
        first_violation,
        swapped,
        extra={"unsorted_run": swapped, "first_violation": first_violation, "length": len(sequence)},
    )
    record_unsorted_input()
    sequence.sort()


def ensure_sorted(sequence: List[T]) -> None:
    """Make sure the given list is in ascending order, the list is sorted in place if needed."""
    if first_unsorted_index(sequence) is not None:
        require_sorted(sequence)


def ensure_sorted_copy(sequence: Iterable[T]) -> List[T]:
    """Get values of the given sequence in ascending order without touching the sequence."""
    result = list(sequence)
    ensure_sorted(result)
    return result
