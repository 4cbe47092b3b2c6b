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

"""Small helpers on lists and mappings."""

from __future__ import annotations

import logging

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_LOGGER = logging.getLogger("thoth.index_ops.containers")


def convert_classes(classes: Optional[Iterable[str]]) -> Dict[str, bool]:
    """Convert a list of class names to a mapping activating all of them."""
    if not classes:
        return {}

    return {c: True for c in classes}


def is_empty(obj: Mapping) -> bool:
    """Check whether the given mapping has no keys."""
    return len(obj) == 0


def flat_map(items: Iterable[T], fun: Callable[[T], Iterable[U]]) -> List[U]:
    """Map each item to a list of results and concatenate them."""
    return [result for item in items for result in fun(item)]


def apply_perm(items: List[T], perm: Sequence[int]) -> None:
    """Reorder items in place so that items[i] becomes the old items[perm[i]]."""
    tmp = list(items)
    if len(tmp) != len(perm):
        _LOGGER.warning("Permutation of length %d applied to %d items", len(perm), len(tmp))

    for i, source in enumerate(perm):
        if i < len(items):
            items[i] = tmp[source]
        else:
            items.append(tmp[source])
