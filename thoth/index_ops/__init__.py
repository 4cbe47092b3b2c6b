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

"""Stateless helpers for index sets and visualization front ends."""

__version__ = "0.1.0"

from .lazy_set_ops import for_each_remaining
from .lazy_set_ops import sorted_iter_set_difference
from .lazy_set_ops import sorted_set_difference
from .sorting import ensure_sorted
from .sorting import ensure_sorted_copy
from .sorting import require_sorted

__all__ = [
    "__version__",
    "ensure_sorted",
    "ensure_sorted_copy",
    "for_each_remaining",
    "require_sorted",
    "sorted_iter_set_difference",
    "sorted_set_difference",
]
