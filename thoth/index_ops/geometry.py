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

"""Axis aligned rectangles."""

from typing import NamedTuple


class Rect(NamedTuple):
    """Rectangle given by its top left corner and size."""

    x: float
    y: float
    width: float
    height: float


def rect_intersect(rect_a: Rect, rect_b: Rect) -> bool:
    """Check whether two rectangles overlap, empty rectangles never do."""
    if rect_a.width <= 0 or rect_a.height <= 0 or rect_b.width <= 0 or rect_b.height <= 0:
        return False

    return (
        rect_b.x + rect_b.width > rect_a.x
        and rect_b.y + rect_b.height > rect_a.y
        and rect_b.x < rect_a.x + rect_a.width
        and rect_b.y < rect_a.y + rect_a.height
    )
