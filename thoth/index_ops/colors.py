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

"""Color helpers for picking readable labels."""

from typing import NamedTuple


class RGB(NamedTuple):
    """A color given by its red, green and blue channels in range 0-255."""

    r: int
    g: int
    b: int


BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)


def get_gray_value(color: RGB) -> float:
    """Get relative luminance of the given color, 0 is black and 1 is white."""
    return 0.2126 * color.r / 255 + 0.7152 * color.g / 255 + 0.0722 * color.b / 255


def get_font_color(color: RGB) -> RGB:
    """Get the font color readable on the given background color."""
    return BLACK if get_gray_value(color) > 0.5 else WHITE
