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

"""Bounded random sampling around zero."""

from __future__ import annotations

import random

from typing import Optional

# Bounds below this are treated as no bound at all.
_MIN_RADIUS = 1e-3


def random_norm(max_rad: Optional[float] = None, norm: bool = False, rng: Optional[random.Random] = None) -> float:
    """Draw an approximately normally distributed value centered at zero.

    The value is the sum of six uniform samples shifted and scaled to the
    interval (-1, 1). With ``max_rad`` values of greater magnitude are
    rejected and drawn again, ``norm`` then scales the result by
    ``1 / max_rad``.
    """
    _random = rng.random if rng is not None else random.random
    bounded = max_rad is not None and max_rad >= _MIN_RADIUS
    while True:
        rnd = (sum(_random() for _ in range(6)) - 3) / 3
        if not bounded:
            return rnd
        if abs(rnd) <= max_rad:  # type: ignore[operator]
            return rnd / max_rad if norm else rnd  # type: ignore[operator]
