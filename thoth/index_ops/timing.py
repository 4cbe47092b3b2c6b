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

"""Wall time instrumentation of single calls."""

from __future__ import annotations

import logging
import time

from typing import Any, Callable, TypeVar

from .metrics import METRIC_TIMING

R = TypeVar("R")

_LOGGER = logging.getLogger("thoth.index_ops.timing")


def timing(name: str, fun: Callable[..., R], *args: Any, **kwargs: Any) -> R:
    """Call the given function, log and record how long the call took."""
    start = time.monotonic()
    result = fun(*args, **kwargs)
    elapsed = time.monotonic() - start

    METRIC_TIMING.labels(name=name).observe(elapsed)
    if args or kwargs:
        _LOGGER.info("TIMING %s %dms %r %r", name, elapsed * 1000, args, kwargs)
    else:
        _LOGGER.info("TIMING %s %dms", name, elapsed * 1000)

    return result
