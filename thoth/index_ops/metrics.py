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

"""Prometheus metrics exposed by index operations."""

import os

from prometheus_client import CollectorRegistry, Gauge, Counter, Summary

from . import __version__

prometheus_registry = CollectorRegistry()

THOTH_DEPLOYMENT_NAME = os.getenv("THOTH_DEPLOYMENT_NAME", "local")

_METRIC_INFO = Gauge(
    "thoth_index_ops_info",
    "Thoth index operations information",
    ["env", "version"],
    registry=prometheus_registry,
)

METRIC_UNSORTED_INPUT = Counter(
    "thoth_index_ops_unsorted_input",
    "Number of sequences found out of order and repaired by sorting",
    ["env", "version"],
    registry=prometheus_registry,
)

METRIC_TIMING = Summary(
    "thoth_index_ops_timing_seconds",
    "Wall time of calls instrumented with the timing wrapper",
    ["name"],
    registry=prometheus_registry,
)

_METRIC_INFO.labels(THOTH_DEPLOYMENT_NAME, __version__).inc()


def record_unsorted_input() -> None:
    """Count one repaired sequence."""
    METRIC_UNSORTED_INPUT.labels(env=THOTH_DEPLOYMENT_NAME, version=__version__).inc()
