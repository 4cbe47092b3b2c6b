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

"""Test companion helpers used by visualization front ends."""

import logging
import random

import pytest

from thoth.index_ops.colors import BLACK, RGB, WHITE, get_font_color, get_gray_value
from thoth.index_ops.containers import apply_perm, convert_classes, flat_map, is_empty
from thoth.index_ops.geometry import Rect, rect_intersect
from thoth.index_ops.sampling import random_norm
from thoth.index_ops.urls import get_own_url, get_query_strings, parse_query_string


class TestUrls:
    """Test URL helpers."""

    def test_get_query_strings(self):
        """Test decoding GET arguments of an URL."""
        url = "https://example.com/vis/index.html?q=hello+world&path=%2Fdata%2Fx.csv&flag&n=1#top"
        assert get_query_strings(url) == {"q": "hello world", "path": "/data/x.csv", "n": "1"}

    def test_get_query_strings_no_query(self):
        """Test an URL without a query has no arguments."""
        assert get_query_strings("https://example.com/") == {}

    def test_parse_query_string(self):
        """Test raw query strings, with or without the leading question mark."""
        assert parse_query_string("?a=1&b=2") == {"a": "1", "b": "2"}
        assert parse_query_string("a=1&a=3") == {"a": "3"}
        assert parse_query_string("a=b=c") == {"a": "b"}
        assert parse_query_string("a=") == {"a": ""}
        assert parse_query_string("") == {}

    def test_get_own_url(self):
        """Test query and fragment are dropped."""
        assert get_own_url("http://localhost:8080/app/page?x=1#frag") == "http://localhost:8080/app/page"


class TestColors:
    """Test color helpers."""

    def test_gray_value(self):
        """Test gray value of black, white and pure channels."""
        assert get_gray_value(BLACK) == 0
        assert get_gray_value(WHITE) == pytest.approx(1.0)
        assert get_gray_value(RGB(0, 255, 0)) == pytest.approx(0.7152)

    @pytest.mark.parametrize(
        "color,expected",
        [
            (WHITE, BLACK),
            (BLACK, WHITE),
            (RGB(255, 255, 0), BLACK),
            (RGB(0, 0, 255), WHITE),
            (RGB(255, 0, 0), WHITE),
        ],
    )
    def test_font_color(self, color, expected):
        """Test readable font color on a background."""
        assert get_font_color(color) == expected


class TestGeometry:
    """Test rectangle intersection."""

    @pytest.mark.parametrize(
        "rect_a,rect_b,expected",
        [
            (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), True),
            (Rect(0, 0, 10, 10), Rect(2, 2, 1, 1), True),
            (Rect(0, 0, 10, 10), Rect(10, 0, 5, 5), False),
            (Rect(0, 0, 10, 10), Rect(20, 20, 5, 5), False),
            (Rect(0, 0, 0, 10), Rect(0, 0, 10, 10), False),
            (Rect(0, 0, 10, 10), Rect(1, 1, 5, -1), False),
        ],
    )
    def test_rect_intersect(self, rect_a, rect_b, expected):
        """Test overlapping, touching, disjoint and empty rectangles."""
        assert rect_intersect(rect_a, rect_b) is expected
        assert rect_intersect(rect_b, rect_a) is expected


class TestContainers:
    """Test list and mapping helpers."""

    def test_convert_classes(self):
        """Test class names are mapped to activation flags."""
        assert convert_classes(["selected", "hidden"]) == {"selected": True, "hidden": True}
        assert convert_classes(None) == {}
        assert convert_classes([]) == {}

    def test_is_empty(self):
        """Test emptiness of mappings."""
        assert is_empty({})
        assert not is_empty({"a": 1})

    def test_flat_map(self):
        """Test results of each item are concatenated."""
        assert flat_map([1, 2, 3], lambda x: [x] * x) == [1, 2, 2, 3, 3, 3]
        assert flat_map([], lambda x: [x]) == []

    def test_apply_perm(self, caplog):
        """Test reordering a list in place by a permutation."""
        caplog.set_level(logging.WARNING, logger="thoth.index_ops")
        items = ["a", "b", "c"]
        apply_perm(items, [2, 0, 1])
        assert items == ["c", "a", "b"]
        assert caplog.records == []

    def test_apply_perm_length_mismatch(self, caplog):
        """Test a permutation of different length is reported and applied anyway."""
        caplog.set_level(logging.WARNING, logger="thoth.index_ops")
        items = ["a", "b", "c"]
        apply_perm(items, [1, 0])
        assert items == ["b", "a", "c"]
        assert len(caplog.records) == 1

    def test_apply_perm_out_of_range(self):
        """Test indexes outside of the list are rejected."""
        with pytest.raises(IndexError):
            apply_perm([1, 2], [0, 5])


class TestSampling:
    """Test bounded random sampling."""

    def test_unbounded(self):
        """Test values stay within the reachable interval."""
        rng = random.Random(42)
        values = [random_norm(rng=rng) for _ in range(1000)]
        assert all(-1 <= v <= 1 for v in values)
        assert abs(sum(values) / len(values)) < 0.05

    def test_bounded(self):
        """Test values exceeding the radius are drawn again."""
        rng = random.Random(42)
        assert all(abs(random_norm(0.1, rng=rng)) <= 0.1 for _ in range(500))

    def test_normalized(self):
        """Test normalized values are scaled by the radius."""
        rng = random.Random(7)
        values = [random_norm(0.2, norm=True, rng=rng) for _ in range(500)]
        assert all(-1 <= v <= 1 for v in values)
        assert any(abs(v) > 0.5 for v in values)

    def test_tiny_radius_disables_bound(self):
        """Test radius below the threshold is ignored."""
        rng = random.Random(3)
        values = [random_norm(1e-4, norm=True, rng=rng) for _ in range(200)]
        assert all(-1 <= v <= 1 for v in values)
        assert any(abs(v) > 1e-4 for v in values)

    def test_deterministic_with_seed(self):
        """Test the same generator state produces the same value."""
        assert random_norm(0.5, rng=random.Random(1)) == random_norm(0.5, rng=random.Random(1))
