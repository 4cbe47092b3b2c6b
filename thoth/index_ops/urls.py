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

"""Decode query arguments of page URLs."""

from typing import Dict
from urllib.parse import unquote_plus
from urllib.parse import urlsplit


def parse_query_string(query: str) -> Dict[str, str]:
    """Parse a raw query string into key value pairs.

    Pairs without ``=`` are skipped, ``+`` stands for a space.

    >>> parse_query_string("?q=a+b&flag&x=%2F")
    {'q': 'a b', 'x': '/'}
    """
    result = {}
    if query.startswith("?"):
        query = query[1:]

    for item in query.split("&"):
        key = item.split("=")
        if len(key) > 1:
            result[unquote_plus(key[0])] = unquote_plus(key[1])

    return result


def get_query_strings(url: str) -> Dict[str, str]:
    """Get all GET arguments of the given URL as key value pairs."""
    return parse_query_string(urlsplit(url).query)


def get_own_url(url: str) -> str:
    """Get the given URL without query and fragment."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"
