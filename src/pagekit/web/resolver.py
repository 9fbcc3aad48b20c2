# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Resolve a Pageable from an incoming Starlette request."""

from __future__ import annotations

from starlette.requests import Request

from pagekit.data.pageable import Pageable
from pagekit.data.parser import PageableParser


def query_multimap(request: Request) -> dict[str, list[str]]:
    """Collect query parameters as name -> values, keeping repeats in request order."""
    params: dict[str, list[str]] = {}
    for name, value in request.query_params.multi_items():
        params.setdefault(name, []).append(value)
    return params


class PageableResolver:
    """Reads page, size and sort query parameters of a request into a Pageable."""

    def __init__(self, parser: PageableParser | None = None) -> None:
        self._parser = parser or PageableParser.default()

    def resolve(self, request: Request) -> Pageable:
        """Parse the request's query parameters.

        Raises:
            PaginationException: If any pagination parameter is malformed.
        """
        return self._parser.parse(query_multimap(request))
