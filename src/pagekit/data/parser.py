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
"""Pageable parser: turns raw, multi-valued request parameters into a Pageable.

Input is a mapping of parameter name to the list of raw string values it
was given, the shape a query string decodes to. Three parameters are read:

**page** — zero-based page index, exactly one integer ``>= 0``.

**size** — page size, exactly one integer ``>= 1``.

**sort** — repeatable; each value is ``<p1>,<p2>,...,<pN>[,<dir>]``:
    - one field: a property sorted ascending (``sort=name``)
    - two or more fields: the last one is ``asc`` or ``desc`` (case
      insensitive) and applies to every preceding property
      (``sort=last_name,first_name,desc``)

Values are checked page, then size, then sort, and the first failure is
raised. Absent parameters fall back to the configured defaults; an absent
sort parameter yields ``Pageable.sort is None``.

Example::

    parser = PageableParser.default()
    pageable = parser.parse({"page": ["2"], "sort": ["created_at,desc", "id"]})
    pageable = parser.parse_url("/orders?page=2&size=50&sort=total,desc")
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from urllib.parse import parse_qs, urlsplit

from pagekit.config.properties.pagination import ParserProperties
from pagekit.core.config import Config
from pagekit.data.pageable import Direction, Order, Pageable, Sort
from pagekit.kernel.exceptions import (
    EmptySortClauseException,
    InvalidPageValueException,
    InvalidSizeValueException,
    PaginationException,
    WrongPageValueCountException,
    WrongSizeValueCountException,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_PARAM = "page"
DEFAULT_SIZE_PARAM = "size"
DEFAULT_SORT_PARAM = "sort"
DEFAULT_PAGE = 0
DEFAULT_SIZE = 10

# Optional sign followed by ASCII digits; no whitespace, underscores or
# non-ASCII digits, all of which int() would otherwise accept.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit range, beyond which values are rejected like any other bad number.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

Params = Mapping[str, Sequence[str]]


def parse_sort_clause(clause: str) -> Sort:
    """Parse one raw sort value into a :class:`Sort`.

    Raises:
        EmptySortClauseException: If the clause names no property.
        InvalidDirectionException: If the trailing field is not a direction.
    """
    fields = clause.split(",")
    if len(fields) == 1:
        if not fields[0]:
            raise EmptySortClauseException(context={"value": clause})
        return Sort.of(Order.asc(fields[0]))

    *properties, token = fields
    direction = Direction.parse(token)
    if not all(properties):
        raise EmptySortClauseException(context={"value": clause})
    return Sort(orders=tuple(Order.by(p, direction) for p in properties))


def _parse_int(value: str) -> int | None:
    if _INTEGER_RE.fullmatch(value) is None:
        return None
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        return None
    return number


class PageableParser:
    """Configurable parser for page, size and sort request parameters.

    Instances are immutable and hold no per-call state, so one parser can
    be shared freely.
    """

    def __init__(
        self,
        page_param: str = DEFAULT_PAGE_PARAM,
        size_param: str = DEFAULT_SIZE_PARAM,
        sort_param: str = DEFAULT_SORT_PARAM,
        default_page: int = DEFAULT_PAGE,
        default_size: int = DEFAULT_SIZE,
    ) -> None:
        self._page_param = page_param
        self._size_param = size_param
        self._sort_param = sort_param
        self._default_page = default_page
        self._default_size = default_size

    @classmethod
    def default(cls) -> PageableParser:
        """Parser reading ``page``, ``size`` and ``sort`` with defaults 0 and 10."""
        return cls()

    @classmethod
    def from_properties(cls, properties: ParserProperties) -> PageableParser:
        return cls(
            page_param=properties.page_param,
            size_param=properties.size_param,
            sort_param=properties.sort_param,
            default_page=properties.default_page,
            default_size=properties.default_size,
        )

    @classmethod
    def from_config(cls, config: Config) -> PageableParser:
        """Build a parser from the ``pagekit.pagination`` configuration section."""
        return cls.from_properties(config.bind(ParserProperties))

    @property
    def page_param(self) -> str:
        return self._page_param

    @property
    def size_param(self) -> str:
        return self._size_param

    @property
    def sort_param(self) -> str:
        return self._sort_param

    @property
    def default_page(self) -> int:
        return self._default_page

    @property
    def default_size(self) -> int:
        return self._default_size

    def parse(self, params: Params) -> Pageable:
        """Parse *params* into a :class:`Pageable`.

        Raises:
            PaginationException: The subclass matching the first invalid
                parameter, checked in page, size, sort order.
        """
        try:
            page = self._parse_page(params)
            size = self._parse_size(params)
            sort = self._parse_sort(params)
        except PaginationException as exc:
            logger.debug("Rejected pagination parameters: %s (%s)", exc.code, exc.context)
            raise
        pageable = Pageable(page=page, size=size, sort=sort)
        logger.debug("Parsed pageable: page=%d size=%d sort=%s", page, size, sort)
        return pageable

    def parse_query_string(self, query: str) -> Pageable:
        """Parse a raw query string such as ``page=1&sort=name,desc``."""
        return self.parse(parse_qs(query, keep_blank_values=True))

    def parse_url(self, url: str) -> Pageable:
        """Parse the query part of *url*."""
        return self.parse_query_string(urlsplit(url).query)

    def _parse_page(self, params: Params) -> int:
        values = params.get(self._page_param)
        if values is None:
            return self._default_page
        if len(values) != 1:
            raise WrongPageValueCountException(context={"param": self._page_param, "values": list(values)})
        page = _parse_int(values[0])
        if page is None or page < 0:
            raise InvalidPageValueException(context={"param": self._page_param, "value": values[0]})
        return page

    def _parse_size(self, params: Params) -> int:
        values = params.get(self._size_param)
        if values is None:
            return self._default_size
        if len(values) != 1:
            raise WrongSizeValueCountException(context={"param": self._size_param, "values": list(values)})
        size = _parse_int(values[0])
        if size is None or size < 1:
            raise InvalidSizeValueException(context={"param": self._size_param, "value": values[0]})
        return size

    def _parse_sort(self, params: Params) -> Sort | None:
        values = params.get(self._sort_param)
        if values is None:
            return None
        sort: Sort | None = None
        for value in values:
            clause = parse_sort_clause(value)
            sort = clause if sort is None else sort.and_(clause)
        return sort

    def __repr__(self) -> str:
        return (
            f"PageableParser(page_param={self._page_param!r}, size_param={self._size_param!r}, "
            f"sort_param={self._sort_param!r}, default_page={self._default_page}, "
            f"default_size={self._default_size})"
        )
