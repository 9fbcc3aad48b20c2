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
"""Pagination types for paginated query results."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pagekit.data.pageable import Pageable
from pagekit.kernel.exceptions import InvalidContentException

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A page of results from a paginated query.

    Attributes:
        content: The items on this page.
        number: Current page number (0-based).
        size: Maximum items per page.
        total_elements: Total number of items across all pages.
    """

    content: Sequence[T]
    number: int
    size: int
    total_elements: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")
        if self.total_elements < 0:
            raise ValueError(f"total_elements must be >= 0, got {self.total_elements}")

    @staticmethod
    def of(content: Sequence[T], pageable: Pageable, total_elements: int) -> Page[T]:
        """Build a page for *pageable* holding *content*.

        Raises:
            InvalidContentException: If *content* is not a sequence of items.
        """
        if not isinstance(content, Sequence) or isinstance(content, (str, bytes, bytearray)):
            raise InvalidContentException(context={"type": type(content).__name__})
        return Page(content=content, number=pageable.page, size=pageable.size, total_elements=total_elements)

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        return math.ceil(self.total_elements / self.size)

    @property
    def has_previous(self) -> bool:
        """Whether there is a previous page."""
        return self.number > 0

    @property
    def has_next(self) -> bool:
        """Whether there is a next page."""
        return self.number < self.total_pages - 1

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return self.number + 1 == self.total_pages

    @property
    def has_content(self) -> bool:
        return len(self.content) > 0

    def map(self, func: Callable[[T], U]) -> Page[U]:
        """Transform items using a mapping function, preserving pagination metadata."""
        return Page(
            content=[func(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape used by JSON responses."""
        return {
            "content": list(self.content),
            "number": self.number,
            "size": self.size,
            "totalPages": self.total_pages,
            "totalElements": self.total_elements,
        }
