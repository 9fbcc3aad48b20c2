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
"""Spring-like Pageable and Sort types for pagination requests."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum

from pagekit.kernel.exceptions import InvalidDirectionException, InvalidNullHandlingException


class Direction(str, Enum):
    """Sort direction of a single property."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str) -> Direction:
        """Parse *value* case-insensitively, raising on anything but asc/desc."""
        token = value.lower()
        for member in cls:
            if member.value == token:
                return member
        raise InvalidDirectionException(context={"value": value})


class NullHandling(str, Enum):
    """Hint to the data store on where null sort keys are placed."""

    NATIVE = "native"
    NULLS_FIRST = "nullsFirst"
    NULLS_LAST = "nullsLast"

    @classmethod
    def parse(cls, value: str) -> NullHandling:
        """Parse *value* case-insensitively against native/nullsfirst/nullslast."""
        token = value.lower()
        for member in cls:
            if member.value.lower() == token:
                return member
        raise InvalidNullHandlingException(context={"value": value})


def must_parse_direction(value: str) -> Direction:
    """Parse a trusted literal direction; an invalid value is a programming error.

    Never call this with user input.
    """
    try:
        return Direction.parse(value)
    except InvalidDirectionException as exc:
        raise RuntimeError(f"Unparseable direction literal {value!r}: {exc}") from exc


def must_parse_null_handling(value: str) -> NullHandling:
    """Parse a trusted literal null handling; an invalid value is a programming error."""
    try:
        return NullHandling.parse(value)
    except InvalidNullHandlingException as exc:
        raise RuntimeError(f"Unparseable null handling literal {value!r}: {exc}") from exc


@dataclass(frozen=True)
class Order:
    """A single sort order: property name, direction, case and null handling."""

    property: str
    direction: Direction = Direction.ASC
    ignore_case: bool = False
    null_handling: NullHandling = NullHandling.NATIVE

    def __post_init__(self) -> None:
        if not self.property:
            raise ValueError("order property must not be empty")

    @staticmethod
    def by(property: str, direction: Direction = Direction.ASC) -> Order:
        """Create an order for the given property and direction."""
        return Order(property=property, direction=direction)

    @staticmethod
    def asc(property: str) -> Order:
        """Create an ascending order for the given property."""
        return Order(property=property, direction=Direction.ASC)

    @staticmethod
    def desc(property: str) -> Order:
        """Create a descending order for the given property."""
        return Order(property=property, direction=Direction.DESC)

    @property
    def is_ascending(self) -> bool:
        return self.direction is Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self.direction is Direction.DESC

    def with_direction(self, direction: Direction) -> Order:
        """Return a copy with *direction*, everything else unchanged."""
        return replace(self, direction=direction)

    def ignoring_case(self) -> Order:
        """Return a copy that sorts case-insensitively."""
        return replace(self, ignore_case=True)

    def with_null_handling(self, null_handling: NullHandling) -> Order:
        """Return a copy with *null_handling*, everything else unchanged."""
        return replace(self, null_handling=null_handling)

    def nulls_native(self) -> Order:
        return self.with_null_handling(NullHandling.NATIVE)

    def nulls_first(self) -> Order:
        return self.with_null_handling(NullHandling.NULLS_FIRST)

    def nulls_last(self) -> Order:
        return self.with_null_handling(NullHandling.NULLS_LAST)


@dataclass(frozen=True)
class Sort:
    """Ordered collection of sort orders; the first order is the primary key."""

    orders: tuple[Order, ...] = ()

    @staticmethod
    def of(order: Order, *orders: Order) -> Sort:
        """Create a sort from one or more orders, kept in the given sequence."""
        return Sort(orders=(order, *orders))

    @staticmethod
    def by(*properties: str, direction: Direction = Direction.ASC) -> Sort:
        """Create a sort by properties sharing one direction (ascending by default)."""
        return Sort(orders=tuple(Order.by(p, direction) for p in properties))

    @staticmethod
    def unsorted() -> Sort:
        """No sorting."""
        return Sort()

    @property
    def is_empty(self) -> bool:
        return not self.orders

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)

    def and_(self, other: Sort) -> Sort:
        """Combine sorts, appending *other*'s orders after this sort's orders."""
        return Sort(orders=self.orders + other.orders)

    and_then = and_

    def descending(self) -> Sort:
        """Return same sort but all directions flipped to desc."""
        return Sort(orders=tuple(o.with_direction(Direction.DESC) for o in self.orders))

    def ascending(self) -> Sort:
        """Return same sort but all directions flipped to asc."""
        return Sort(orders=tuple(o.with_direction(Direction.ASC) for o in self.orders))


@dataclass(frozen=True)
class Pageable:
    """Pagination request: zero-based page number, size, and optional sort.

    ``sort=None`` means no sorting was requested, which is distinct from an
    explicit but empty :class:`Sort`.
    """

    page: int = 0
    size: int = 10
    sort: Sort | None = None

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")

    @staticmethod
    def of(page: int, size: int, sort: Sort | None = None) -> Pageable:
        """Create a pageable for the given page, size, and optional sort."""
        return Pageable(page=page, size=size, sort=sort)

    @property
    def offset(self) -> int:
        """Index of the first element of this page."""
        return self.page * self.size

    @property
    def is_sorted(self) -> bool:
        return self.sort is not None and not self.sort.is_empty

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def next(self) -> Pageable:
        """Return Pageable for next page."""
        return replace(self, page=self.page + 1)

    def previous(self) -> Pageable:
        """Return Pageable for previous page; the first page maps onto itself."""
        if self.page == 0:
            return self
        return replace(self, page=self.page - 1)

    def first(self) -> Pageable:
        """Return Pageable for the first page."""
        return replace(self, page=0)

    def previous_or_first(self) -> Pageable:
        return self.previous() if self.has_previous else self.first()
