"""PageKit Data — pagination request and result types.

Framework-agnostic types (Pageable, Sort, Page, PageableParser) are
exported directly. Store bindings live in
``pagekit.data.document.mongodb`` and ``pagekit.data.relational.sqlalchemy``.
"""

from pagekit.data.page import Page
from pagekit.data.pageable import (
    Direction,
    NullHandling,
    Order,
    Pageable,
    Sort,
    must_parse_direction,
    must_parse_null_handling,
)
from pagekit.data.parser import PageableParser, parse_sort_clause

__all__ = [
    "Direction",
    "NullHandling",
    "Order",
    "Page",
    "Pageable",
    "PageableParser",
    "Sort",
    "must_parse_direction",
    "must_parse_null_handling",
    "parse_sort_clause",
]
