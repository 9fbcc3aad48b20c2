"""PageKit — pagination requests, sort parsing and paginated results."""

from pagekit.data import (
    Direction,
    NullHandling,
    Order,
    Page,
    Pageable,
    PageableParser,
    Sort,
    parse_sort_clause,
)

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "NullHandling",
    "Order",
    "Page",
    "Pageable",
    "PageableParser",
    "Sort",
    "__version__",
    "parse_sort_clause",
]
