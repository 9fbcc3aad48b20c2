"""PageKit Web — Starlette request binding for pagination parameters."""

from pagekit.web.errors import pagination_exception_handler
from pagekit.web.resolver import PageableResolver, query_multimap

__all__ = ["PageableResolver", "pagination_exception_handler", "query_multimap"]
