"""MongoDB binding for Pageable."""

from pagekit.data.document.mongodb.query import apply_pageable, build_sort

__all__ = ["apply_pageable", "build_sort"]
