"""SQLAlchemy binding for Pageable."""

from pagekit.data.relational.sqlalchemy.query import apply_pageable, apply_sort

__all__ = ["apply_pageable", "apply_sort"]
