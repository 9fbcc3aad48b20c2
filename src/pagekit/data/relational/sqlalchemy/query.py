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
"""Apply a Pageable to a SQLAlchemy ``Select``."""

from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy import Select, func, inspect
from sqlalchemy.sql.elements import ColumnElement

from pagekit.data.pageable import NullHandling, Order, Pageable, Sort

S = TypeVar("S", bound=Select[Any])


def _order_clause(model: type[Any], order: Order) -> ColumnElement[Any]:
    # Only mapped column attributes; anything else on the class is not sortable.
    if order.property not in inspect(model).column_attrs:
        raise ValueError(f"{model.__name__} has no attribute '{order.property}' to sort by")
    column = getattr(model, order.property)
    expr = func.lower(column) if order.ignore_case else column
    clause = expr.asc() if order.is_ascending else expr.desc()
    if order.null_handling is NullHandling.NULLS_FIRST:
        return clause.nulls_first()
    if order.null_handling is NullHandling.NULLS_LAST:
        return clause.nulls_last()
    return clause


def apply_sort(stmt: S, model: type[Any], sort: Sort | None) -> S:
    """Apply sort orders to a SELECT statement, primary key first.

    Raises:
        ValueError: If an order names an attribute the model does not have.
    """
    if sort is None:
        return stmt
    for order in sort.orders:
        stmt = stmt.order_by(_order_clause(model, order))
    return stmt


def apply_pageable(stmt: S, model: type[Any], pageable: Pageable) -> S:
    """Apply sort, offset and limit from *pageable* to a SELECT statement."""
    stmt = apply_sort(stmt, model, pageable.sort)
    return stmt.offset(pageable.offset).limit(pageable.size)
