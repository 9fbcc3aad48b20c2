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
"""Tests for applying a Pageable to a SQLAlchemy SELECT."""

from __future__ import annotations

import pytest
from sqlalchemy import Integer, String, select
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from pagekit.data.pageable import Order, Pageable, Sort
from pagekit.data.parser import PageableParser
from pagekit.data.relational.sqlalchemy import apply_pageable, apply_sort


class _Base(DeclarativeBase):
    pass


class Customer(_Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}))


class TestApplySort:
    def test_none_sort_leaves_statement(self) -> None:
        stmt = select(Customer)
        assert apply_sort(stmt, Customer, None) is stmt

    def test_orders_in_sequence(self) -> None:
        sort = Sort.of(Order.desc("name"), Order.asc("id"))
        sql = _sql(apply_sort(select(Customer), Customer, sort))
        assert "ORDER BY customers.name DESC, customers.id ASC" in sql

    def test_ignore_case_lowers_column(self) -> None:
        sql = _sql(apply_sort(select(Customer), Customer, Sort.of(Order.asc("name").ignoring_case())))
        assert "ORDER BY lower(customers.name) ASC" in sql

    def test_null_handling(self) -> None:
        sort = Sort.of(Order.asc("city").nulls_first(), Order.desc("name").nulls_last())
        sql = _sql(apply_sort(select(Customer), Customer, sort))
        assert "customers.city ASC NULLS FIRST" in sql
        assert "customers.name DESC NULLS LAST" in sql

    @pytest.mark.parametrize("prop", ["missing", "__init__", "__tablename__", "metadata", "registry", "__table__"])
    def test_non_column_property_rejected(self, prop: str) -> None:
        with pytest.raises(ValueError, match=f"no attribute '{prop}'"):
            apply_sort(select(Customer), Customer, Sort.by(prop))

    def test_parsed_internal_attribute_rejected(self) -> None:
        pageable = PageableParser.default().parse({"sort": ["__init__"]})
        with pytest.raises(ValueError):
            apply_pageable(select(Customer), Customer, pageable)


class TestApplyPageable:
    def test_offset_and_limit(self) -> None:
        sql = _sql(apply_pageable(select(Customer), Customer, Pageable.of(2, 25, Sort.by("name"))))
        assert "ORDER BY customers.name ASC" in sql
        assert "LIMIT 25" in sql
        assert "OFFSET 50" in sql

    def test_unsorted(self) -> None:
        sql = _sql(apply_pageable(select(Customer), Customer, Pageable.of(0, 10)))
        assert "ORDER BY" not in sql
        assert "LIMIT 10" in sql
