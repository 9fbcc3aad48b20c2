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
"""Apply a Pageable to a MongoDB cursor.

Works with anything exposing pymongo's chainable ``skip``/``limit``/``sort``
cursor API (pymongo ``Cursor``, motor ``AsyncIOMotorCursor``, Beanie
``FindMany``). MongoDB has no per-order case folding or null placement
switch, so ``Order.ignore_case`` and ``Order.null_handling`` are not applied.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import pymongo

from pagekit.data.pageable import Pageable, Sort

logger = logging.getLogger(__name__)

C = TypeVar("C")


def build_sort(sort: Sort | None) -> list[tuple[str, int]]:
    """Build a pymongo sort specification, primary key first."""
    if sort is None:
        return []
    return [
        (order.property, pymongo.ASCENDING if order.is_ascending else pymongo.DESCENDING)
        for order in sort.orders
    ]


def apply_pageable(pageable: Pageable, cursor: C) -> C:
    """Return *cursor* skipped to the page offset, limited to the page size and sorted."""
    query: Any = cursor.skip(pageable.offset).limit(pageable.size)  # type: ignore[attr-defined]
    sort_spec = build_sort(pageable.sort)
    if sort_spec:
        query = query.sort(sort_spec)
    logger.debug("Applied pageable to cursor: skip=%d limit=%d sort=%s", pageable.offset, pageable.size, sort_spec)
    return query
