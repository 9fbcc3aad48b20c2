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
"""Tests for resolving a Pageable from Starlette requests."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from pagekit.data.page import Page
from pagekit.data.pageable import Order, Pageable, Sort
from pagekit.data.parser import PageableParser
from pagekit.kernel.exceptions import PaginationException
from pagekit.web import PageableResolver, pagination_exception_handler, query_multimap

ITEMS = [{"id": i} for i in range(23)]


def _request(query: bytes) -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "query_string": query, "headers": []})


def _app(resolver: PageableResolver) -> Starlette:
    async def list_items(request: Request) -> JSONResponse:
        pageable = resolver.resolve(request)
        content = ITEMS[pageable.offset : pageable.offset + pageable.size]
        return JSONResponse(Page.of(content, pageable, len(ITEMS)).to_dict())

    return Starlette(
        routes=[Route("/items", list_items)],
        exception_handlers={PaginationException: pagination_exception_handler},
    )


class TestQueryMultimap:
    def test_repeated_values_keep_order(self) -> None:
        params = query_multimap(_request(b"sort=b&page=1&sort=a,desc"))
        assert params == {"sort": ["b", "a,desc"], "page": ["1"]}

    def test_blank_values_kept(self) -> None:
        assert query_multimap(_request(b"sort=")) == {"sort": [""]}


class TestPageableResolver:
    def test_resolve_defaults(self) -> None:
        assert PageableResolver().resolve(_request(b"")) == Pageable(0, 10)

    def test_resolve_full_query(self) -> None:
        pageable = PageableResolver().resolve(_request(b"page=2&size=5&sort=name,desc&sort=id"))
        assert pageable == Pageable(2, 5, Sort.of(Order.desc("name"), Order.asc("id")))

    def test_resolve_with_custom_parser(self) -> None:
        resolver = PageableResolver(PageableParser(page_param="p", size_param="limit"))
        assert resolver.resolve(_request(b"p=1&limit=3")) == Pageable(1, 3)


class TestStarletteIntegration:
    def test_paginated_endpoint(self) -> None:
        client = TestClient(_app(PageableResolver()))
        response = client.get("/items", params={"page": "2", "size": "10"})
        assert response.status_code == 200
        body = response.json()
        assert body["number"] == 2
        assert body["totalPages"] == 3
        assert body["totalElements"] == 23
        assert [item["id"] for item in body["content"]] == [20, 21, 22]

    def test_invalid_parameter_returns_400(self) -> None:
        client = TestClient(_app(PageableResolver()))
        response = client.get("/items?size=0")
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "PAGINATION_INVALID_SIZE"
        assert error["status"] == 400
        assert error["path"] == "/items"
        assert error["context"] == {"param": "size", "value": "0"}

    def test_repeated_page_returns_400(self) -> None:
        client = TestClient(_app(PageableResolver()))
        response = client.get("/items?page=1&page=2")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "PAGINATION_WRONG_PAGE_COUNT"

    def test_invalid_direction_returns_400(self) -> None:
        client = TestClient(_app(PageableResolver()))
        response = client.get("/items?sort=name,sideways")
        assert response.json()["error"]["code"] == "PAGINATION_INVALID_DIRECTION"
