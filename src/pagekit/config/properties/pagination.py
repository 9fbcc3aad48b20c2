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
"""Pagination parser configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pagekit.core.config import config_properties


@config_properties(prefix="pagekit.pagination")
class ParserProperties(BaseModel):
    """Parameter names and defaults used by the pageable parser (pagekit.pagination.*)."""

    model_config = ConfigDict(frozen=True)

    page_param: str = Field(default="page", min_length=1)
    size_param: str = Field(default="size", min_length=1)
    sort_param: str = Field(default="sort", min_length=1)
    default_page: int = Field(default=0, ge=0)
    default_size: int = Field(default=10, ge=1)
