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
"""Exception handler turning pagination errors into structured 400 responses."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse

from pagekit.kernel.exceptions import PaginationException


async def pagination_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a :class:`PaginationException` as a JSON error body.

    Register with ``Starlette(exception_handlers={PaginationException: pagination_exception_handler})``.
    """
    if not isinstance(exc, PaginationException):
        raise exc
    transaction_id = getattr(request.state, "transaction_id", str(uuid.uuid4()))
    body: dict[str, Any] = {
        "error": {
            "message": str(exc),
            "code": exc.code or type(exc).__name__,
            "transaction_id": transaction_id,
            "timestamp": datetime.now(UTC).isoformat(),
            "status": 400,
            "path": request.url.path,
        }
    }
    if exc.context:
        body["error"]["context"] = exc.context
    return JSONResponse(body, status_code=400)
