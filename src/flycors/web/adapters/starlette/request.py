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
"""StarletteRequestView — :class:`RequestView` over Starlette requests and ASGI scopes."""

from __future__ import annotations

from starlette.datastructures import Headers
from starlette.requests import Request
from starlette.types import Scope


class StarletteRequestView:
    """Exposes a Starlette request's method and headers to the CORS engine."""

    __slots__ = ("_headers", "_method")

    def __init__(self, method: str, headers: Headers) -> None:
        self._method = method.upper()
        self._headers = headers

    @classmethod
    def from_request(cls, request: Request) -> StarletteRequestView:
        return cls(request.method, request.headers)

    @classmethod
    def from_scope(cls, scope: Scope) -> StarletteRequestView:
        return cls(scope["method"], Headers(scope=scope))

    def method(self) -> str:
        return self._method

    def header(self, name: str) -> str | None:
        return self._headers.get(name)
