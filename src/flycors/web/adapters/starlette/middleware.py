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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from flycors.cors.actual import ActualRequestDecorator
from flycors.cors.headers import ORIGIN, is_preflight
from flycors.cors.policy import CorsPolicy
from flycors.cors.preflight import PreflightEvaluator
from flycors.web.adapters.starlette.request import StarletteRequestView
from flycors.web.adapters.starlette.response import apply_cors_headers, preflight_response


class CorsMiddleware:
    """Answers CORS preflights and decorates every other HTTP response.

    Uses the raw ASGI protocol instead of ``BaseHTTPMiddleware`` so streaming
    responses pass through untouched. When the request's origin is rejected
    the downstream status is rewritten to 403 and its body is discarded.

    Usage:
        app = Starlette(
            routes=routes,
            middleware=[Middleware(CorsMiddleware, policy=CorsPolicy.from_values("https://app.example.com"))],
        )
    """

    def __init__(self, app: ASGIApp, policy: CorsPolicy | None = None) -> None:
        self.app = app
        self._policy = policy or CorsPolicy()
        self._preflight = PreflightEvaluator(self._policy)
        self._decorator = ActualRequestDecorator(self._policy)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        view = StarletteRequestView.from_scope(scope)
        if is_preflight(view.method(), view.header(ORIGIN)):
            response = preflight_response(self._preflight.evaluate(view))
            await response(scope, receive, send)
            return

        rejected = False

        async def send_with_cors(message: Message) -> None:
            nonlocal rejected
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                outcome = self._decorator.decorate(view, message["status"])
                headers = MutableHeaders(scope=message)
                if outcome.rejected:
                    rejected = True
                    message["status"] = outcome.status_code
                    del headers["content-type"]
                    headers["content-length"] = "0"
                apply_cors_headers(headers, outcome.headers)
                await send(message)
            elif rejected:
                await _drain(message, send)
            else:
                await send(message)

        await self.app(scope, receive, send_with_cors)


async def _drain(message: Any, send: Send) -> None:
    """Swallow body chunks of a rejected response, closing it with an empty one."""
    if message["type"] == "http.response.pathsend" or (
        message["type"] == "http.response.body" and not message.get("more_body", False)
    ):
        await send({"type": "http.response.body", "body": b"", "more_body": False})
