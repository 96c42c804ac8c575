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
"""Catch-all ``OPTIONS`` route answering CORS preflights.

An alternative to :class:`CorsMiddleware` for applications that only want
preflights handled by routing and decorate their responses themselves with
:func:`cors_response`.
"""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route, Router

from flycors.cors.policy import CorsPolicy
from flycors.cors.preflight import PreflightEvaluator
from flycors.web.adapters.starlette.request import StarletteRequestView
from flycors.web.adapters.starlette.response import preflight_response

CATCH_ALL_PATH = "/{path:path}"


def options_route(policy: CorsPolicy, path: str = CATCH_ALL_PATH) -> Route:
    """Build an ``OPTIONS`` route evaluating every request as a preflight.

    A plain ``OPTIONS`` request without an ``Origin`` is answered with 403,
    like any preflight from a missing origin.
    """
    evaluator = PreflightEvaluator(policy)

    async def handle_options(request: Request) -> Response:
        return preflight_response(evaluator.evaluate(StarletteRequestView.from_request(request)))

    return Route(path, handle_options, methods=["OPTIONS"], name="cors_preflight", include_in_schema=False)


def register_options_handler(router: Router, policy: CorsPolicy, path: str = CATCH_ALL_PATH) -> Route:
    """Append :func:`options_route` to *router* (a ``Router`` or ``Starlette`` app).

    Routes registered earlier for the same path and ``OPTIONS`` still win.
    """
    route = options_route(policy, path)
    router.routes.append(route)
    return route
