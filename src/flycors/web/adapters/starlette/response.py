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
"""Applying CORS outcomes to Starlette responses."""

from __future__ import annotations

from collections.abc import Iterable

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import Response

from flycors.cors.actual import ActualRequestDecorator
from flycors.cors.headers import VARY
from flycors.cors.policy import CorsPolicy
from flycors.cors.preflight import PreflightResult
from flycors.web.adapters.starlette.request import StarletteRequestView


def apply_cors_headers(headers: MutableHeaders, pairs: Iterable[tuple[str, str]]) -> None:
    """Merge CORS header pairs into *headers*.

    ``Vary`` is appended to any value the application already set; every
    other CORS header replaces an existing one.
    """
    for name, value in pairs:
        if name == VARY:
            headers.add_vary_header(value)
        else:
            headers[name] = value


def preflight_response(result: PreflightResult) -> Response:
    """Bodiless response carrying a preflight outcome."""
    response = Response(status_code=result.status_code)
    apply_cors_headers(response.headers, result.headers)
    return response


def cors_response(response: Response, request: Request, policy: CorsPolicy) -> Response:
    """Decorate an application *response* to a non-preflight *request*.

    Returns *response* itself with CORS headers added, or a new bodiless 403
    when the request's origin is not allowed.
    """
    outcome = ActualRequestDecorator(policy).decorate(StarletteRequestView.from_request(request), response.status_code)
    if outcome.rejected:
        response = Response(status_code=outcome.status_code)
    apply_cors_headers(response.headers, outcome.headers)
    return response

