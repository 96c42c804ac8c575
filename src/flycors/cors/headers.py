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
"""Assembly of the CORS response headers for one request."""

from __future__ import annotations

from flycors.cors.matching import is_origin_allowed, resolve_response_origin_value
from flycors.cors.policy import CorsPolicy

# Request headers
ORIGIN = "Origin"
ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"

# Response headers
ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"
VARY = "Vary"

OPTIONS = "OPTIONS"

Headers = list[tuple[str, str]]


def is_preflight(method: str | None, origin: str | None) -> bool:
    """An ``OPTIONS`` request that carries a non-blank ``Origin`` header."""
    return bool((origin or "").strip()) and (method or "").upper() == OPTIONS


def vary_required(policy: CorsPolicy) -> bool:
    """Responses depend on the request origin only for explicit origin lists."""
    return policy.allowed_origins.is_explicit


def build_cors_headers(policy: CorsPolicy, request_method: str | None, request_origin: str | None) -> Headers:
    """Build the ordered CORS headers for a request.

    Returns an empty list when the request carries no origin. Otherwise:

    1. ``Access-Control-Allow-Origin`` and ``Access-Control-Allow-Credentials``
       if the origin is allowed;
    2. ``Vary: Origin`` for explicit origin lists, allowed or not;
    3. for preflights only, ``Access-Control-Max-Age`` (when configured),
       ``Access-Control-Allow-Methods`` and ``Access-Control-Allow-Headers``,
       advertised as configured.
    """
    headers = build_origin_headers(policy, request_origin)
    if is_preflight(request_method, request_origin):
        headers.extend(build_preflight_headers(policy))
    return headers


def build_origin_headers(policy: CorsPolicy, request_origin: str | None) -> Headers:
    """The origin part of :func:`build_cors_headers`, shared by every request kind."""
    if not (request_origin or "").strip():
        return []
    return origin_headers(
        policy,
        permitted=is_origin_allowed(policy, request_origin),
        origin_value=resolve_response_origin_value(policy, request_origin),
        vary=vary_required(policy),
    )


def origin_headers(policy: CorsPolicy, *, permitted: bool, origin_value: str, vary: bool) -> Headers:
    """Origin headers for an origin already checked against *policy*."""
    headers: Headers = []
    if permitted:
        headers.append((ACCESS_CONTROL_ALLOW_ORIGIN, origin_value))
        headers.append((ACCESS_CONTROL_ALLOW_CREDENTIALS, "true" if policy.allow_credentials else "false"))
    if vary:
        headers.append((VARY, ORIGIN))
    return headers


def build_preflight_headers(policy: CorsPolicy) -> Headers:
    """Headers only preflight answers carry, in wire order."""
    headers: Headers = []
    if policy.max_age is not None:
        headers.append((ACCESS_CONTROL_MAX_AGE, str(policy.max_age)))
    headers.append((ACCESS_CONTROL_ALLOW_METHODS, policy.allowed_methods.header_value))
    headers.append((ACCESS_CONTROL_ALLOW_HEADERS, policy.allowed_headers))
    return headers
