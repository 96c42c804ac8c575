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
"""CorsDecision — the outcome of evaluating one request against a policy."""

from __future__ import annotations

from dataclasses import dataclass

from flycors.cors.headers import (
    ACCESS_CONTROL_REQUEST_METHOD,
    ORIGIN,
    Headers,
    is_preflight,
    origin_headers,
    vary_required,
)
from flycors.cors.matching import is_method_allowed, is_origin_allowed, resolve_response_origin_value
from flycors.cors.policy import CorsPolicy
from flycors.web.ports.request import RequestView


@dataclass(frozen=True)
class CorsDecision:
    """Transient result of one evaluation. Never stored.

    Attributes:
        origin: The request's ``Origin`` header, trimmed (``""`` when absent or blank).
        method: The request method.
        is_preflight: ``OPTIONS`` with an origin.
        origin_permitted: Whether the policy admits ``origin``.
        resolved_origin_header_value: Value for ``Access-Control-Allow-Origin``.
        vary_required: Whether responses must carry ``Vary: Origin``.
        method_permitted: Whether ``Access-Control-Request-Method`` is allowed;
            ``None`` for requests that are not preflights.
    """

    origin: str
    method: str
    is_preflight: bool
    origin_permitted: bool
    resolved_origin_header_value: str
    vary_required: bool
    method_permitted: bool | None = None

    @property
    def is_cors_request(self) -> bool:
        return bool(self.origin)

    def headers(self, policy: CorsPolicy) -> Headers:
        """Origin headers for this decision; empty when the request has no origin."""
        if not self.is_cors_request:
            return []
        return origin_headers(
            policy,
            permitted=self.origin_permitted,
            origin_value=self.resolved_origin_header_value,
            vary=self.vary_required,
        )


def decide(policy: CorsPolicy, request: RequestView) -> CorsDecision:
    """Evaluate *request* against *policy* without building any headers."""
    origin = (request.header(ORIGIN) or "").strip()
    method = request.method().upper()
    preflight = is_preflight(method, origin)

    method_permitted: bool | None = None
    if preflight:
        method_permitted = is_method_allowed(policy, request.header(ACCESS_CONTROL_REQUEST_METHOD))

    return CorsDecision(
        origin=origin,
        method=method,
        is_preflight=preflight,
        origin_permitted=is_origin_allowed(policy, origin),
        resolved_origin_header_value=resolve_response_origin_value(policy, origin),
        vary_required=vary_required(policy),
        method_permitted=method_permitted,
    )
