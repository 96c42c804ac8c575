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
"""ActualRequestDecorator — CORS headers for non-preflight responses.

A request from an origin the policy does not admit gets its response
replaced by a bodiless 403. Every other response keeps its status and body
and gains the origin headers (``Access-Control-Allow-Origin``,
``Access-Control-Allow-Credentials``, ``Vary``). Preflight-only headers are
never added here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from flycors.cors.decision import decide
from flycors.cors.headers import Headers
from flycors.cors.policy import CorsPolicy
from flycors.web.ports.request import RequestView

logger = structlog.get_logger("flycors.cors")

FORBIDDEN = 403


@dataclass(frozen=True)
class DecoratedResponse:
    """What to send instead of the application's bare response.

    Attributes:
        status_code: The application's status, or 403 for a rejected origin.
        headers: CORS headers to merge into the response.
        body_allowed: ``False`` when the application's body must be dropped.
    """

    status_code: int
    headers: Headers = field(default_factory=list)
    body_allowed: bool = True

    @property
    def rejected(self) -> bool:
        return not self.body_allowed


class ActualRequestDecorator:
    """Decorates application responses to simple/actual CORS requests."""

    def __init__(self, policy: CorsPolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> CorsPolicy:
        return self._policy

    def decorate(self, request: RequestView, status_code: int) -> DecoratedResponse:
        decision = decide(self._policy, request)
        headers = decision.headers(self._policy)

        if decision.is_cors_request and not decision.origin_permitted:
            logger.debug(
                "cors_request_rejected",
                origin=decision.origin,
                method=decision.method,
                original_status=status_code,
            )
            return DecoratedResponse(FORBIDDEN, headers, body_allowed=False)

        return DecoratedResponse(status_code, headers)


def decorate_response(policy: CorsPolicy, request: RequestView, status_code: int) -> DecoratedResponse:
    """Shorthand for ``ActualRequestDecorator(policy).decorate(request, status_code)``."""
    return ActualRequestDecorator(policy).decorate(request, status_code)
