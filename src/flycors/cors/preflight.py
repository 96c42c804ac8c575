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
"""PreflightEvaluator — answers CORS ``OPTIONS`` preflight requests.

Checks run in a fixed order and the first failure is terminal:

1. missing or disallowed origin  -> 403, no headers
2. missing or disallowed method  -> 405, no headers
3. otherwise                     -> 204 with the full CORS header set

A disallowed origin is therefore always reported as 403, whatever method
was requested.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from flycors.cors.decision import decide
from flycors.cors.headers import ACCESS_CONTROL_REQUEST_METHOD, Headers, build_preflight_headers
from flycors.cors.policy import CorsPolicy
from flycors.web.ports.request import RequestView

logger = structlog.get_logger("flycors.cors")

NO_CONTENT = 204
FORBIDDEN = 403
METHOD_NOT_ALLOWED = 405


@dataclass(frozen=True)
class PreflightResult:
    """Terminal status and headers for a preflight response (always bodiless)."""

    status_code: int
    headers: Headers = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.status_code == NO_CONTENT


class PreflightEvaluator:
    """Evaluates preflight requests against one policy.

    Stateless apart from the shared, immutable policy, so a single instance
    can serve concurrent requests.
    """

    def __init__(self, policy: CorsPolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> CorsPolicy:
        return self._policy

    def evaluate(self, request: RequestView) -> PreflightResult:
        decision = decide(self._policy, request)

        if not decision.origin_permitted:
            logger.debug("cors_preflight_rejected", reason="origin", origin=decision.origin or None)
            return PreflightResult(FORBIDDEN)

        if not decision.method_permitted:
            logger.debug(
                "cors_preflight_rejected",
                reason="method",
                origin=decision.origin,
                requested_method=request.header(ACCESS_CONTROL_REQUEST_METHOD),
            )
            return PreflightResult(METHOD_NOT_ALLOWED)

        logger.debug("cors_preflight_accepted", origin=decision.origin)
        return PreflightResult(NO_CONTENT, decision.headers(self._policy) + build_preflight_headers(self._policy))


def evaluate_preflight(policy: CorsPolicy, request: RequestView) -> PreflightResult:
    """Shorthand for ``PreflightEvaluator(policy).evaluate(request)``."""
    return PreflightEvaluator(policy).evaluate(request)
