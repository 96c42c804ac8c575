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
"""CorsFilter — WebFilter answering preflights and decorating responses."""

from __future__ import annotations

from collections.abc import Sequence
from fnmatch import fnmatch

from starlette.requests import Request
from starlette.responses import Response

from flycors.config.properties.cors import CorsProperties
from flycors.cors.actual import ActualRequestDecorator
from flycors.cors.headers import ORIGIN, is_preflight
from flycors.cors.policy import CorsPolicy
from flycors.cors.preflight import PreflightEvaluator
from flycors.web.adapters.starlette.request import StarletteRequestView
from flycors.web.adapters.starlette.response import apply_cors_headers, preflight_response
from flycors.web.ports.filter import CallNext


class CorsFilter:
    """Applies one :class:`CorsPolicy` to the requests it is scoped to.

    Preflights (``OPTIONS`` with an ``Origin``) are answered directly and
    never reach ``call_next``. Other requests run downstream and their
    response is decorated, or replaced by a bodiless 403 when the origin is
    not allowed.

    Attributes:
        url_patterns: Glob patterns this filter applies to; empty means all paths.
        exclude_patterns: Glob patterns skipped even if ``url_patterns`` match.
    """

    def __init__(
        self,
        policy: CorsPolicy,
        url_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        self._preflight = PreflightEvaluator(policy)
        self._decorator = ActualRequestDecorator(policy)
        self.url_patterns = list(url_patterns)
        self.exclude_patterns = list(exclude_patterns)

    @classmethod
    def from_properties(cls, props: CorsProperties) -> CorsFilter:
        return cls(props.to_policy(), props.url_patterns, props.exclude_patterns)

    @property
    def policy(self) -> CorsPolicy:
        return self._preflight.policy

    def should_not_filter(self, request: Request) -> bool:
        path = request.url.path
        if self.url_patterns and not any(fnmatch(path, p) for p in self.url_patterns):
            return True
        return any(fnmatch(path, p) for p in self.exclude_patterns)

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        view = StarletteRequestView.from_request(request)
        if is_preflight(view.method(), view.header(ORIGIN)):
            return preflight_response(self._preflight.evaluate(view))

        response: Response = await call_next(request)
        outcome = self._decorator.decorate(view, response.status_code)
        if outcome.rejected:
            response = Response(status_code=outcome.status_code)
        apply_cors_headers(response.headers, outcome.headers)
        return response
