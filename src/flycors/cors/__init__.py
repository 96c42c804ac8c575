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
"""flycors CORS engine — pure, framework-agnostic CORS decisions.

Parse configuration into a :class:`CorsPolicy` once, then answer preflights
with :class:`PreflightEvaluator` and decorate other responses with
:class:`ActualRequestDecorator`.
"""

from flycors.cors.actual import ActualRequestDecorator, DecoratedResponse, decorate_response
from flycors.cors.decision import CorsDecision, decide
from flycors.cors.headers import (
    ACCESS_CONTROL_ALLOW_CREDENTIALS,
    ACCESS_CONTROL_ALLOW_HEADERS,
    ACCESS_CONTROL_ALLOW_METHODS,
    ACCESS_CONTROL_ALLOW_ORIGIN,
    ACCESS_CONTROL_MAX_AGE,
    ACCESS_CONTROL_REQUEST_METHOD,
    ORIGIN,
    VARY,
    build_cors_headers,
    build_origin_headers,
    build_preflight_headers,
    is_preflight,
    origin_headers,
)
from flycors.cors.matching import is_method_allowed, is_origin_allowed, resolve_response_origin_value
from flycors.cors.policy import (
    ALL_HEADERS,
    ALL_METHODS,
    ALL_ORIGINS,
    NO_ORIGINS,
    CorsPolicy,
    MethodRule,
    OriginKind,
    OriginRule,
)
from flycors.cors.preflight import PreflightEvaluator, PreflightResult, evaluate_preflight

__all__ = [
    "ACCESS_CONTROL_ALLOW_CREDENTIALS",
    "ACCESS_CONTROL_ALLOW_HEADERS",
    "ACCESS_CONTROL_ALLOW_METHODS",
    "ACCESS_CONTROL_ALLOW_ORIGIN",
    "ACCESS_CONTROL_MAX_AGE",
    "ACCESS_CONTROL_REQUEST_METHOD",
    "ALL_HEADERS",
    "ALL_METHODS",
    "ALL_ORIGINS",
    "NO_ORIGINS",
    "ORIGIN",
    "VARY",
    "ActualRequestDecorator",
    "CorsDecision",
    "CorsPolicy",
    "DecoratedResponse",
    "MethodRule",
    "OriginKind",
    "OriginRule",
    "PreflightEvaluator",
    "PreflightResult",
    "build_cors_headers",
    "build_origin_headers",
    "build_preflight_headers",
    "decide",
    "decorate_response",
    "evaluate_preflight",
    "is_method_allowed",
    "is_origin_allowed",
    "is_preflight",
    "origin_headers",
    "resolve_response_origin_value",
]
