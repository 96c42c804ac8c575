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
"""Starlette adapter for flycors."""

from flycors.web.adapters.starlette.cors_filter import CorsFilter
from flycors.web.adapters.starlette.middleware import CorsMiddleware
from flycors.web.adapters.starlette.request import StarletteRequestView
from flycors.web.adapters.starlette.response import apply_cors_headers, cors_response, preflight_response
from flycors.web.adapters.starlette.router import options_route, register_options_handler

__all__ = [
    "CorsFilter",
    "CorsMiddleware",
    "StarletteRequestView",
    "apply_cors_headers",
    "cors_response",
    "options_route",
    "preflight_response",
    "register_options_handler",
]
