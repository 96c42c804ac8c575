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
"""flycors web layer — request views and filter ports.

Framework adapters live under :mod:`flycors.web.adapters` and are imported
explicitly, e.g. ``from flycors.web.adapters.starlette import CorsMiddleware``.
"""

from flycors.web.ports.filter import WebFilter
from flycors.web.ports.request import RequestView
from flycors.web.request import HttpRequestView

__all__ = ["HttpRequestView", "RequestView", "WebFilter"]
