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
"""RequestView protocol — the read-only request surface the CORS engine consumes.

Adapters wrap vendor request objects (e.g. Starlette) at the boundary so the
engine never imports an HTTP framework.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RequestView(Protocol):
    """Method and header lookup of an incoming HTTP request."""

    def method(self) -> str:
        """The request method token, e.g. ``"OPTIONS"``."""
        ...

    def header(self, name: str) -> str | None:
        """The value of header *name* (case-insensitive), or ``None`` if absent."""
        ...
