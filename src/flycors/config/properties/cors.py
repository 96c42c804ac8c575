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
"""CORS configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from flycors.core.config import config_properties
from flycors.cors.policy import ALL_HEADERS, ALL_METHODS, NO_ORIGINS, CorsPolicy


@config_properties(prefix="flycors.cors")
@dataclass
class CorsProperties:
    """Configuration for CORS handling (flycors.cors.*).

    Origins default to ``"null"``: nothing is shared cross-origin until
    origins are configured.
    """

    allowed_origins: str = NO_ORIGINS
    allowed_methods: str = ALL_METHODS
    allowed_headers: str = ALL_HEADERS
    allow_credentials: bool = False
    max_age: int | None = None
    url_patterns: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(default_factory=list)

    def to_policy(self) -> CorsPolicy:
        return CorsPolicy.from_values(
            allowed_origins=self.allowed_origins,
            allowed_methods=self.allowed_methods,
            allowed_headers=self.allowed_headers,
            allow_credentials=self.allow_credentials,
            max_age=self.max_age,
        )
