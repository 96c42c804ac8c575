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
"""HttpRequestView — an owned, framework-free :class:`RequestView`."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class HttpRequestView:
    """Snapshot of a request's method and headers.

    Header names are stored lower-cased; when a name repeats, the first
    value wins.

    Usage:
        view = HttpRequestView.of("OPTIONS", {"Origin": "https://app.example.com"})
        view.header("origin")  # "https://app.example.com"
    """

    request_method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "request_method", self.request_method.upper())
        object.__setattr__(self, "headers", _lower_keys(self.headers.items()))

    @classmethod
    def of(
        cls,
        method: str,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> HttpRequestView:
        items = headers.items() if isinstance(headers, Mapping) else (headers or ())
        return cls(request_method=method, headers=_lower_keys(items))

    def method(self) -> str:
        return self.request_method

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())


def _lower_keys(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    normalized: dict[str, str] = {}
    for name, value in items:
        normalized.setdefault(name.lower(), value)
    return normalized
