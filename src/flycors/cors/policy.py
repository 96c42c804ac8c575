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
"""CORS policy — the immutable description of what a route allows.

Configured values arrive as comma/whitespace separated strings (or sequences
of strings) and are parsed exactly once, here. The sentinels ``"*"`` and
``"null"`` become :class:`OriginKind` members so that matching never compares
raw strings again.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from flycors.kernel.exceptions import InvalidCorsPolicyException

logger = structlog.get_logger("flycors.cors")

ALL_ORIGINS = "*"
ALL_METHODS = "*"
ALL_HEADERS = "*"
NO_ORIGINS = "null"

_WHITESPACE_RE = re.compile(r"\s+")


class OriginKind(enum.Enum):
    """How a policy treats request origins."""

    WILDCARD = "wildcard"
    DENY_ALL = "deny_all"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class OriginRule:
    """Parsed ``allowed_origins`` value.

    Attributes:
        kind: Wildcard, deny-all or an explicit list.
        origins: Lower-cased, trimmed origins (empty unless ``kind`` is EXPLICIT).
        raw: The configured text, kept for diagnostics.
    """

    kind: OriginKind
    origins: frozenset[str] = frozenset()
    raw: str = NO_ORIGINS

    @classmethod
    def parse(cls, value: str | Sequence[str]) -> OriginRule:
        raw = _join(value, "allowed_origins")
        compact = raw.strip()
        if not compact or compact.lower() == NO_ORIGINS:
            return cls(OriginKind.DENY_ALL, raw=NO_ORIGINS)
        if compact == ALL_ORIGINS:
            return cls(OriginKind.WILDCARD, raw=ALL_ORIGINS)

        origins = frozenset(_split(raw.lower()))
        if not origins:
            return cls(OriginKind.DENY_ALL, raw=NO_ORIGINS)
        return cls(OriginKind.EXPLICIT, origins=origins, raw=raw)

    @property
    def is_wildcard(self) -> bool:
        return self.kind is OriginKind.WILDCARD

    @property
    def is_deny_all(self) -> bool:
        return self.kind is OriginKind.DENY_ALL

    @property
    def is_explicit(self) -> bool:
        return self.kind is OriginKind.EXPLICIT


@dataclass(frozen=True)
class MethodRule:
    """Parsed ``allowed_methods`` value.

    Attributes:
        wildcard: ``True`` when every method is allowed.
        methods: Upper-cased method tokens.
        header_value: Text advertised in ``Access-Control-Allow-Methods``.
    """

    wildcard: bool = False
    methods: frozenset[str] = frozenset()
    header_value: str = ""

    @classmethod
    def parse(cls, value: str | Sequence[str]) -> MethodRule:
        normalized = _WHITESPACE_RE.sub("", _join(value, "allowed_methods").upper())
        if normalized == ALL_METHODS:
            return cls(wildcard=True, header_value=ALL_METHODS)
        return cls(methods=frozenset(_split(normalized)), header_value=normalized)

    @property
    def is_empty(self) -> bool:
        return not self.wildcard and not self.methods


@dataclass(frozen=True)
class CorsPolicy:
    """Immutable CORS access policy, shared read-only by every request of a route.

    Build it with :meth:`from_values` from configuration strings; the
    dataclass fields hold the already-parsed rules.
    """

    allowed_origins: OriginRule = field(default_factory=lambda: OriginRule(OriginKind.DENY_ALL))
    allowed_methods: MethodRule = field(default_factory=lambda: MethodRule(wildcard=True, header_value=ALL_METHODS))
    allowed_headers: str = ALL_HEADERS
    allow_credentials: bool = False
    max_age: int | None = None

    def __post_init__(self) -> None:
        if self.max_age is not None:
            if isinstance(self.max_age, bool) or not isinstance(self.max_age, int):
                raise InvalidCorsPolicyException(
                    f"max_age must be an integer number of seconds, got {self.max_age!r}",
                    context={"max_age": self.max_age},
                )
            if self.max_age < 0:
                raise InvalidCorsPolicyException(
                    f"max_age must not be negative, got {self.max_age}",
                    context={"max_age": self.max_age},
                )
        if self.allow_credentials and self.allowed_origins.is_wildcard:
            logger.warning(
                "cors_credentials_with_wildcard_origins",
                detail="request origins will be echoed back; prefer an explicit origin list",
            )

    @classmethod
    def from_values(
        cls,
        allowed_origins: str | Sequence[str] = NO_ORIGINS,
        allowed_methods: str | Sequence[str] = ALL_METHODS,
        allowed_headers: str | Sequence[str] = ALL_HEADERS,
        allow_credentials: bool = False,
        max_age: int | None = None,
    ) -> CorsPolicy:
        """Parse configured values into a policy.

        An empty ``allowed_origins`` denies every origin. ``allowed_headers``
        is advertised as given (sequences are joined with commas).
        """
        return cls(
            allowed_origins=OriginRule.parse(allowed_origins),
            allowed_methods=MethodRule.parse(allowed_methods),
            allowed_headers=_join(allowed_headers, "allowed_headers"),
            allow_credentials=bool(allow_credentials),
            max_age=max_age,
        )


def _join(value: str | Sequence[str], name: str) -> str:
    if isinstance(value, str):
        return value
    if not isinstance(value, Sequence):
        raise InvalidCorsPolicyException(
            f"{name} must be a string or a sequence of strings, got {value!r}",
            context={name: value},
        )
    items = list(value)
    for item in items:
        if not isinstance(item, str):
            raise InvalidCorsPolicyException(
                f"{name} entries must be strings, got {item!r}",
                context={name: items},
            )
    return ",".join(items)


def _split(value: str) -> list[str]:
    """Split a comma separated list, dropping whitespace and empty entries."""
    return [token for token in (_WHITESPACE_RE.sub("", part) for part in value.split(",")) if token]
