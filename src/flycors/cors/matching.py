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
"""Origin and method matching against a :class:`CorsPolicy`.

Both matchers are pure: they read the policy and the request value and
never raise. Anything they cannot make sense of is simply not allowed.
"""

from __future__ import annotations

import re

from flycors.cors.policy import NO_ORIGINS, CorsPolicy

_WHITESPACE_RE = re.compile(r"\s+")


def is_origin_allowed(policy: CorsPolicy, origin: str | None) -> bool:
    """Return ``True`` if *origin* may access resources under *policy*.

    Explicit lists match whole entries only, case-insensitively:
    ``http://a.com`` never admits ``http://a.com.evil.com``.
    """
    candidate = (origin or "").strip().lower()
    if not candidate:
        return False

    rule = policy.allowed_origins
    if rule.is_deny_all:
        return False
    if rule.is_wildcard:
        return True
    return candidate in rule.origins


def resolve_response_origin_value(policy: CorsPolicy, origin: str | None) -> str:
    """Value for ``Access-Control-Allow-Origin``.

    Browsers accept a single origin only, so an allowed request origin is
    echoed back unchanged (also under a wildcard policy, which keeps
    credentialed responses valid). Anything else resolves to ``"null"``.
    """
    if origin and is_origin_allowed(policy, origin):
        return origin.strip()
    return NO_ORIGINS


def is_method_allowed(policy: CorsPolicy, requested_methods: str | None) -> bool:
    """Return ``True`` if every method in *requested_methods* is allowed.

    *requested_methods* is the ``Access-Control-Request-Method`` value; a
    comma separated list is accepted and must be a subset of the policy's
    methods.
    """
    if not requested_methods:
        return False

    rule = policy.allowed_methods
    if rule.is_empty:
        return False
    if rule.wildcard:
        return True

    normalized = _WHITESPACE_RE.sub("", requested_methods.upper())
    requested = normalized.split(",")
    # an empty token ("POST,") is never a configured method
    return all(method in rule.methods for method in requested)
