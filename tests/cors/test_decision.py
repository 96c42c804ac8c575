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
"""Tests for CorsDecision evaluation."""

from __future__ import annotations

from flycors.cors.decision import decide
from flycors.cors.policy import ALL_ORIGINS, CorsPolicy
from flycors.web.request import HttpRequestView


class TestDecide:
    def test_not_a_cors_request(self):
        decision = decide(CorsPolicy.from_values(ALL_ORIGINS), HttpRequestView.of("GET"))

        assert not decision.is_cors_request
        assert not decision.origin_permitted
        assert decision.resolved_origin_header_value == "null"
        assert decision.method_permitted is None

    def test_actual_request_leaves_method_undecided(self):
        policy = CorsPolicy.from_values("http://a.com", "GET")
        decision = decide(policy, HttpRequestView.of("post", {"Origin": "http://a.com"}))

        assert decision.method == "POST"
        assert not decision.is_preflight
        assert decision.origin_permitted
        assert decision.resolved_origin_header_value == "http://a.com"
        assert decision.vary_required
        assert decision.method_permitted is None

    def test_preflight_decides_method(self):
        policy = CorsPolicy.from_values(ALL_ORIGINS, "GET")
        request = HttpRequestView.of(
            "OPTIONS",
            {"Origin": "http://a.com", "Access-Control-Request-Method": "DELETE"},
        )
        decision = decide(policy, request)

        assert decision.is_preflight
        assert decision.origin_permitted
        assert decision.method_permitted is False
        assert not decision.vary_required

    def test_blank_origin_is_not_a_cors_request(self):
        decision = decide(CorsPolicy.from_values(ALL_ORIGINS), HttpRequestView.of("OPTIONS", {"Origin": "  "}))

        assert decision.origin == ""
        assert not decision.is_preflight
        assert not decision.is_cors_request
        assert decision.headers(CorsPolicy.from_values(ALL_ORIGINS)) == []


class TestDecisionHeaders:
    def test_headers_follow_decision_fields(self):
        policy = CorsPolicy.from_values("http://a.com", allow_credentials=True)
        decision = decide(policy, HttpRequestView.of("GET", {"Origin": "http://a.com"}))

        assert decision.headers(policy) == [
            ("Access-Control-Allow-Origin", "http://a.com"),
            ("Access-Control-Allow-Credentials", "true"),
            ("Vary", "Origin"),
        ]

    def test_rejected_origin_only_gets_vary(self):
        policy = CorsPolicy.from_values("http://a.com")
        decision = decide(policy, HttpRequestView.of("GET", {"Origin": "http://b.com"}))

        assert decision.headers(policy) == [("Vary", "Origin")]
