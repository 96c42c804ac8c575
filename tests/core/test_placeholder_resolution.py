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
"""Tests for ${...} placeholder resolution in Config values."""

import pytest

from flycors.core.config import Config
from flycors.kernel.exceptions import ConfigurationException


class TestPlaceholderResolution:
    def test_resolve_env_var(self, monkeypatch):
        monkeypatch.setenv("FRONTEND_ORIGIN", "https://app.example.com")
        config = Config({"flycors": {"cors": {"allowed_origins": "${FRONTEND_ORIGIN}"}}})
        assert config.get("flycors.cors.allowed_origins") == "https://app.example.com"

    def test_resolve_config_reference(self):
        config = Config({
            "app": {"host": "app.example.com"},
            "origin": "https://${app.host}",
        })
        assert config.get("origin") == "https://app.example.com"

    def test_default_may_contain_colons(self):
        config = Config({"origins": "${MISSING_ORIGINS:http://localhost:4200}"})
        assert config.get("origins") == "http://localhost:4200"

    def test_empty_default(self):
        config = Config({"origins": "${MISSING_ORIGINS:}"})
        assert config.get("origins") == ""

    def test_resolve_nested(self):
        config = Config({
            "base": "localhost",
            "host": "${base}",
            "url": "http://${host}:8080",
        })
        assert config.get("url") == "http://localhost:8080"

    def test_multiple_placeholders_in_one_value(self, monkeypatch):
        monkeypatch.setenv("FIRST_ORIGIN", "http://a.com")
        monkeypatch.setenv("SECOND_ORIGIN", "http://b.com")
        config = Config({"origins": "${FIRST_ORIGIN},${SECOND_ORIGIN}"})
        assert config.get("origins") == "http://a.com,http://b.com"

    def test_unresolvable_placeholder_raises(self):
        config = Config({"origins": "${NOWHERE_TO_BE_FOUND}"})
        with pytest.raises(ConfigurationException, match="Cannot resolve placeholder"):
            config.get("origins")

    def test_max_recursion_guard(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ConfigurationException, match="[Mm]ax.*recursion"):
            config.get("a")

    def test_non_string_passthrough(self):
        config = Config({"max_age": 300})
        assert config.get("max_age") == 300
