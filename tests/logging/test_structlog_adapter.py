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
"""Tests for StructlogAdapter."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from flycors.core.config import Config
from flycors.cors.policy import CorsPolicy
from flycors.cors.preflight import evaluate_preflight
from flycors.logging.structlog_adapter import StructlogAdapter
from flycors.web.request import HttpRequestView


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"
        assert adapter._module_levels == {}

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"flycors": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"flycors": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_configure_applies_per_module_levels(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"flycors": {"logging": {"level": {"root": "INFO", "flycors.cors": "DEBUG"}}}}))
        assert adapter._module_levels == {"flycors.cors": "DEBUG"}
        assert logging.getLogger("flycors.cors").level == logging.DEBUG

    def test_env_level_as_plain_string(self, monkeypatch):
        monkeypatch.setenv("FLYCORS_LOGGING_LEVEL", "warning")
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "WARNING"


class TestStructlogAdapterGetLogger:
    def test_get_logger_returns_usable_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("flycors.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))


class TestStructlogAdapterSetLevel:
    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("flycors.web", "ERROR")
        assert logging.getLogger("flycors.web").level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self):
        adapter = StructlogAdapter()
        adapter.set_level("flycors.other", "LOUD")
        assert logging.getLogger("flycors.other").level == logging.INFO


class TestCorsLogEvents:
    def test_preflight_rejection_is_logged(self):
        policy = CorsPolicy.from_values("http://a.com", "GET")
        request = HttpRequestView.of("OPTIONS", {"Origin": "http://b.com", "Access-Control-Request-Method": "GET"})

        with capture_logs() as logs:
            evaluate_preflight(policy, request)

        assert logs[0]["event"] == "cors_preflight_rejected"
        assert logs[0]["reason"] == "origin"
        assert logs[0]["origin"] == "http://b.com"

    def test_credentials_with_wildcard_warns(self):
        with capture_logs() as logs:
            CorsPolicy.from_values("*", allow_credentials=True)

        assert logs[0]["event"] == "cors_credentials_with_wildcard_origins"
        assert logs[0]["log_level"] == "warning"
