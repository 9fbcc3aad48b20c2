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
"""Tests for StructlogAdapter — default LoggingPort implementation."""

import logging

import pytest
import structlog

from pagekit.core.config import Config
from pagekit.data.parser import PageableParser
from pagekit.logging.port import LoggingPort
from pagekit.logging.structlog_adapter import StructlogAdapter, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pagekit": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pagekit": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_configure_reads_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"pagekit": {"logging": {"level": {"root": "INFO", "pagekit.data.parser": "DEBUG"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"pagekit.data.parser": "DEBUG"}
        assert logging.getLogger("pagekit.data.parser").level == logging.DEBUG
        adapter.set_level("pagekit.data.parser", "NOTSET")


class TestStructlogAdapterOutput:
    def test_json_output_for_library_records(self, capsys):
        adapter = StructlogAdapter()
        config = Config({"pagekit": {"logging": {"format": "json", "level": {"root": "DEBUG"}}}})
        adapter.configure(config)

        PageableParser.default().parse({"page": ["1"]})

        out = capsys.readouterr().out
        assert '"event": "Parsed pageable: page=1 size=10 sort=None"' in out
        assert '"logger": "pagekit.data.parser"' in out

    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("myapp.test")
        assert callable(getattr(logger, "info", None))


class TestStructlogAdapterSetLevel:
    def test_set_level_updates_module_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("myapp.services", "WARNING")
        assert logging.getLogger("myapp.services").level == logging.WARNING


class _RecordingPort:
    def __init__(self) -> None:
        self.configured_with: Config | None = None

    def configure(self, config: Config) -> None:
        self.configured_with = config

    def get_logger(self, name: str):
        return logging.getLogger(name)

    def set_level(self, name: str, level: str) -> None:
        pass


class TestConfigureLogging:
    def test_defaults_to_structlog_adapter(self):
        port = configure_logging(Config({"pagekit": {"logging": {"format": "json"}}}))
        assert isinstance(port, StructlogAdapter)
        assert isinstance(port, LoggingPort)
        assert port._format == "json"

    def test_uses_given_port(self):
        port = _RecordingPort()
        config = Config({})
        assert configure_logging(config, port) is port
        assert port.configured_with is config
