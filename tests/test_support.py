"""
Tests for configuration loading, structured logging, and JSON reports.
"""

import json
import logging

import pytest

from shared.config import HillCoreConfig
from shared.logger import HillLogger, _JSONFormatter
from hill.output.report import HillReportGenerator


class TestConfig:
    """TOML configuration loading."""

    def test_defaults(self):
        config = HillCoreConfig()
        assert config.hill.default_dimension == 2
        assert config.hill.max_dimension == 10
        assert config.global_settings.log_level == "WARNING"

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[global]\nlog_level = "DEBUG"\nunknown = 1\n'
            "[hill]\ndefault_dimension = 3\nshow_steps = false\n",
            encoding="utf-8",
        )
        config = HillCoreConfig.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.hill.default_dimension == 3
        assert config.hill.show_steps is False
        assert config.hill.max_dimension == 10

    def test_sections_hold_only_used_settings(self, tmp_path):
        """Keys nothing reads, such as output_dir, are dropped on load."""
        path = tmp_path / "legacy.toml"
        path.write_text(
            '[global]\noutput_dir = "out"\nversion = "0.1"\ndebug = true\n'
            '[hill]\noutput_format = "json"\n',
            encoding="utf-8",
        )
        config = HillCoreConfig.load(path)
        assert config.global_settings.debug is True
        assert config.to_dict() == {
            "global_settings": {
                "log_level": "WARNING",
                "log_file": "",
                "log_json": False,
                "debug": True,
            },
            "hill": {
                "default_dimension": 2,
                "max_dimension": 10,
                "show_steps": True,
            },
        }

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            HillCoreConfig.load(tmp_path / "nope.toml")

    def test_to_dict(self):
        data = HillCoreConfig().to_dict()
        assert data["hill"]["default_dimension"] == 2


class TestLogger:
    """Structured logging facade."""

    def test_json_file_records(self, tmp_path):
        log_file = tmp_path / "logs" / "hill.log"
        log = HillLogger(
            "hill.test_json",
            log_level="INFO",
            log_file=log_file,
            json_logs=True,
            console_output=False,
        )
        with log.operation("encrypt"):
            log.info("Encrypted %d block(s)", 2, dimension=2)
        for handler in log.underlying.handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert record["message"] == "Encrypted 2 block(s)"
        assert record["operation"] == "encrypt"
        assert record["tool_name"] == "hill.test_json"
        assert record["context"] == {"dimension": 2}

    def test_level_filtering(self, tmp_path):
        log_file = tmp_path / "plain.log"
        log = HillLogger(
            "hill.test_plain",
            log_level="WARNING",
            log_file=log_file,
            console_output=False,
        )
        log.info("hidden")
        log.warning("shown")
        for handler in log.underlying.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "shown" in text
        assert "hidden" not in text

    def test_timed_exposes_elapsed(self, silent_logger):
        with silent_logger.timed("work") as timer:
            pass
        assert timer.elapsed >= 0.0

    def test_operation_context_restores(self, silent_logger):
        with silent_logger.operation("outer"):
            with silent_logger.operation("inner"):
                assert silent_logger._operation == "inner"
            assert silent_logger._operation == "outer"
        assert silent_logger._operation is None

    def test_json_formatter_without_context(self):
        record = logging.LogRecord("hillcore.x", logging.INFO, __file__, 1, "hi", None, None)
        data = json.loads(_JSONFormatter().format(record))
        assert data["message"] == "hi"
        assert "context" not in data


class TestReport:
    """JSON report generation."""

    def test_generate_json(self, engine, tmp_path):
        setup = engine.setup("HILL", 2)
        path = HillReportGenerator().generate_json(setup, tmp_path / "out" / "key.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["report_metadata"]["kind"] == "key_setup"
        assert data["report_metadata"]["tool"] == "hill"
        assert data["result"]["inverse_matrix"] == [[25, 22], [1, 23]]

    def test_round_trip_report(self, engine):
        engine.setup("HILL", 2)
        data = HillReportGenerator().build(engine.round_trip("HELP"))
        assert data["report_metadata"]["kind"] == "round_trip"
        assert data["result"]["matches"] is True
        assert data["result"]["encryption"]["output_text"] == "DRPA"
