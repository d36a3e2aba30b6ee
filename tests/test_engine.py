"""
Tests for the orchestration engine and its traces.
"""

import pytest

from shared.config import HillCoreConfig
from shared.logger import HillLogger
from hill.core import keys as keys_module
from hill.core.engine import HillEngine
from hill.core.models import CipherMode
from hill.errors import EmptyMessage, InvalidDimension, MatrixNotInvertible


class TestSetup:
    """Key setup through the engine."""

    def test_setup_returns_derivation(self, engine):
        setup = engine.setup("hill", "2")
        assert setup.key == "HILL"
        assert setup.mod_determinant == 15
        assert engine.key_setup == setup
        assert engine.cipher.dimension == 2

    def test_setup_failure_keeps_no_cipher(self, engine):
        with pytest.raises(MatrixNotInvertible):
            engine.setup("GYBN", 2)
        with pytest.raises(RuntimeError):
            engine.cipher

    def test_dimension_above_maximum(self, engine):
        engine.config.hill.max_dimension = 3
        with pytest.raises(InvalidDimension):
            engine.setup("A" * 16, 4)

    def test_setup_inverts_key_once(self, engine, monkeypatch):
        calls = []
        original = keys_module._invert

        def counting(key_matrix):
            calls.append(key_matrix.shape)
            return original(key_matrix)

        monkeypatch.setattr(keys_module, "_invert", counting)
        engine.setup("GYBNQKURP", 3)
        assert calls == [(3, 3)]
        assert engine.cipher.inverse_key_matrix.tolist() == engine.key_setup.inverse_matrix

    def test_failures_are_not_logged_as_errors(self, tmp_path):
        """The caller reports HillError; the engine only traces it at DEBUG."""
        log_file = tmp_path / "engine.log"
        logger = HillLogger(
            "hill.test_failure",
            log_level="WARNING",
            log_file=log_file,
            console_output=False,
        )
        engine = HillEngine(HillCoreConfig(), logger=logger)
        with pytest.raises(MatrixNotInvertible):
            engine.setup("GYBN", 2)
        engine.setup("HILL", 2)
        with pytest.raises(EmptyMessage):
            engine.encrypt("1234")
        for handler in logger.underlying.handlers:
            handler.flush()
        assert log_file.read_text(encoding="utf-8") == ""

    def test_operations_need_setup(self, engine):
        with pytest.raises(RuntimeError):
            engine.encrypt("HELP")


class TestTraces:
    """Encryption and decryption traces."""

    def test_encrypt_trace(self, engine):
        engine.setup("HILL", 2)
        trace = engine.encrypt("Hello!")
        assert trace.mode is CipherMode.ENCRYPT
        assert trace.input_text == "HELLO"
        assert trace.padded_text == "HELLOX"
        assert trace.padding_added == 1
        assert trace.output_text == "DRJIWR"
        assert trace.block_count == 3
        first = trace.steps[0]
        assert first.index == 1
        assert first.source_text == "HE"
        assert first.vector == [7, 4]
        assert first.product == [81, 121]
        assert first.reduced == [3, 17]
        assert first.result_text == "DR"
        assert trace.elapsed_seconds >= 0.0

    def test_decrypt_trace_reports_dropped_letters(self, engine):
        engine.setup("HILL", 2)
        trace = engine.decrypt("drpa q")
        assert trace.mode is CipherMode.DECRYPT
        assert trace.output_text == "HELP"
        assert trace.dropped_text == "Q"
        assert trace.padding_added == 0

    def test_empty_message(self, engine):
        engine.setup("HILL", 2)
        trace = engine.encrypt("")
        assert trace.output_text == ""
        assert trace.steps == []

    def test_no_letters(self, engine):
        engine.setup("HILL", 2)
        with pytest.raises(EmptyMessage):
            engine.encrypt("123")

    def test_round_trip(self, engine):
        engine.setup("GYBNQKURP", 3)
        result = engine.round_trip("attack at dawn")
        assert result.encryption.padded_text == "ATTACKATDAWN"
        assert result.decryption.output_text == "ATTACKATDAWN"
        assert result.matches

    def test_round_trip_keeps_padding(self, engine):
        engine.setup("HILL", 2)
        result = engine.round_trip("HELLO")
        assert result.decryption.output_text == "HELLOX"
        assert result.matches

    def test_trace_serialises(self, engine):
        engine.setup("HILL", 2)
        data = engine.encrypt("HELP").model_dump(mode="json")
        assert data["mode"] == "encrypt"
        assert data["padding_added"] == 0
        assert data["steps"][1]["result_text"] == "PA"
