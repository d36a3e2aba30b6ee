"""
Tests for the click command-line interface.
"""

import json

import pytest
from click.testing import CliRunner

from hill.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestEncryptDecrypt:
    """encrypt / decrypt subcommands."""

    def test_quiet_encrypt(self, runner):
        result = runner.invoke(cli, ["-q", "encrypt", "Help", "-k", "HILL", "-d", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "DRPA"

    def test_quiet_decrypt(self, runner):
        result = runner.invoke(cli, ["-q", "decrypt", "DRPA", "-k", "hill", "-d", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "HELP"

    def test_default_dimension_from_config(self, runner):
        result = runner.invoke(cli, ["-q", "encrypt", "HELP", "-k", "HILL"])
        assert result.exit_code == 0
        assert result.output.strip() == "DRPA"

    def test_prompts_for_key_and_message(self, runner):
        result = runner.invoke(
            cli, ["-q", "encrypt", "-d", "2"], input="HILL\nHelp\n"
        )
        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == "DRPA"

    def test_console_output(self, runner):
        result = runner.invoke(cli, ["encrypt", "HELLO", "-k", "HILL", "-d", "2"])
        assert result.exit_code == 0
        assert "DRJIWR" in result.output
        assert "HELLOX" in result.output
        assert "Key Matrix" in result.output

    def test_no_steps(self, runner):
        result = runner.invoke(
            cli, ["encrypt", "HELP", "-k", "HILL", "-d", "2", "--no-steps"]
        )
        assert result.exit_code == 0
        assert "DRPA" in result.output
        assert "Key Matrix" not in result.output

    def test_json_stdout(self, runner):
        result = runner.invoke(
            cli, ["-o", "json", "encrypt", "HELP", "-k", "HILL", "-d", "2"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["report_metadata"]["kind"] == "cipher_trace"
        assert data["result"]["output_text"] == "DRPA"

    def test_json_file(self, runner, tmp_path):
        target = tmp_path / "trace.json"
        result = runner.invoke(
            cli,
            ["-o", "json", "-f", str(target), "decrypt", "DRPA", "-k", "HILL", "-d", "2"],
        )
        assert result.exit_code == 0
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["result"]["output_text"] == "HELP"


class TestErrors:
    """Failures exit with status 1 and a readable message."""

    def test_non_invertible_key(self, runner):
        result = runner.invoke(cli, ["-q", "encrypt", "HELP", "-k", "GYBN", "-d", "2"])
        assert result.exit_code == 1
        assert "not invertible" in result.output

    def test_quiet_failure_is_reported_once(self, runner):
        result = runner.invoke(cli, ["-q", "encrypt", "HELP", "-k", "GYBN", "-d", "2"])
        assert result.exit_code == 1
        assert result.output.count("not invertible") == 1
        assert result.output.startswith("Error: matrix is not invertible")

    def test_quiet_suppresses_log_warnings(self, runner):
        result = runner.invoke(cli, ["-q", "decrypt", "DRPAQ", "-k", "HILL", "-d", "2"])
        assert result.exit_code == 0
        assert result.output == "HELP\n"

    def test_console_failure_is_reported_once(self, runner):
        result = runner.invoke(cli, ["encrypt", "HELP", "-k", "GYBN", "-d", "2"])
        assert result.exit_code == 1
        assert result.output.count("not invertible") == 1

    def test_key_length(self, runner):
        result = runner.invoke(cli, ["encrypt", "HELP", "-k", "HIL", "-d", "2"])
        assert result.exit_code == 1
        assert "does not match" in result.output

    def test_bad_dimension(self, runner):
        result = runner.invoke(cli, ["-q", "encrypt", "HELP", "-k", "HILL", "-d", "two"])
        assert result.exit_code == 1
        assert "positive integer" in result.output

    def test_dimension_above_maximum(self, runner):
        result = runner.invoke(cli, ["-q", "inspect-key", "A" * 121, "-d", "11"])
        assert result.exit_code == 1
        assert "exceeds the maximum of 10" in result.output
        assert "positive integer" not in result.output

    def test_message_without_letters(self, runner):
        result = runner.invoke(cli, ["-q", "encrypt", "1234", "-k", "HILL", "-d", "2"])
        assert result.exit_code == 1
        assert "no valid alphabetic characters" in result.output


class TestInspectAndDemo:
    """inspect-key and demo subcommands."""

    def test_inspect_key_quiet(self, runner):
        result = runner.invoke(cli, ["-q", "inspect-key", "HILL", "-d", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "25 22 1 23"

    def test_inspect_key_json(self, runner):
        result = runner.invoke(cli, ["-o", "json", "inspect-key", "GYBNQKURP", "-d", "3"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["result"]["determinant"] == 441
        assert data["result"]["inverse_matrix"][0] == [8, 5, 10]

    def test_inspect_key_console(self, runner):
        result = runner.invoke(cli, ["inspect-key", "HILL", "-d", "2", "--adjugate"])
        assert result.exit_code == 0
        assert "Adjugate" in result.output
        assert "invertible" in result.output

    def test_demo_interactive(self, runner):
        result = runner.invoke(cli, ["-q", "demo"], input="2\nHILL\nHello\n")
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[-2:] == ["DRJIWR", "HELLOX"]

    def test_demo_console(self, runner):
        result = runner.invoke(cli, ["demo", "HELP", "-k", "HILL", "-d", "2"])
        assert result.exit_code == 0
        assert "Encryption Process" in result.output
        assert "Decryption Process" in result.output
        assert "SUCCESS" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output
