"""Tests for floatbits CLI."""

import subprocess
import sys
from pathlib import Path

import cli

# Path to cli.py
CLI_PATH = Path(__file__).parent.parent / "cli.py"


def run_cli(*args: str) -> subprocess.CompletedProcess:
    """Run the CLI with the given arguments."""
    return subprocess.run(
        [sys.executable, str(CLI_PATH), *args],
        capture_output=True,
        text=True,
    )


class TestCliHelp:
    """Test CLI help and version."""

    def test_help_short(self) -> None:
        """Test -h flag shows help."""
        result = run_cli("-h")
        assert result.returncode == 0
        assert "floatbits" in result.stdout
        assert "Usage:" in result.stdout

    def test_help_long(self) -> None:
        """Test --help flag shows help."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "Usage:" in result.stdout

    def test_version_short(self) -> None:
        """Test -v flag shows version."""
        result = run_cli("-v")
        assert result.returncode == 0
        assert "floatbits" in result.stdout
        assert "1.0.0" in result.stdout

    def test_version_long(self) -> None:
        """Test --version flag shows version."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "1.0.0" in result.stdout


class TestCliErrors:
    """Test CLI error handling."""

    def test_not_a_number(self) -> None:
        """Test a value that does not parse."""
        result = run_cli("abc")
        assert result.returncode == 1
        assert "Error" in result.stderr

    def test_unknown_option(self) -> None:
        """Test an unknown option."""
        result = run_cli("--bogus")
        assert result.returncode == 1
        assert "Unknown option" in result.stderr

    def test_nan_rejected(self) -> None:
        """Test that NaN cannot be encoded."""
        result = run_cli("nan")
        assert result.returncode == 1
        assert "Error" in result.stderr


class TestCliEncode:
    """Test encoding output."""

    def test_default_value(self) -> None:
        """Test that no arguments encodes the demonstration value."""
        result = run_cli()
        assert result.returncode == 0
        assert "Float value = 15932.549805" in result.stdout
        assert (
            "Computed binary representation: 01000110 01111000 11110010 00110011"
            in result.stdout
        )
        assert (
            "System binary representation:   01000110 01111000 11110010 00110011"
            in result.stdout
        )
        assert "Match: yes" in result.stdout

    def test_lsb_first(self) -> None:
        """Test the LSB-first (little-endian) layout."""
        result = run_cli("-l", "15932.5497")
        assert result.returncode == 0
        assert (
            "Computed binary representation: 11001100 01001111 00011110 01100010"
            in result.stdout
        )
        assert "Match: yes" in result.stdout

    def test_negative_values(self) -> None:
        """Test that negative numbers are values, not options."""
        result = run_cli("-1.0", "-inf")
        assert result.returncode == 0
        assert "10111111 10000000 00000000 00000000" in result.stdout
        assert "11111111 10000000 00000000 00000000" in result.stdout
        assert "Match: no" not in result.stdout

    def test_debug_logging(self) -> None:
        """Test that --debug logs the encoding steps."""
        result = run_cli("--debug", "1.0")
        assert result.returncode == 0
        assert "floatbits.floating_point" in result.stderr
        assert "exponent=0" in result.stderr


class TestCliInProcess:
    """Test calling main() directly."""

    def test_main_returns_zero(self, capsys) -> None:
        """Test main with an explicit argument list."""
        assert cli.main(["cli.py", "2.0"]) == 0
        out = capsys.readouterr().out
        assert "01000000 00000000 00000000 00000000" in out

    def test_show_value_reports_match(self, capsys) -> None:
        """Test show_value return value."""
        assert cli.show_value(0.75, cli.MSB_FIRST)
        assert "Match: yes" in capsys.readouterr().out
