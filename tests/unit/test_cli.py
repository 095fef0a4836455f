"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from sensorconf import __version__
from sensorconf.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "sensorconf.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "sensorconf: Sensor Node Configuration Records" in result.stdout
    assert "decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "sensorconf.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"sensorconf {__version__}" in result.stdout


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "sensorconf: Sensor Node Configuration Records" in capsys.readouterr().out


def test_cli_decode(pof_v1_bytes: bytes, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", pof_v1_bytes.hex(" ")]) == 0

    out = capsys.readouterr().out
    assert "Detected version 1, 12 bytes" in out
    assert "0xCCA1" in out
    assert "0x89D4382E" in out
    assert "Encoded" not in out


def test_cli_decode_migrate(pof_v1_bytes: bytes, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", pof_v1_bytes.hex(), "--set", "hw_number=0x0103", "--migrate", "2"]) == 0

    out = capsys.readouterr().out
    assert "ConfigPof (version 2)" in out
    assert "Encoded (12 bytes): 02 2E 38 D4 89 03 01 00 00 00" in out


def test_cli_decode_checksum_error(
    pof_v1_bytes: bytes, capsys: pytest.CaptureFixture[str]
) -> None:
    corrupted = pof_v1_bytes[:-1] + bytes([pof_v1_bytes[-1] ^ 0x01])

    assert main(["decode", corrupted.hex()]) == 1
    assert "Checksum mismatch" in capsys.readouterr().err


def test_cli_decode_bad_assignment(
    pof_v1_bytes: bytes, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["decode", pof_v1_bytes.hex(), "--set", "hw_number=0x10000"]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_unknown_record(pof_v1_bytes: bytes, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", pof_v1_bytes.hex(), "--record", "nope"]) == 1
    assert "Unknown record type" in capsys.readouterr().err


def test_cli_analyze(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["analyze"]) == 0

    out = capsys.readouterr().out
    assert "ConfigPof: versions 1, 2" in out
    assert "Version 1: 12 bytes" in out
    assert "reserved1" in out
    assert "<crc16>" in out


def test_cli_project(project_yaml: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["project", str(project_yaml)]) == 0

    out = capsys.readouterr().out
    assert "Project NextGenRRX (1): NextGen RRX Zug 83" in out
    assert "Car EWB (1): 2 positions [A1L, A2L]" in out


def test_cli_project_position(project_yaml: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["project", str(project_yaml), "--car", "MWD", "--position", "A1L"]) == 0

    out = capsys.readouterr().out
    assert "radioChannel2: 5" in out
    assert "networkId: 3" in out


def test_cli_project_missing_position(
    project_yaml: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["project", str(project_yaml), "--car", "EWB", "--position", "Z9"]) == 1
    assert "not found" in capsys.readouterr().err
