"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from sensorconf.utils.crc import crc16_bytes

# ConfigPof v1: version, reserved, hwNumber=0xCCA1, reserved x2, cpuSerial=0x89D4382E
POF_V1_DATA = bytes([0x01, 0x00, 0xA1, 0xCC, 0x00, 0x00, 0x2E, 0x38, 0xD4, 0x89])


@pytest.fixture
def pof_v1_bytes() -> bytes:
    """A valid 12-byte ConfigPof version 1 record."""
    return POF_V1_DATA + crc16_bytes(POF_V1_DATA)


@pytest.fixture
def project_yaml(tmp_path):
    """A small project config file."""
    path = tmp_path / "project.yaml"
    path.write_text(
        """
project:
  label: NextGenRRX
  value: 1
  description: NextGen RRX Zug 83
trains: [95, 96]
cars:
  - label: EWB
    value: 1
    positions:
      - {label: A1L, value: 1, radioChannel1: 1, slot: 1, orientation: 1, networkId: 1}
      - {label: A2L, value: 3, radioChannel1: 1, slot: 3, orientation: 2, networkId: 1}
  - label: MWD
    value: 2
    positions:
      - label: A1L
        value: 1
        radioChannel1: 3
        slot: 1
        radioChannel2: 5
        linkDirection2: 1
        orientation: 1
        networkId: 3
""",
        encoding="utf-8",
    )
    return path
