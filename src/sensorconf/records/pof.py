"""POF configuration structure of a wireless sensor node."""

from __future__ import annotations

from typing import ClassVar, Optional

from ..models import BaseRecord, LayoutTable, Reserved, UInt8, UInt16, UInt32


class ConfigPof(BaseRecord):
    """POF config structure.

    Version 1: struct version, 1 reserved byte, hardware number, 2 reserved
    bytes, CPU serial. Version 2 moves the CPU serial forward and pads the
    end with 3 reserved bytes. Both are 12 bytes long including the CRC.
    """

    pof_struct_version: UInt8 = None
    hw_number: UInt16 = None
    cpu_serial: UInt32 = None

    # The trailing CRC-16 is added implicitly and must not be listed here
    sensorconf_layouts: ClassVar[LayoutTable] = {
        1: (
            "pof_struct_version",
            Reserved("reserved1", 1),
            "hw_number",
            Reserved("reserved2", 2),
            "cpu_serial",
        ),
        2: (
            "pof_struct_version",
            "cpu_serial",
            "hw_number",
            Reserved("reserved", 3),
        ),
    }
    sensorconf_name: ClassVar[Optional[str]] = "pof"

    def __str__(self) -> str:
        return (
            f"pofStructVersion={self.pof_struct_version}, hwNumber={self.hw_number}, "
            f"cpuSerial={self.cpu_serial}"
        )
