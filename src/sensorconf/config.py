"""Checksum configuration for record types.

Records close with a 16-bit CRC. The parameters are kept in a small frozen
dataclass so a record type can select a different CRC-16 variant if a device
firmware turns out to use one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CRCConfig:
    """Parameters of a non-reflected CRC-16 without final XOR.

    Attributes:
        poly: Generator polynomial (16 bits, implicit x^16 term)
        init: Initial register value

    Examples:
        ```python
        from sensorconf.config import CRCConfig

        # CRC-16/XMODEM
        xmodem = CRCConfig(poly=0x1021, init=0x0000)
        ```
    """

    poly: int = 0x1021
    init: int = 0xFFFF

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 < self.poly <= 0xFFFF:
            raise ValueError(f"poly must be 0x0001-0xFFFF, got {self.poly:#x}")

        if not 0 <= self.init <= 0xFFFF:
            raise ValueError(f"init must be 0x0000-0xFFFF, got {self.init:#x}")


# CRC-16/CCITT-FALSE, check value 0x29B1 over b"123456789"
CRC16_CCITT_FALSE = CRCConfig(poly=0x1021, init=0xFFFF)
