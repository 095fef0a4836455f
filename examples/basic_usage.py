#!/usr/bin/env python3
"""Basic usage example for sensorconf.

This example demonstrates:
1. Detecting the structure version and size of raw record bytes
2. Decoding them into a ConfigPof record
3. Modifying a field and upgrading to structure version 2
4. Encoding the record again
"""

from __future__ import annotations

from sensorconf import ConfigPof, crc16_bytes, decode, encode, field_sizes, peek_version


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("sensorconf Basic Usage Example")
    print("=" * 60)
    print()

    payload = bytes([0x01, 0x00, 0xA1, 0xCC, 0x00, 0x00, 0x2E, 0x38, 0xD4, 0x89])
    data = payload + crc16_bytes(payload)
    print(f"1. Initial data: {data.hex(' ')}")

    version = peek_version(data)
    print(f"   Structure version {version}, {ConfigPof.size_for(version)} bytes")
    print(f"   Layout: {field_sizes(ConfigPof, version)}")
    print()

    print("2. Decoding...")
    pof = decode(ConfigPof, data)
    print(f"   {pof}")
    print()

    print("3. Setting hwNumber=0x0103 and upgrading to version 2...")
    pof.hw_number = 0x0103
    pof.version = 2
    packed = encode(pof)
    print(f"   Encoded: {packed.hex(' ')}")
    print(f"   Layout: {field_sizes(ConfigPof, 2)}")
    print()

    print("4. Reading it back...")
    print(f"   {decode(ConfigPof, packed)}")


if __name__ == "__main__":
    main()
