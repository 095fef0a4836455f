"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sensorconf import (
    ChecksumMismatchError,
    ConfigPof,
    UnknownVersionError,
    decode,
    encode,
    size_for_version,
)
from sensorconf.utils.crc import crc16, crc16_bytes, verify_crc16

pof_records = st.builds(
    lambda version, hw_number, cpu_serial: ConfigPof(
        pof_struct_version=version,
        hw_number=hw_number,
        cpu_serial=cpu_serial,
        version=version,
    ),
    version=st.sampled_from([1, 2]),
    hw_number=st.integers(min_value=0, max_value=0xFFFF),
    cpu_serial=st.integers(min_value=0, max_value=0xFFFF_FFFF),
)


class TestCodecProperties:
    """Property-based tests for the record codec."""

    @given(pof=pof_records)
    def test_encode_decode_roundtrip(self, pof: ConfigPof) -> None:
        """Test decode(encode()) restores every value and the version."""
        data = encode(pof)
        decoded = decode(ConfigPof, data)

        assert decoded.version == pof.version
        assert decoded.pof_struct_version == pof.pof_struct_version
        assert decoded.hw_number == pof.hw_number
        assert decoded.cpu_serial == pof.cpu_serial

    @given(pof=pof_records)
    def test_encode_is_idempotent(self, pof: ConfigPof) -> None:
        """Test re-encoding a decoded record reproduces the bytes."""
        data = encode(pof)

        assert encode(decode(ConfigPof, data)) == data

    @given(pof=pof_records)
    def test_layout_invariants(self, pof: ConfigPof) -> None:
        """Test version byte, size and trailing checksum."""
        data = encode(pof)

        assert data[0] == pof.version
        assert len(data) == size_for_version(ConfigPof, pof.version)
        assert verify_crc16(data[:-2], data[-2:])

    @given(pof=pof_records, target=st.sampled_from([1, 2]))
    def test_migration(self, pof: ConfigPof, target: int) -> None:
        """Test re-encoding under another version keeps the values."""
        decoded = decode(ConfigPof, encode(pof))
        decoded.version = target
        migrated = decode(ConfigPof, encode(decoded))

        assert migrated.version == target
        assert migrated.hw_number == pof.hw_number
        assert migrated.cpu_serial == pof.cpu_serial

    @given(pof=pof_records, data=st.data())
    def test_single_bit_flip_detected(self, pof: ConfigPof, data: st.DataObject) -> None:
        """Test every single-bit corruption is reported."""
        encoded = bytearray(encode(pof))
        bit = data.draw(st.integers(min_value=0, max_value=len(encoded) * 8 - 1))
        encoded[bit // 8] ^= 1 << (bit % 8)

        # A flipped version byte never lands on another registered version
        expected = UnknownVersionError if bit < 8 else ChecksumMismatchError
        with pytest.raises(expected):
            decode(ConfigPof, bytes(encoded))

    @given(
        reserved=st.binary(min_size=3, max_size=3),
        hw_number=st.integers(min_value=0, max_value=0xFFFF),
    )
    def test_reserved_always_zero(self, reserved: bytes, hw_number: int) -> None:
        """Test reserved content never survives a decode/encode cycle."""
        payload = bytes([0x01, reserved[0]]) + hw_number.to_bytes(2, "little")
        payload += reserved[1:] + b"\x2e\x38\xd4\x89"
        pof = decode(ConfigPof, payload + crc16_bytes(payload))

        packed = encode(pof)
        assert packed[1] == 0
        assert packed[4:6] == b"\x00\x00"
        assert pof.hw_number == hw_number


class TestCRCProperties:
    """Property-based tests for CRC."""

    @given(data=st.binary(min_size=0, max_size=64))
    def test_crc16_verify_roundtrip(self, data: bytes) -> None:
        assert verify_crc16(data, crc16(data)) is True
        assert verify_crc16(data, crc16_bytes(data)) is True

    @given(data=st.binary(min_size=1, max_size=64), bit=st.integers(min_value=0, max_value=7))
    def test_crc_changes_with_data(self, data: bytes, bit: int) -> None:
        modified = bytearray(data)
        modified[0] ^= 1 << bit

        assert crc16(data) != crc16(bytes(modified))
