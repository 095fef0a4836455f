"""Exception hierarchy for sensorconf.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SensorconfError for easy catching of any
sensorconf-specific error.
"""

from __future__ import annotations


class SensorconfError(Exception):
    """Base exception for all sensorconf errors."""

    pass


class SchemaError(SensorconfError):
    """Raised when a record definition is invalid.

    Examples:
        - A layout references an attribute that is not a declared integer field
        - A layout is empty or does not start with a 1-byte version field
        - A reserved gap has a non-positive size
    """

    pass


class EncodeError(SensorconfError):
    """Raised when packing a record fails."""

    pass


class DecodeError(SensorconfError):
    """Raised when unpacking binary data fails."""

    pass


class ConfigError(SensorconfError):
    """Raised when a project configuration file cannot be loaded.

    Examples:
        - File missing or unreadable
        - Invalid YAML syntax
        - Values not matching the project configuration model
    """

    pass


class UnknownVersionError(DecodeError, EncodeError):
    """Raised when no layout is registered for a structure version.

    Surfaced on both decode and encode, never silently defaulted.
    """

    def __init__(self, version: int, record_name: str | None = None) -> None:
        self.version = version
        self.record_name = record_name
        where = f" of {record_name}" if record_name else ""
        super().__init__(f"Unknown structure version {version}{where}")


class TruncatedInputError(DecodeError):
    """Raised when fewer bytes are available than the layout requires."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Truncated input: need {required} bytes, got {available}")


class ChecksumMismatchError(DecodeError):
    """Raised when the recorded checksum does not match the computed one.

    The record's field values must be treated as untrusted afterwards.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Checksum mismatch: computed 0x{expected:04X}, recorded 0x{actual:04X}"
        )


class MissingValueError(EncodeError):
    """Raised when packing a record whose integer field has no value."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Field {field_name} has no value, cannot serialize it")
