"""Binary codec for versioned configuration records.

This module provides packing and unpacking of records, version detection
and layout introspection.
"""

from __future__ import annotations

from .decoder import decode, decode_into, peek_version, size_for_version
from .encoder import encode
from .schema import FieldSchema, LayoutSchema

__all__ = [
    "encode",
    "decode",
    "decode_into",
    "peek_version",
    "size_for_version",
    "LayoutSchema",
    "FieldSchema",
]
