"""Record modeling for sensorconf.

This module provides the BaseRecord class and the field types used to
define versioned configuration records.
"""

from __future__ import annotations

from .base import DEFAULT_VERSION, BaseRecord, LayoutEntry, LayoutTable
from .fields import IntKind, Reserved, UInt8, UInt16, UInt32, UInt64

__all__ = [
    "BaseRecord",
    "DEFAULT_VERSION",
    "LayoutEntry",
    "LayoutTable",
    "IntKind",
    "Reserved",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
