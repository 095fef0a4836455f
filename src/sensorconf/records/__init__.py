"""Concrete record definitions.

RECORD_TYPES maps the short name of each record type to its class.
"""

from __future__ import annotations

from typing import Dict, Type

from ..models import BaseRecord
from .pof import ConfigPof

RECORD_TYPES: Dict[str, Type[BaseRecord]] = {
    cls.sensorconf_name: cls for cls in (ConfigPof,) if cls.sensorconf_name is not None
}

__all__ = [
    "ConfigPof",
    "RECORD_TYPES",
]
