"""CLI command implementations."""

from __future__ import annotations

import argparse
from pathlib import Path

from ..codec import decode, encode, peek_version
from ..exceptions import SensorconfError
from ..models.base import BaseRecord
from ..project import load_project_config
from ..records import RECORD_TYPES


def _record_class(name: str) -> type[BaseRecord]:
    try:
        return RECORD_TYPES[name]
    except KeyError:
        known = ", ".join(sorted(RECORD_TYPES))
        raise SensorconfError(f"Unknown record type {name!r} (known: {known})") from None


def _format_hex(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data)


def print_record(record: BaseRecord) -> None:
    """Print the integer fields of a record's current layout."""
    layout = type(record).fields_for(record.version)
    print(f"{type(record).__name__} (version {record.version})")
    if layout is None:
        return
    for field in layout.int_fields():
        value = getattr(record, field.name)
        shown = "<unset>" if value is None else f"{value} (0x{value:0{field.size * 2}X})"
        print(f"  {field.name:<24} {shown}")


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a hex record, optionally modify it and re-encode it."""
    record_class = _record_class(args.record)
    data = bytes.fromhex(args.hex)

    version = peek_version(data)
    print(f"Detected version {version}, {record_class.size_for(version)} bytes")

    record = decode(record_class, data)
    print_record(record)

    if not args.set and args.migrate is None:
        return 0

    for assignment in args.set:
        name, sep, raw_value = assignment.partition("=")
        if not sep:
            raise SensorconfError(f"Expected name=value, got {assignment!r}")
        setattr(record, name.strip(), int(raw_value, 0))

    if args.migrate is not None:
        record.version = args.migrate

    packed = encode(record)
    print()
    print_record(record)
    print(f"Encoded ({len(packed)} bytes): {_format_hex(packed)}")
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Print the layout of every version of a record type."""
    record_class = _record_class(args.record)

    print(f"{record_class.__name__}: versions {', '.join(map(str, record_class.versions()))}")
    for version in record_class.versions():
        layout = record_class.fields_for(version)
        if layout is None:
            continue
        print()
        print(f"Version {version}: {layout.total_size()} bytes")
        offset = 0
        for name, size in layout.field_sizes().items():
            print(f"  {offset:>3}  {name:<24} {size}")
            offset += size
        print(f"  {offset:>3}  {'<crc16>':<24} 2")
    return 0


def cmd_project(args: argparse.Namespace) -> int:
    """Summarize a project config file or show a single position."""
    config = load_project_config(Path(args.file))

    if args.car is not None or args.position is not None:
        if args.car is None or args.position is None:
            raise SensorconfError("--car and --position must be given together")
        position = config.find(args.car, args.position)
        if position is None:
            raise SensorconfError(f"Position {args.position!r} not found in car {args.car!r}")
        for key, value in position.model_dump(by_alias=True).items():
            print(f"{key}: {value}")
        return 0

    project = config.project
    print(f"Project {project.label} ({project.value}): {project.description}")
    print(f"Trains: {', '.join(map(str, config.trains))}")
    for car in config.cars:
        labels = ", ".join(position.label for position in car.positions)
        print(f"Car {car.label} ({car.value}): {len(car.positions)} positions [{labels}]")
    return 0
