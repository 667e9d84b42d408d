# src/hl7_definitions/cli.py
"""
Command-line interface for hl7_definitions.

Subcommands
-----------
versions
    List the HL7 versions available in this installation.

message VERSION TYPE
    Describe a message structure, with the fields of every segment.

segment VERSION CODE
    List the fields of a segment.

table VERSION ID
    List the coded values of a table.

check
    Report message segment references that have no segment definition.

Exit codes
----------
0  success
1  handled, expected error (HL7DefinitionsError, not found, KeyboardInterrupt)
2  CLI usage error (argparse)
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml

from . import __version__
from .config import load_config
from .exceptions import HL7DefinitionsError
from .logging_utils import configure_logging
from .models import MessageDefinition, SegmentDefinition, SegmentReference
from .registry import DefinitionRegistry

# ------------------------------------------------------------------------------
# globals
# ------------------------------------------------------------------------------

LOG = logging.getLogger("hl7_definitions")

EXIT_OK = 0
EXIT_ERR = 1
EXIT_CLI = 2

# ------------------------------------------------------------------------------
# Parser construction
# ------------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argparse parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with subcommands: versions, message, segment,
        table, check.
    """
    parser = argparse.ArgumentParser(
        prog="hl7-definitions",
        description="Inspect HL7 v2 message, segment and table definitions.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML feature config (defaults to every feature).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"hl7-definitions {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("versions", help="List available HL7 versions.")

    s1 = sub.add_parser("message", help="Describe a message structure.")
    s1.add_argument("hl7_version", help='HL7 version, e.g. "2.5.1".')
    s1.add_argument("message_type", help='Message type, e.g. "ADT_A01" or "ADT^A01".')
    s1.add_argument("--json", action="store_true", help="Print JSON instead of text.")

    s2 = sub.add_parser("segment", help="List the fields of a segment.")
    s2.add_argument("hl7_version", help='HL7 version, e.g. "2.5.1".')
    s2.add_argument("segment_code", help='Segment code, e.g. "PID".')
    s2.add_argument("--json", action="store_true", help="Print JSON instead of text.")

    s3 = sub.add_parser("table", help="List the values of a coded table.")
    s3.add_argument("hl7_version", help='HL7 version, e.g. "2.5.1".')
    s3.add_argument("table_id", help='Table number, e.g. "0001" or "1".')
    s3.add_argument("--json", action="store_true", help="Print JSON instead of text.")

    sub.add_parser(
        "check", help="Check that every message segment has a segment definition."
    )

    return parser


# ------------------------------------------------------------------------------
# Registry construction
# ------------------------------------------------------------------------------


def _load_registry(config_path: Optional[Path]) -> DefinitionRegistry:
    """
    Build a registry from the feature config at config_path (or defaults).

    Raises
    ------
    HL7DefinitionsError
        If the config file cannot be read or is not a valid configuration.
    """
    try:
        config = load_config(config_path)
    except (OSError, TypeError, yaml.YAMLError) as e:
        raise HL7DefinitionsError(f"Failed to load config {config_path}: {e}") from e
    return DefinitionRegistry.build(config)


# ------------------------------------------------------------------------------
# Output helpers
# ------------------------------------------------------------------------------


def _to_jsonable(obj: Any) -> Any:
    """
    Convert definition objects into plain JSON-able structures.

    Dataclasses become dicts of their public fields, enums their values,
    tuples lists.
    """
    if isinstance(obj, Enum):
        return obj.value
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: _to_jsonable(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
            if not f.name.startswith("_")
        }
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(v) for v in obj]
    return str(obj)


def _print_json(obj: Any) -> None:
    sys.stdout.write(json.dumps(_to_jsonable(obj), indent=2))
    sys.stdout.write("\n")


def _field_lines(segment: SegmentDefinition, indent: str) -> list[str]:
    lines = []
    for i, f in enumerate(segment.fields, start=1):
        line = (
            f"{indent}{segment.code}.{i} - {f.description} [{f.datatype}] "
            f"{f.optionality}, {f.repeatability}"
        )
        if f.table is not None:
            line += f" (table {f.table})"
        lines.append(line)
    return lines


def _reference_lines(
    registry: DefinitionRegistry, version: str, ref: SegmentReference, depth: int
) -> list[str]:
    indent = "  " * depth
    header = f"{indent}{ref.name}"
    if ref.required:
        header += " (required)"
    if ref.repeatable:
        header += " (repeatable)"
    if ref.is_choice:
        header += " (one of)"
    lines = [header + ":"]
    if ref.is_group:
        for child in ref.children:
            lines.extend(_reference_lines(registry, version, child, depth + 1))
        return lines
    segment = registry.get_segment(version, ref.name)
    if segment is not None:
        lines.extend(_field_lines(segment, indent + "  "))
    return lines


def _describe_message(
    registry: DefinitionRegistry, version: str, message: MessageDefinition
) -> list[str]:
    lines = [f"{message.name} ({message.description}) segments:"]
    for ref in message.segments:
        lines.extend(_reference_lines(registry, version, ref, 1))
    return lines


# ------------------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------------------


def _cmd_versions(registry: DefinitionRegistry) -> int:
    for version in registry.list_versions():
        print(version.value)
    return EXIT_OK


def _cmd_message(
    registry: DefinitionRegistry, version: str, message_type: str, as_json: bool
) -> int:
    """
    Message: describe a message and the fields of its segments.

    Raises
    ------
    HL7DefinitionsError
        If the message is not defined for the version.
    """
    message = registry.get_message(version, message_type)
    if message is None:
        raise HL7DefinitionsError(
            f"Message {message_type!r} not found for HL7 version {version}"
        )
    if as_json:
        _print_json(message)
        return EXIT_OK
    for line in _describe_message(registry, version, message):
        print(line)
    return EXIT_OK


def _cmd_segment(
    registry: DefinitionRegistry, version: str, segment_code: str, as_json: bool
) -> int:
    segment = registry.get_segment(version, segment_code)
    if segment is None:
        raise HL7DefinitionsError(
            f"Segment {segment_code!r} not found for HL7 version {version}"
        )
    if as_json:
        _print_json(segment)
        return EXIT_OK
    print(f"{segment.code} ({segment.description}) fields:")
    for line in _field_lines(segment, "  "):
        print(line)
    return EXIT_OK


def _cmd_table(
    registry: DefinitionRegistry, version: str, table_id: str, as_json: bool
) -> int:
    table = registry.get_table(version, table_id)
    if table is None:
        raise HL7DefinitionsError(
            f"Table {table_id!r} not found for HL7 version {version}"
        )
    if as_json:
        _print_json(table)
        return EXIT_OK
    print(f"{table.table_id} ({table.description}):")
    for code, description in table.entries:
        print(f"  {code}\t{description}")
    return EXIT_OK


def _cmd_check(registry: DefinitionRegistry) -> int:
    """
    Check: report dangling segment references for every loaded version.

    Returns
    -------
    int
        EXIT_OK when every reference resolves, EXIT_ERR otherwise.
    """
    failures = 0
    for version in registry.list_versions():
        missing = registry.unresolved_segment_references(version)
        for message_type, code in missing:
            LOG.error("%s %s references undefined segment %s", version.value, message_type, code)
        failures += len(missing)
        print(f"{version.value}: {'ok' if not missing else f'{len(missing)} unresolved'}")
    return EXIT_OK if failures == 0 else EXIT_ERR


# ------------------------------------------------------------------------------
# Entrypoint
# ------------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """
    CLI entrypoint.

    Parameters
    ----------
    argv : list[str] or None, default None
        Argument list for testing; None uses sys.argv[1:].

    Returns
    -------
    int
        Process exit code (EXIT_OK, EXIT_ERR, or EXIT_CLI).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        registry = _load_registry(args.config)
        if args.cmd == "versions":
            return _cmd_versions(registry)
        if args.cmd == "message":
            return _cmd_message(registry, args.hl7_version, args.message_type, args.json)
        if args.cmd == "segment":
            return _cmd_segment(registry, args.hl7_version, args.segment_code, args.json)
        if args.cmd == "table":
            return _cmd_table(registry, args.hl7_version, args.table_id, args.json)
        if args.cmd == "check":
            return _cmd_check(registry)
        parser.error("Unknown command")
        return EXIT_CLI

    except HL7DefinitionsError as e:
        LOG.error("%s", e)
        return EXIT_ERR
    except KeyboardInterrupt:
        LOG.error("Interrupted")
        return EXIT_ERR


if __name__ == "__main__":
    raise SystemExit(main())
