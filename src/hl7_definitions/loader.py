# src/hl7_definitions/loader.py
"""
Build immutable model objects from the literal version partitions.

The data modules under hl7_definitions.data hold plain tuples so they stay
cheap to generate and diff. This module checks the shape of every
literal entry and turns it into the frozen dataclasses of
hl7_definitions.models. Loading happens once per registry; nothing here
runs on the lookup path.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from . import data
from .config import AppConfig
from .exceptions import DefinitionDataError
from .logging_utils import get_logger
from .models import (
    DataTypeDefinition,
    FieldDefinition,
    MessageCompound,
    MessageDefinition,
    Optionality,
    Repeatability,
    SegmentDefinition,
    SegmentReference,
    TableDefinition,
    Version,
)

__all__ = [
    "VersionDefinitions",
    "build_field",
    "build_segment",
    "build_datatype",
    "build_message",
    "build_table",
    "load_partition",
    "load_partitions",
]

LOG = get_logger(__name__)

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, eq=False)
class VersionDefinitions:
    """
    Every definition of one HL7 version, as read-only mappings.

    Attributes
    ----------
    version : Version
        The version this partition describes.
    messages : Mapping[str, MessageDefinition]
        Message type (e.g. "ADT_A01") to message structure.
    segments : Mapping[str, SegmentDefinition]
        Segment code to segment structure.
    datatypes : Mapping[str, DataTypeDefinition]
        Composite data type code to its components.
    tables : Mapping[str, TableDefinition]
        Four-digit table id to table; empty when tables are disabled.
    """

    version: Version
    messages: Mapping[str, MessageDefinition]
    segments: Mapping[str, SegmentDefinition]
    datatypes: Mapping[str, DataTypeDefinition]
    tables: Mapping[str, TableDefinition]


# ------------------------------------------------------------------------------
# Literal -> model builders
# ------------------------------------------------------------------------------


def _expect_tuple(raw: Any, size: Tuple[int, ...], where: str) -> Tuple[Any, ...]:
    if not isinstance(raw, tuple) or len(raw) not in size:
        sizes = " or ".join(str(n) for n in size)
        raise DefinitionDataError(f"{where}: expected a {sizes}-tuple, got {raw!r}")
    return raw


def build_field(raw: Any, where: str = "field") -> FieldDefinition:
    """
    Build a FieldDefinition from ``(datatype, description, opt, repeat, length, table)``.

    Raises
    ------
    DefinitionDataError
        If the tuple has the wrong shape or an unknown optionality code.
    """
    datatype, description, opt, repeat, length, table = _expect_tuple(raw, (6,), where)
    try:
        optionality = Optionality(opt)
    except ValueError:
        raise DefinitionDataError(f"{where}: unknown optionality {opt!r}") from None
    if not isinstance(repeat, int) or repeat < 0:
        raise DefinitionDataError(f"{where}: repeat count must be >= 0, got {repeat!r}")
    if length is not None and not isinstance(length, int):
        raise DefinitionDataError(f"{where}: length must be int or None, got {length!r}")
    if table is not None and not (isinstance(table, str) and table.isdigit()):
        raise DefinitionDataError(f"{where}: table must be a digit string, got {table!r}")
    return FieldDefinition(
        datatype=datatype,
        description=description,
        optionality=optionality,
        repeatability=Repeatability.from_count(repeat),
        max_length=length,
        table=table,
    )


def build_segment(code: str, raw: Any) -> SegmentDefinition:
    """Build a SegmentDefinition from ``(description, fields)``."""
    description, fields = _expect_tuple(raw, (2,), f"segment {code}")
    return SegmentDefinition(
        code=code,
        description=description,
        fields=tuple(
            build_field(f, f"segment {code} field {i}")
            for i, f in enumerate(fields, start=1)
        ),
    )


def build_datatype(code: str, raw: Any) -> DataTypeDefinition:
    """Build a DataTypeDefinition from ``(description, components)``."""
    description, components = _expect_tuple(raw, (2,), f"datatype {code}")
    return DataTypeDefinition(
        code=code,
        description=description,
        components=tuple(
            build_field(c, f"datatype {code} component {i}")
            for i, c in enumerate(components, start=1)
        ),
    )


def _build_compound(raw: Any, where: str) -> MessageCompound:
    name, description, min_occurs, max_occurs = _expect_tuple(raw, (4,), where)
    if name is not None and not isinstance(name, str):
        raise DefinitionDataError(f"{where}: compound name must be str or None, got {name!r}")
    return MessageCompound(
        name=name, description=description, min=min_occurs, max=max_occurs
    )


def _build_reference(raw: Any, where: str) -> SegmentReference:
    """
    Build a SegmentReference from ``(name, description, min, max[, children[, compounds]])``.

    `children` holds nested references of the same shape; `compounds`
    holds ``(name, description, min, max)`` alternatives of a choice group.
    A group needs children, compounds, or both.
    """
    item = _expect_tuple(raw, (4, 5, 6), where)
    name, description, min_occurs, max_occurs = item[:4]
    children = item[4] if len(item) >= 5 else ()
    compounds = item[5] if len(item) == 6 else ()
    if len(item) >= 5 and not children and not compounds:
        raise DefinitionDataError(f"{where}: group {name!r} has no children")
    return SegmentReference(
        name=name,
        description=description,
        min=min_occurs,
        max=max_occurs,
        children=tuple(
            _build_reference(child, f"{where}/{name}") for child in children
        ),
        compounds=tuple(
            _build_compound(c, f"{where}/{name} compound") for c in compounds
        ),
    )


def build_message(message_type: str, raw: Any) -> MessageDefinition:
    """Build a MessageDefinition from ``(name, description, references)``."""
    where = f"message {message_type}"
    name, description, references = _expect_tuple(raw, (3,), where)
    return MessageDefinition(
        message_type=message_type,
        name=name,
        description=description,
        segments=tuple(_build_reference(ref, where) for ref in references),
    )


def build_table(table_id: str, raw: Any) -> TableDefinition:
    """Build a TableDefinition from ``(description, ((code, description), ...))``."""
    where = f"table {table_id}"
    description, entries = _expect_tuple(raw, (2,), where)
    pairs = tuple(_expect_tuple(e, (2,), where) for e in entries)
    return TableDefinition(table_id=table_id, description=description, entries=pairs)


# ------------------------------------------------------------------------------
# Partition loading
# ------------------------------------------------------------------------------


def _read(version: Version, kind: str) -> Optional[Dict[str, Any]]:
    module = data.load_module(version, kind)
    if module is None:
        return None
    return getattr(module, kind.upper())


def load_partition(
    version: Version, include_tables: bool = True
) -> Optional[VersionDefinitions]:
    """
    Load every definition of one version.

    Parameters
    ----------
    version : Version
        Version to load.
    include_tables : bool, default True
        When False the tables module is not imported and the partition
        carries no tables.

    Returns
    -------
    VersionDefinitions or None
        The partition, or None when its data package is not shipped.

    Raises
    ------
    DefinitionDataError
        If a literal entry is malformed.
    """
    messages = _read(version, "messages")
    if messages is None:
        return None
    segments = _read(version, "segments") or {}
    datatypes = _read(version, "datatypes") or {}
    tables = (_read(version, "tables") or {}) if include_tables else {}

    partition = VersionDefinitions(
        version=version,
        messages=MappingProxyType(
            {k: build_message(k, v) for k, v in messages.items()}
        ),
        segments=MappingProxyType(
            {k: build_segment(k, v) for k, v in segments.items()}
        ),
        datatypes=MappingProxyType(
            {k: build_datatype(k, v) for k, v in datatypes.items()}
        ),
        tables=MappingProxyType({k: build_table(k, v) for k, v in tables.items()})
        if tables
        else _EMPTY,
    )
    LOG.debug(
        "Loaded HL7 %s: %d messages, %d segments, %d datatypes, %d tables",
        version.value,
        len(partition.messages),
        len(partition.segments),
        len(partition.datatypes),
        len(partition.tables),
    )
    return partition


def load_partitions(config: AppConfig) -> Dict[Version, VersionDefinitions]:
    """
    Load the partitions selected by a configuration.

    Disabled versions are never imported. A version that is enabled but
    not packaged is skipped with a log message.

    Parameters
    ----------
    config : AppConfig
        Feature selection.

    Returns
    -------
    Dict[Version, VersionDefinitions]
        Loaded partitions in canonical version order.
    """
    if not config.tables:
        LOG.info("Tables feature not enabled; tables will NOT be available")

    for version in Version:
        if version not in config.versions:
            LOG.info(
                "Version %s feature disabled, version %s will NOT be available",
                version.value,
                version.value,
            )

    out: Dict[Version, VersionDefinitions] = {}
    for version in config.versions:
        partition = load_partition(version, include_tables=config.tables)
        if partition is None:
            LOG.info("Version %s is not packaged; it will NOT be available", version.value)
            continue
        out[version] = partition
    return out
