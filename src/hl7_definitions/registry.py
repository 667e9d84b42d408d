# src/hl7_definitions/registry.py
"""
Definition registry for HL7 v2 versions.

Provides:
- DefinitionRegistry: an immutable, version-partitioned set of message,
  segment, data type and table definitions with total lookup methods,
- get_registry(): the process-wide default registry, built once on first
  use from the configuration named by HL7_DEFINITIONS_CONFIG,
- module-level shortcuts (get_message, get_segment, ...) over the default.

Lookups never raise. An unknown version, a version that is not loaded,
an unknown key or a key of the wrong type all produce None.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .config import AppConfig, config_from_env
from .loader import VersionDefinitions, load_partitions
from .logging_utils import get_logger
from .models import (
    DataTypeDefinition,
    MessageDefinition,
    SegmentDefinition,
    TableDefinition,
    Version,
)

__all__ = [
    "DefinitionRegistry",
    "get_registry",
    "reset_registry",
    "list_versions",
    "get_definition",
    "get_message",
    "get_segment",
    "get_datatype",
    "get_table",
    "table_description",
    "table_value",
    "table_values",
    "unresolved_segment_references",
]

LOG = get_logger(__name__)


# ------------------------------------------------------------------------------
# Key normalization
# ------------------------------------------------------------------------------


def _message_key(value: Any) -> Optional[str]:
    # Accept "ADT_A01" as well as the MSH-9 form "ADT^A01[^ADT_A01]".
    if not isinstance(value, str):
        return None
    key = value.strip().upper()
    if "^" in key:
        parts = key.split("^")
        key = f"{parts[0]}_{parts[1]}"
    return key or None


def _segment_key(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip().upper() or None


def _table_key(value: Any) -> Optional[str]:
    # 1, "1", "0001" and "HL70001" all name table 0001.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return f"{value:04d}" if value >= 0 else None
    if not isinstance(value, str):
        return None
    key = value.strip().upper()
    if key.startswith("HL7"):
        key = key[3:]
    if not key.isdigit():
        return None
    return key.zfill(4)


# ------------------------------------------------------------------------------
# Registry
# ------------------------------------------------------------------------------


class DefinitionRegistry:
    """
    Immutable registry of HL7 v2 definitions, partitioned by version.

    Build one with DefinitionRegistry.build(config), or use the shared
    instance from get_registry(). Instances hold no mutable state and can
    be shared across threads freely.
    """

    __slots__ = ("_partitions",)

    def __init__(self, partitions: Optional[Mapping[Version, VersionDefinitions]] = None):
        partitions = partitions or {}
        ordered: Dict[Version, VersionDefinitions] = {
            v: partitions[v] for v in Version if v in partitions
        }
        self._partitions: Mapping[Version, VersionDefinitions] = MappingProxyType(
            ordered
        )

    @classmethod
    def build(cls, config: Optional[AppConfig] = None) -> "DefinitionRegistry":
        """
        Load the partitions enabled by `config` and wrap them in a registry.

        Parameters
        ----------
        config : AppConfig or None, default None
            Feature selection; every feature is enabled when None.

        Returns
        -------
        DefinitionRegistry
            The new registry. With no features enabled it is inert: same
            API, every lookup returns None.
        """
        registry = cls(load_partitions(config or AppConfig()))
        LOG.info(
            "Definition registry ready with versions: %s",
            ", ".join(v.value for v in registry.list_versions()) or "(none)",
        )
        return registry

    def __repr__(self) -> str:
        versions = ", ".join(v.value for v in self._partitions)
        return f"<DefinitionRegistry versions=[{versions}]>"

    def __contains__(self, version: object) -> bool:
        return self.get_definition(version) is not None

    # -- versions --------------------------------------------------------------

    def list_versions(self) -> Tuple[Version, ...]:
        """Loaded versions in canonical order (2.1 first)."""
        return tuple(self._partitions)

    def get_definition(self, version: Any) -> Optional[VersionDefinitions]:
        """Return the whole partition for `version`, or None if it is not loaded."""
        parsed = Version.parse(version)
        if parsed is None:
            return None
        return self._partitions.get(parsed)

    # -- structures ------------------------------------------------------------

    def get_message(self, version: Any, message_type: Any) -> Optional[MessageDefinition]:
        """
        Look up a message structure.

        Parameters
        ----------
        version : Version or str
            HL7 version, e.g. "2.5.1".
        message_type : str
            Message type such as "ADT_A01" or "ADT^A01".

        Returns
        -------
        MessageDefinition or None
            The definition, or None if the version is not loaded or does not
            define that message.
        """
        defs = self.get_definition(version)
        key = _message_key(message_type)
        if defs is None or key is None:
            return None
        return defs.messages.get(key)

    def get_segment(self, version: Any, segment_code: Any) -> Optional[SegmentDefinition]:
        """Look up a segment structure such as "MSH"; None if absent."""
        defs = self.get_definition(version)
        key = _segment_key(segment_code)
        if defs is None or key is None:
            return None
        return defs.segments.get(key)

    def get_datatype(self, version: Any, code: Any) -> Optional[DataTypeDefinition]:
        """Look up a composite data type such as "XPN"; None if absent."""
        defs = self.get_definition(version)
        key = _segment_key(code)
        if defs is None or key is None:
            return None
        return defs.datatypes.get(key)

    # -- tables ----------------------------------------------------------------

    def get_table(self, version: Any, table_id: Any) -> Optional[TableDefinition]:
        """
        Look up a coded value table.

        Parameters
        ----------
        version : Version or str
            HL7 version.
        table_id : str or int
            Table number: "0001", "1", 1 and "HL70001" are equivalent.

        Returns
        -------
        TableDefinition or None
            The table, or None if tables are disabled, the version is not
            loaded, or the version has no such table.
        """
        defs = self.get_definition(version)
        key = _table_key(table_id)
        if defs is None or key is None:
            return None
        return defs.tables.get(key)

    def table_description(self, version: Any, table_id: Any) -> Optional[str]:
        table = self.get_table(version, table_id)
        return table.description if table is not None else None

    def table_value(self, version: Any, table_id: Any, code: Any) -> Optional[str]:
        """Description of a single coded value, e.g. table 0001 "F" -> "Female"."""
        table = self.get_table(version, table_id)
        if table is None or not isinstance(code, str):
            return None
        return table.get(code)

    def table_values(
        self, version: Any, table_id: Any
    ) -> Optional[Tuple[Tuple[str, str], ...]]:
        """All (code, description) pairs of a table in authored order."""
        table = self.get_table(version, table_id)
        return table.entries if table is not None else None

    # -- data quality ----------------------------------------------------------

    def unresolved_segment_references(self, version: Any) -> Tuple[Tuple[str, str], ...]:
        """
        Find message segment references with no segment definition.

        Referential completeness is a property of the shipped data, checked
        by the test-suite and the ``check`` CLI command; lookups never
        depend on it.

        Returns
        -------
        tuple of (message_type, segment_code)
            One pair per dangling reference, in message then document order.
            Empty when everything resolves or the version is not loaded.
        """
        defs = self.get_definition(version)
        if defs is None:
            return ()
        missing = []
        for message_type, message in defs.messages.items():
            for ref in message.iter_segments():
                if ref.name not in defs.segments:
                    missing.append((message_type, ref.name))
            for compound in message.iter_compounds():
                pair = (message_type, compound.name)
                if (
                    compound.name is not None
                    and compound.name not in defs.segments
                    and pair not in missing
                ):
                    missing.append(pair)
        return tuple(missing)


# ------------------------------------------------------------------------------
# Process-wide default registry
# ------------------------------------------------------------------------------

_DEFAULT: Optional[DefinitionRegistry] = None
_LOCK = threading.Lock()


def get_registry() -> DefinitionRegistry:
    """
    Return the shared registry, building it on first use.

    The first caller builds the registry under a lock; concurrent first
    callers all receive the same instance.

    Raises
    ------
    ConfigError
        If HL7_DEFINITIONS_CONFIG names an invalid configuration.
    """
    global _DEFAULT
    registry = _DEFAULT
    if registry is None:
        with _LOCK:
            if _DEFAULT is None:
                _DEFAULT = DefinitionRegistry.build(config_from_env())
            registry = _DEFAULT
    return registry


def reset_registry() -> None:
    """Drop the shared registry so the next get_registry() rebuilds it."""
    global _DEFAULT
    with _LOCK:
        _DEFAULT = None


def list_versions() -> Tuple[Version, ...]:
    return get_registry().list_versions()


def get_definition(version: Any) -> Optional[VersionDefinitions]:
    return get_registry().get_definition(version)


def get_message(version: Any, message_type: Any) -> Optional[MessageDefinition]:
    return get_registry().get_message(version, message_type)


def get_segment(version: Any, segment_code: Any) -> Optional[SegmentDefinition]:
    return get_registry().get_segment(version, segment_code)


def get_datatype(version: Any, code: Any) -> Optional[DataTypeDefinition]:
    return get_registry().get_datatype(version, code)


def get_table(version: Any, table_id: Any) -> Optional[TableDefinition]:
    return get_registry().get_table(version, table_id)


def table_description(version: Any, table_id: Any) -> Optional[str]:
    return get_registry().table_description(version, table_id)


def table_value(version: Any, table_id: Any, code: Any) -> Optional[str]:
    return get_registry().table_value(version, table_id, code)


def table_values(version: Any, table_id: Any) -> Optional[Tuple[Tuple[str, str], ...]]:
    return get_registry().table_values(version, table_id)


def unresolved_segment_references(version: Any) -> Tuple[Tuple[str, str], ...]:
    return get_registry().unresolved_segment_references(version)
