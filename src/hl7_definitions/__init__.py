# src/hl7_definitions/__init__.py
"""
hl7_definitions: HL7 v2 message, segment, data type and table definitions.

This package provides:
- Literal definition data for HL7 v2.1 through v2.7.1, one partition per version.
- An immutable, version-partitioned DefinitionRegistry with total lookups
  (every miss returns None).
- Feature selection ("tables", "21", ..., "271") through AppConfig.
- A read-only CLI for inspecting definitions.
"""

from __future__ import annotations

from .config import AppConfig, load_config
from .models import (
    DataTypeDefinition,
    FieldDefinition,
    MessageCompound,
    MessageDefinition,
    Optionality,
    Repeatability,
    PRIMITIVE_DATATYPES,
    SegmentDefinition,
    SegmentReference,
    TableDefinition,
    Version,
)
from .registry import (
    DefinitionRegistry,
    get_datatype,
    get_definition,
    get_message,
    get_registry,
    get_segment,
    get_table,
    list_versions,
    reset_registry,
    table_description,
    table_value,
    table_values,
    unresolved_segment_references,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "AppConfig",
    "load_config",
    "DataTypeDefinition",
    "FieldDefinition",
    "MessageCompound",
    "MessageDefinition",
    "Optionality",
    "Repeatability",
    "PRIMITIVE_DATATYPES",
    "SegmentDefinition",
    "SegmentReference",
    "TableDefinition",
    "Version",
    "DefinitionRegistry",
    "get_datatype",
    "get_definition",
    "get_message",
    "get_registry",
    "get_segment",
    "get_table",
    "list_versions",
    "reset_registry",
    "table_description",
    "table_value",
    "table_values",
    "unresolved_segment_references",
]
