# src/hl7_definitions/models.py
"""
Immutable data model for HL7 v2 definitions.

Every object here is a frozen dataclass or an enum, built once when a
version partition is loaded and shared read-only afterwards.

- Version: the closed set of HL7 v2 versions the library knows about.
- FieldDefinition: a segment field, or a component of a composite data type.
- SegmentDefinition / DataTypeDefinition: ordered lists of FieldDefinition.
- MessageCompound: one alternative of a choice group.
- SegmentReference / MessageDefinition: the segment structure of a message.
- TableDefinition: the coded values of an HL7 table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

__all__ = [
    "Version",
    "Optionality",
    "Repeatability",
    "FieldDefinition",
    "SegmentDefinition",
    "DataTypeDefinition",
    "MessageCompound",
    "SegmentReference",
    "MessageDefinition",
    "TableDefinition",
    "UNBOUNDED",
    "PRIMITIVE_DATATYPES",
]

# Maximum occurrence marker for message segment references.
UNBOUNDED = -1

# Data type codes with no component structure of their own. Every field
# datatype resolves either to a DataTypeDefinition or to one of these.
PRIMITIVE_DATATYPES = frozenset(
    {
        "CM", "DT", "DTM", "FT", "GTS", "ID", "IS", "NM", "SI", "SNM",
        "ST", "TM", "TN", "TX", "WD", "varies",
    }
)


class Version(str, Enum):
    """
    HL7 v2 versions with a data partition in this library.

    Members compare equal to their dotted string value, so
    ``Version.V2_5 == "2.5"`` holds.
    """

    V2_1 = "2.1"
    V2_2 = "2.2"
    V2_3 = "2.3"
    V2_3_1 = "2.3.1"
    V2_4 = "2.4"
    V2_5 = "2.5"
    V2_5_1 = "2.5.1"
    V2_6 = "2.6"
    V2_7 = "2.7"
    V2_7_1 = "2.7.1"

    def __str__(self) -> str:
        return self.value

    @property
    def feature(self) -> str:
        """Feature flag that controls this version, e.g. "251" for 2.5.1."""
        return self.value.replace(".", "")

    @property
    def module_name(self) -> str:
        """Name of the data package holding this version, e.g. "v2_5_1"."""
        return "v" + self.value.replace(".", "_")

    @classmethod
    def parse(cls, value: Any) -> Optional["Version"]:
        """
        Resolve a Version member from a member or its dotted string value.

        Parameters
        ----------
        value : Any
            A Version, or a string such as "2.5.1". Surrounding whitespace
            is ignored.

        Returns
        -------
        Version or None
            The matching member, or None for anything unknown.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


class Optionality(Enum):
    """How "required" a field is."""

    REQUIRED = "R"
    OPTIONAL = "O"
    CONDITIONAL = "C"
    BACKWARD_COMPATIBILITY = "B"

    def __str__(self) -> str:
        return _OPTIONALITY_LABELS[self]


_OPTIONALITY_LABELS: Dict[Optionality, str] = {
    Optionality.REQUIRED: "required",
    Optionality.OPTIONAL: "optional",
    Optionality.CONDITIONAL: "conditional",
    Optionality.BACKWARD_COMPATIBILITY: "backwards compatibility",
}


@dataclass(frozen=True)
class Repeatability:
    """
    How many times a field may repeat.

    Attributes
    ----------
    maximum : int or None
        Maximum number of repetitions; None means unbounded.
    """

    maximum: Optional[int] = 1

    @classmethod
    def from_count(cls, count: int) -> "Repeatability":
        """Build from the authored count: 0 is unbounded, n is at most n."""
        return cls(None) if count == 0 else cls(count)

    @property
    def unbounded(self) -> bool:
        return self.maximum is None

    @property
    def single(self) -> bool:
        return self.maximum == 1

    def __str__(self) -> str:
        if self.maximum is None:
            return "unbounded"
        if self.maximum == 1:
            return "singular"
        return f"maximum {self.maximum}"


@dataclass(frozen=True)
class FieldDefinition:
    """
    A segment field or a data type component.

    Attributes
    ----------
    datatype : str
        HL7 data type code (e.g. "ST", "CE", "XPN").
    description : str
        Human-readable field name.
    optionality : Optionality
        Whether the field is required.
    repeatability : Repeatability
        How many times the field may repeat.
    max_length : int or None
        Maximum length; None when unbounded or not applicable.
    table : str or None
        Four-digit id of the table holding valid values, if coded.
    """

    datatype: str
    description: str
    optionality: Optionality
    repeatability: Repeatability
    max_length: Optional[int] = None
    table: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.optionality is Optionality.REQUIRED


@dataclass(frozen=True)
class SegmentDefinition:
    """Schema for a segment (MSH, PID, ...): its fields in sequence order."""

    code: str
    description: str
    fields: Tuple[FieldDefinition, ...]

    def field(self, position: int) -> Optional[FieldDefinition]:
        """Return the field at the 1-based HL7 position (MSH-10 is 10), or None."""
        if 1 <= position <= len(self.fields):
            return self.fields[position - 1]
        return None


@dataclass(frozen=True)
class DataTypeDefinition:
    """Schema for a composite data type (XPN, CX, ...): its components in order."""

    code: str
    description: str
    components: Tuple[FieldDefinition, ...]


@dataclass(frozen=True)
class MessageCompound:
    """
    One alternative of a choice group ("compound" in the standard tables).

    A choice group lists several segments of which exactly one is sent
    (ORDER_DETAIL in ORM_O01 carries OBR, RQD, RQ1, ...). `name` is None
    for an unnamed alternative.
    """

    name: Optional[str]
    description: str
    min: int
    max: int


@dataclass(frozen=True)
class SegmentReference:
    """
    A segment (or a group of segments) as it appears inside a message.

    Attributes
    ----------
    name : str
        Segment code for a plain segment, group name for a group.
    description : str
        Human-readable name.
    min : int
        Minimum occurrences; greater than zero means required.
    max : int
        Maximum occurrences; UNBOUNDED (-1) for no limit.
    children : tuple of SegmentReference
        Members of a group in document order; empty for a plain segment.
    compounds : tuple of MessageCompound
        Alternatives of a choice group; empty for everything else.
    """

    name: str
    description: str
    min: int
    max: int
    children: Tuple["SegmentReference", ...] = ()
    compounds: Tuple[MessageCompound, ...] = ()

    @property
    def required(self) -> bool:
        return self.min > 0

    @property
    def repeatable(self) -> bool:
        return self.max == UNBOUNDED or self.max > 1

    @property
    def is_group(self) -> bool:
        return bool(self.children) or bool(self.compounds)

    @property
    def is_choice(self) -> bool:
        return bool(self.compounds)

    def iter_segments(self) -> Iterator["SegmentReference"]:
        """Yield this reference, or every plain segment of the group, in order."""
        if not self.is_group:
            yield self
            return
        for child in self.children:
            yield from child.iter_segments()

    def iter_compounds(self) -> Iterator[MessageCompound]:
        """Yield the choice alternatives of this reference and of every nested group."""
        yield from self.compounds
        for child in self.children:
            yield from child.iter_compounds()


@dataclass(frozen=True)
class MessageDefinition:
    """
    Schema for a message (ADT_A01, ORU_R01, ...).

    The order of `segments` is the order in which segments appear on the
    wire and is never sorted.
    """

    message_type: str
    name: str
    description: str
    segments: Tuple[SegmentReference, ...]

    def iter_segments(self) -> Iterator[SegmentReference]:
        """Yield every plain segment reference, descending into groups."""
        for ref in self.segments:
            yield from ref.iter_segments()

    def segment_codes(self) -> Tuple[str, ...]:
        """Segment codes in document order, groups flattened."""
        return tuple(ref.name for ref in self.iter_segments())

    def iter_compounds(self) -> Iterator[MessageCompound]:
        for ref in self.segments:
            yield from ref.iter_compounds()


@dataclass(frozen=True)
class TableDefinition:
    """
    Coded values of an HL7 table.

    Entries keep their authored order; `get` is a constant-time lookup.
    """

    table_id: str
    description: str
    entries: Tuple[Tuple[str, str], ...]
    _index: Mapping[str, str] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", MappingProxyType(dict(self.entries)))

    def get(self, code: Any) -> Optional[str]:
        """Return the description of `code`, or None if the table lacks it."""
        if not isinstance(code, str):
            return None
        return self._index.get(code)

    def codes(self) -> Tuple[str, ...]:
        return tuple(code for code, _ in self.entries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._index

    def __len__(self) -> int:
        return len(self.entries)
