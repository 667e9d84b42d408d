#!/usr/bin/env python3
"""
Generate the literal definition modules under src/hl7_definitions/data.

Every version package holds four plain-tuple modules (messages, segments,
datatypes, tables). This script rebuilds them from the per-version
dictionaries shipped with hl7apy (hl7apy.v2_X) plus
scripts/definitions_overlay.yaml, which supplies the names and code
descriptions hl7apy does not carry.

Rules:
- Structure comes from hl7apy: segment fields, composite components,
  message segment order, groups, and occurrence bounds.
- The modules already on disk win for descriptions, lengths and tables
  wherever the field at the same position keeps its data type, so
  hand-curated text survives a regeneration.
- Optionality follows hl7apy's occurrence bounds, except where the
  overlay's optionality section pins a field ("AD.1" or "PID-8").
- hl7apy has no 2.7.1 dictionary; 2.7.1 is written from the 2.7 one plus
  the overlay's 2.7.1 corrections.
- hl7apy 2.1 to 2.3 carry no tables. A table referenced by a field but
  missing from the version is taken from the nearest hl7apy version that
  has it. A table defined nowhere is written with no values.
- Trigger events sharing a structure (ADT_A04 uses ADT_A01) become
  aliases of that structure when the version's table 0003 lists them.

Requires hl7apy (pip install -e ".[generate]").

Examples:
    # Regenerate every version in place
    python scripts/generate_definitions.py

    # Regenerate 2.5.1 only, into a scratch directory
    python scripts/generate_definitions.py \
        --version 2.5.1 \
        --out /tmp/hl7_data
"""

from __future__ import annotations

import argparse
import importlib
import importlib.util
import re
import runpy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

import yaml

from hl7_definitions.models import Version

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUT = ROOT / "src" / "hl7_definitions" / "data"
DEFAULT_OVERLAY = Path(__file__).resolve().with_name("definitions_overlay.yaml")

# hl7apy dictionaries in release order. 2.8.x only lend table values.
HL7APY_VERSIONS = (
    "2.1",
    "2.2",
    "2.3",
    "2.3.1",
    "2.4",
    "2.5",
    "2.5.1",
    "2.6",
    "2.7",
    "2.8",
    "2.8.1",
    "2.8.2",
)

# Versions hl7apy does not ship, built from the named dictionary.
DERIVED_FROM = {"2.7.1": "2.7"}

KINDS = ("messages", "segments", "datatypes", "tables")

TITLES = {
    "messages": "message structures",
    "segments": "segment definitions",
    "datatypes": "composite data types",
    "tables": "coded value tables",
}

ACRONYMS = frozenset(
    [
        "ABO",
        "CLIA",
        "CPT",
        "DEA",
        "DNR",
        "DRG",
        "EIN",
        "HCFA",
        "ICD",
        "ID",
        "ISO",
        "MIME",
        "MPI",
        "NCPDP",
        "NDC",
        "NPI",
        "OID",
        "PSRO",
        "SSN",
        "UCUM",
        "UID",
        "UPIN",
        "UR",
        "URI",
        "URL",
    ]
)

MAX_WIDTH = 88

_TABLE_REF = re.compile(r"^HL7(\d{4})$")
_EVENT_PREFIX = re.compile(r"^[A-Z0-9]{3}(?:/[A-Z0-9]{3})*\s*-\s*")


# ------------------------------------------------------------------------------
# Sources
# ------------------------------------------------------------------------------


@dataclass
class Source:
    """The hl7apy dictionaries of one version, keyed the way hl7apy keys them."""

    messages: Mapping[str, Any] = field(default_factory=dict)
    groups: Mapping[str, Any] = field(default_factory=dict)
    segments: Mapping[str, Any] = field(default_factory=dict)
    structs: Mapping[str, Any] = field(default_factory=dict)
    tables: Dict[str, Tuple[str, Tuple[str, ...]]] = field(default_factory=dict)


def _import(name: str) -> Optional[Any]:
    if importlib.util.find_spec(name) is None:
        return None
    return importlib.import_module(name)


def load_source(version: str) -> Source:
    """Read the hl7apy dictionaries of `version`; tables are re-keyed to "0001"."""
    package = "hl7apy.v" + version.replace(".", "_")
    tables: Dict[str, Tuple[str, Tuple[str, ...]]] = {}
    module = _import(package + ".tables")
    if module is not None:
        for key, (title, codes) in module.TABLES.items():
            table_id = table_ref(key)
            if table_id is None:
                continue
            # ("Title", ("D")) is a bare string, not a one-code tuple.
            if isinstance(codes, str):
                codes = (codes,)
            tables[table_id] = (title, tuple(str(c) for c in codes))
    if version not in {v.value for v in Version}:
        return Source(tables=tables)
    return Source(
        messages=importlib.import_module(package + ".messages").MESSAGES,
        groups=importlib.import_module(package + ".groups").GROUPS,
        segments=importlib.import_module(package + ".segments").SEGMENTS,
        structs=importlib.import_module(package + ".datatypes").DATATYPES_STRUCTS,
        tables=tables,
    )


def read_existing(path: Path, kind: str) -> Dict[str, Any]:
    """Return the mapping a generated module defines, or {} if it does not exist."""
    if not path.exists():
        return {}
    return dict(runpy.run_path(str(path))[kind.upper()])


def load_overlay(path: Path) -> Dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Overlay must contain a mapping at top level: {path}")
    return data


# ------------------------------------------------------------------------------
# Mapping rules
# ------------------------------------------------------------------------------


def humanize(name: str, segment_codes: FrozenSet[str] = frozenset()) -> str:
    """
    Turn an hl7apy long name into a description.

    "DATE_TIME_OF_MESSAGE" becomes "Date Time Of Message". Acronyms, words
    with digits and a trailing segment code ("SET_ID_PID") stay upper case.
    """
    words = [w for w in name.split("_") if w]
    out = []
    for i, word in enumerate(words):
        keep = (
            word in ACRONYMS
            or any(ch.isdigit() for ch in word)
            or (0 < i == len(words) - 1 and word in segment_codes)
        )
        out.append(word if keep else word.capitalize())
    return " ".join(out)


def occurrence(bounds: Sequence[int]) -> Tuple[str, int]:
    """Map hl7apy (min, max) bounds to an optionality code and a repeat count."""
    low, high = bounds
    if high == 0:
        optionality = "B"
    elif low >= 1:
        optionality = "R"
    else:
        optionality = "O"
    if high == -1:
        repeat = 0
    elif high == 0:
        repeat = 1
    else:
        repeat = high
    return optionality, repeat


def table_ref(value: Any) -> Optional[str]:
    """Map "HL70001" to "0001"; anything else to None."""
    if not isinstance(value, str):
        return None
    match = _TABLE_REF.match(value)
    return match.group(1) if match else None


def build_field(
    entry: Sequence[Any],
    existing: Optional[Sequence[Any]],
    segment_codes: FrozenSet[str] = frozenset(),
) -> Tuple[Any, ...]:
    """
    Build one field literal from an hl7apy child entry.

    `entry` is ``(name, (kind, struct, datatype, long_name, table, length), (min, max), tag)``;
    `existing` is the field already written at the same position, if any.
    """
    name, spec, bounds, _tag = entry
    datatype, long_name, table = spec[2], spec[3], spec[4]
    optionality, repeat = occurrence(bounds)
    if datatype is None:
        datatype = existing[0] if existing else "varies"
    elif datatype != "varies":
        datatype = datatype.upper()
    description = humanize(long_name or name, segment_codes)
    length = None
    table_id = table_ref(table)
    if existing is not None and existing[0] == datatype:
        description, length = existing[1], existing[4]
        if table_id is None:
            table_id = existing[5]
    return (datatype, description, optionality, repeat, length, table_id)


def _children(spec: Sequence[Any]) -> Sequence[Any]:
    """Children of an hl7apy (kind, children) entry; 2.1 ORO omits the kind."""
    return spec[1] if isinstance(spec[0], str) else spec


def _build_fields(
    children: Sequence[Any],
    existing: Sequence[Any],
    segment_codes: FrozenSet[str],
) -> Tuple[Tuple[Any, ...], ...]:
    return tuple(
        build_field(child, existing[i] if i < len(existing) else None, segment_codes)
        for i, child in enumerate(children)
    )


def build_segments(
    source: Source, existing: Mapping[str, Any], names: Mapping[str, str]
) -> Dict[str, Any]:
    codes = frozenset(source.segments)
    out: Dict[str, Any] = {}
    for code in sorted(set(source.segments) | set(existing)):
        old = existing.get(code)
        if code not in source.segments:
            out[code] = old
            continue
        description = old[0] if old else names.get(code, code)
        fields = _build_fields(
            _children(source.segments[code]), old[1] if old else (), codes
        )
        out[code] = (description, fields)
    return out


def apply_optionality(
    segments: Dict[str, Any], datatypes: Dict[str, Any], fixes: Mapping[str, str]
) -> None:
    """
    Overwrite optionality codes in place.

    Keys name a segment field as "PID-8" or a data type component as
    "AD.1"; positions are 1-based. Keys that match nothing are ignored.
    """
    for key, code in fixes.items():
        if "-" in key:
            name, _, position = key.partition("-")
            target = segments
        else:
            name, _, position = key.partition(".")
            target = datatypes
        index = int(position) - 1
        if name not in target or not 0 <= index < len(target[name][1]):
            continue
        description, fields = target[name]
        fixed = list(fields)
        fixed[index] = fixed[index][:2] + (code,) + fixed[index][3:]
        target[name] = (description, tuple(fixed))


def datatype_description(
    code: str, existing: Mapping[str, Any], names: Mapping[str, str]
) -> str:
    if code in existing:
        return existing[code][0]
    if code in names:
        return names[code]
    if code.endswith("_SIMPLE"):
        return datatype_description(code[: -len("_SIMPLE")], existing, names)
    if code.startswith("CM_"):
        return humanize(code[len("CM_") :])
    return code


def build_datatypes(
    source: Source,
    existing: Mapping[str, Any],
    names: Mapping[str, str],
    segment_codes: FrozenSet[str],
) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for code in sorted(set(source.structs) | set(existing)):
        old = existing.get(code)
        if code not in source.structs:
            out[code] = old
            continue
        components = _build_fields(
            source.structs[code], old[1] if old else (), segment_codes
        )
        out[code] = (datatype_description(code, existing, names), components)
    return out


# ------------------------------------------------------------------------------
# Tables
# ------------------------------------------------------------------------------


def _nearest_table(
    table_id: str, version: str, sources: Mapping[str, Source]
) -> Optional[Tuple[str, Tuple[str, ...]]]:
    base = HL7APY_VERSIONS.index(DERIVED_FROM.get(version, version))
    ranked = sorted(range(len(HL7APY_VERSIONS)), key=lambda i: (abs(i - base), i))
    for index in ranked:
        source = sources.get(HL7APY_VERSIONS[index])
        if source is not None and table_id in source.tables:
            return source.tables[table_id]
    return None


def _references(
    segments: Mapping[str, Any], datatypes: Mapping[str, Any]
) -> Dict[str, str]:
    """Table id -> description of the first field that references it."""
    refs: Dict[str, str] = {}
    for definitions in (segments, datatypes):
        for _code, (_description, fields) in definitions.items():
            for f in fields:
                if f[5] is not None:
                    refs.setdefault(f[5], f[1])
    return refs


def build_tables(
    version: str,
    sources: Mapping[str, Source],
    existing: Mapping[str, Any],
    overlay: Mapping[str, Any],
    referenced: Mapping[str, str],
) -> Dict[str, Any]:
    """
    Build the tables module of one version.

    Codes come from the version's own hl7apy dictionary, then from the
    existing module, then from the nearest hl7apy version that has the
    table.
    """
    own = sources[DERIVED_FROM.get(version, version)].tables
    values = overlay.get("table_values") or {}
    out: Dict[str, Any] = {}
    for table_id in sorted(set(own) | set(existing) | set(referenced)):
        old = existing.get(table_id)
        if table_id in own:
            found: Optional[Tuple[str, Tuple[str, ...]]] = own[table_id]
        elif old is not None:
            out[table_id] = old
            continue
        else:
            found = _nearest_table(table_id, version, sources)
        if found is None:
            out[table_id] = (referenced[table_id], ())
            continue
        title, codes = found
        known = dict(old[1]) if old else {}
        extra = values.get(table_id) or {}
        entries = []
        for code in dict.fromkeys(codes):
            entries.append((code, known.get(code) or extra.get(code) or code))
        description = (old[0] if old else "") or title or referenced.get(table_id, table_id)
        out[table_id] = (description, tuple(entries))

    corrections = (overlay.get("corrections") or {}).get(version) or {}
    for table_id, fixes in corrections.items():
        if table_id not in out:
            continue
        description, entries = out[table_id]
        present = {code for code, _ in entries}
        added = tuple((c, d) for c, d in fixes.items() if c not in present)
        out[table_id] = (description, tuple(entries) + added)
    return out


# ------------------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------------------


def build_reference(
    entry: Sequence[Any],
    message_key: str,
    groups: Mapping[str, Any],
    segment_names: Mapping[str, str],
    segment_codes: FrozenSet[str] = frozenset(),
) -> Optional[Tuple[Any, ...]]:
    """
    Build a segment reference literal from an hl7apy message or group child.

    Groups are resolved by name and lose their ``<message>_`` prefix. A
    choice group also lists its alternatives as compounds. A group without
    members (2.4 QBP_Q13 QBP) yields None.
    """
    name, _spec, (low, high), tag = entry
    if tag != "GRP":
        return (name, segment_names.get(name, name), low, high)
    kind, members = groups[name]
    children = build_references(
        members, message_key, groups, segment_names, segment_codes
    )
    if not children:
        return None
    prefix = message_key + "_"
    short = name[len(prefix) :] if name.startswith(prefix) else name
    ref: Tuple[Any, ...] = (short, humanize(short, segment_codes), low, high, children)
    if kind == "choice":
        ref += (tuple(child[:4] for child in children),)
    return ref


def build_references(
    members: Sequence[Any],
    message_key: str,
    groups: Mapping[str, Any],
    segment_names: Mapping[str, str],
    segment_codes: FrozenSet[str] = frozenset(),
) -> Tuple[Tuple[Any, ...], ...]:
    built = (
        build_reference(m, message_key, groups, segment_names, segment_codes)
        for m in members
    )
    return tuple(ref for ref in built if ref is not None)


def _table_text(tables: Mapping[str, Any], table_id: str, code: str) -> Optional[str]:
    table = tables.get(table_id)
    if table is None:
        return None
    for value, description in table[1]:
        if value == code and description != code:
            return description
    return None


def message_description(
    key: str,
    existing: Mapping[str, Any],
    names: Mapping[str, str],
    tables: Mapping[str, Any],
) -> str:
    if key in existing:
        return existing[key][1]
    if key in names:
        return names[key]
    code, _, event = key.partition("_")
    text = _table_text(tables, "0003", event)
    if text:
        return _EVENT_PREFIX.sub("", text)
    return _table_text(tables, "0076", code) or key


class _Name(str):
    """A bare identifier in generated source."""


def build_messages(
    source: Source,
    existing: Mapping[str, Any],
    overlay: Mapping[str, Any],
    tables: Mapping[str, Any],
    segments: Mapping[str, Any],
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Return ``(constants, messages)`` for the messages module."""
    segment_names = {code: value[0] for code, value in segments.items()}
    codes = frozenset(segments)
    structures = {
        key: build_references(
            _children(spec), key, source.groups, segment_names, codes
        )
        for key, spec in source.messages.items()
    }

    events = None
    if "0003" in tables:
        events = {code for code, _ in tables["0003"][1]}
    aliases: Dict[str, str] = {}
    for structure, members in (overlay.get("message_structures") or {}).items():
        if structure not in structures:
            continue
        prefix = structure.split("_")[0]
        for event in members:
            alias = f"{prefix}_{event}"
            if alias in structures or alias in aliases:
                continue
            if events is not None and event not in events:
                continue
            aliases[alias] = structure
    for key, value in existing.items():
        if key not in structures and key not in aliases and value[0] in structures:
            aliases[key] = value[0]

    names = overlay.get("messages") or {}
    shared = set(aliases.values())
    constants = {f"_{s}": structures[s] for s in sorted(shared)}
    out: Dict[str, Any] = {}
    for key in sorted(set(structures) | set(aliases) | set(existing)):
        description = message_description(key, existing, names, tables)
        if key in structures:
            body = _Name(f"_{key}") if key in shared else structures[key]
            out[key] = (key, description, body)
        elif key in aliases:
            out[key] = (aliases[key], description, _Name(f"_{aliases[key]}"))
        else:
            out[key] = existing[key]
    return constants, out


# ------------------------------------------------------------------------------
# Source rendering
# ------------------------------------------------------------------------------


def _literal(value: Any) -> str:
    if isinstance(value, _Name):
        return str(value)
    if value is None:
        return "None"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    if isinstance(value, tuple):
        if len(value) == 1:
            return f"({_literal(value[0])},)"
        return "(" + ", ".join(_literal(v) for v in value) + ")"
    raise TypeError(f"Cannot render {type(value).__name__}: {value!r}")


def format_value(value: Any, indent: int, lead: str = "", tail: str = ",") -> List[str]:
    """Render `value` on one line if it fits, else one tuple item per line."""
    pad = " " * indent
    line = pad + lead + _literal(value) + tail
    if not isinstance(value, tuple) or not value or len(line) <= MAX_WIDTH:
        return [line]
    lines = [pad + lead + "("]
    for item in value:
        lines.extend(format_value(item, indent + 4))
    lines.append(pad + ")" + tail)
    return lines


def render_module(
    version: str,
    kind: str,
    mapping: Mapping[str, Any],
    constants: Optional[Mapping[str, Any]] = None,
) -> str:
    package = "v" + version.replace(".", "_")
    lines = [
        f"# src/hl7_definitions/data/{package}/{kind}.py",
        f'"""HL7 v{version} {TITLES[kind]}."""',
        "",
    ]
    for name, value in (constants or {}).items():
        lines.extend(format_value(value, 0, f"{name} = ", ""))
        lines.append("")
    if not mapping:
        lines.append(f"{kind.upper()} = {{}}")
    else:
        lines.append(f"{kind.upper()} = {{")
        for key, value in mapping.items():
            lines.extend(format_value(value, 4, f"{_literal(key)}: "))
        lines.append("}")
    return "\n".join(lines) + "\n"


# ------------------------------------------------------------------------------
# Driver
# ------------------------------------------------------------------------------


def generate_version(
    version: str, out: Path, sources: Mapping[str, Source], overlay: Mapping[str, Any]
) -> Dict[str, int]:
    package = out / ("v" + version.replace(".", "_"))
    existing = {kind: read_existing(package / f"{kind}.py", kind) for kind in KINDS}
    source = sources[DERIVED_FROM.get(version, version)]

    segments = build_segments(
        source, existing["segments"], overlay.get("segments") or {}
    )
    codes = frozenset(segments)
    datatypes = build_datatypes(
        source, existing["datatypes"], overlay.get("datatypes") or {}, codes
    )
    apply_optionality(
        segments, datatypes, (overlay.get("optionality") or {}).get(version) or {}
    )
    tables = build_tables(
        version,
        sources,
        existing["tables"],
        overlay,
        _references(segments, datatypes),
    )
    constants, messages = build_messages(
        source, existing["messages"], overlay, tables, segments
    )

    package.mkdir(parents=True, exist_ok=True)
    init = package / "__init__.py"
    if not init.exists():
        init.write_text(f'"""HL7 v{version} definitions."""\n', encoding="utf-8")
    written = {
        "messages": (messages, constants),
        "segments": (segments, None),
        "datatypes": (datatypes, None),
        "tables": (tables, None),
    }
    for kind, (mapping, consts) in written.items():
        text = render_module(version, kind, mapping, consts)
        (package / f"{kind}.py").write_text(text, encoding="utf-8")
    return {kind: len(mapping) for kind, (mapping, _) in written.items()}


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Generate the HL7 v2 definition modules from hl7apy."
    )
    ap.add_argument(
        "--out",
        type=Path,
        default=DEFAULT_OUT,
        help="Data package directory to write (default src/hl7_definitions/data).",
    )
    ap.add_argument(
        "--version",
        action="append",
        choices=[v.value for v in Version],
        default=None,
        help="Version to generate; repeat for several (default: all).",
    )
    ap.add_argument(
        "--overlay",
        type=Path,
        default=DEFAULT_OVERLAY,
        help="YAML file with names and code descriptions hl7apy lacks.",
    )
    return ap.parse_args()


def main() -> None:
    args = parse_args()
    overlay = load_overlay(args.overlay)
    sources = {version: load_source(version) for version in HL7APY_VERSIONS}
    versions = args.version or [v.value for v in Version]

    for version in versions:
        counts = generate_version(version, args.out, sources, overlay)
        print(
            f"Generated HL7 {version}: {counts['messages']} messages, "
            f"{counts['segments']} segments, {counts['datatypes']} datatypes, "
            f"{counts['tables']} tables"
        )


if __name__ == "__main__":
    main()
