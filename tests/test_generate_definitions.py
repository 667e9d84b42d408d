# tests/test_generate_definitions.py
"""
Tests for scripts/generate_definitions.py.

The mapping rules run against small hand-built hl7apy-shaped dictionaries;
only the last section needs hl7apy itself and is skipped without it.
"""

import importlib.util
import sys
from pathlib import Path

import pytest

from hl7_definitions import data
from hl7_definitions.models import Version

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "generate_definitions.py"


@pytest.fixture(scope="module")
def gen():
    spec = importlib.util.spec_from_file_location("generate_definitions", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)
        yield module
    finally:
        sys.modules.pop(spec.name, None)


def _seg(name, low=1, high=1):
    return (name, None, (low, high), "SEG")


def _leaf(name, datatype, long_name, table=None, bounds=(0, 1)):
    return (name, ("leaf", None, datatype, long_name, table, -1), bounds, "FIE")


# ------------------------------------------------------------------------------
# Naming and occurrence rules
# ------------------------------------------------------------------------------


@pytest.mark.parametrize(
    "name, codes, expected",
    [
        ("DATE_TIME_OF_MESSAGE", frozenset(), "Date Time Of Message"),
        ("SET_ID_PID", frozenset({"PID"}), "Set ID PID"),
        ("SET_ID_PID", frozenset(), "Set ID Pid"),
        ("ADDRESS_LINE_2", frozenset(), "Address Line 2"),
        ("PATIENT_SSN__NUMBER", frozenset(), "Patient SSN Number"),
    ],
)
def test_humanize(gen, name, codes, expected):
    assert gen.humanize(name, codes) == expected


@pytest.mark.parametrize(
    "bounds, expected",
    [
        ((1, 1), ("R", 1)),
        ((0, 1), ("O", 1)),
        ((0, -1), ("O", 0)),
        ((1, -1), ("R", 0)),
        ((0, 3), ("O", 3)),
        ((0, 0), ("B", 1)),
    ],
)
def test_occurrence(gen, bounds, expected):
    assert gen.occurrence(bounds) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("HL70001", "0001"), ("HL70396", "0396"), ("HL7001", None), ("0001", None), (None, None), (1, None)],
)
def test_table_ref(gen, value, expected):
    assert gen.table_ref(value) == expected


# ------------------------------------------------------------------------------
# Fields
# ------------------------------------------------------------------------------


def test_build_field_from_hl7apy_entry(gen):
    entry = _leaf("PID_8", "IS", "ADMINISTRATIVE_SEX", "HL70001")
    assert gen.build_field(entry, None) == ("IS", "Administrative Sex", "O", 1, None, "0001")


def test_build_field_keeps_curated_text_when_datatype_matches(gen):
    entry = _leaf("PID_8", "IS", "ADMINISTRATIVE_SEX", None)
    existing = ("IS", "Sex", "O", 1, 1, "0001")
    assert gen.build_field(entry, existing) == ("IS", "Sex", "O", 1, 1, "0001")


def test_build_field_drops_curated_text_when_datatype_changes(gen):
    entry = _leaf("OBX_20", "CWE", "OBSERVATION_SITE", "HL70163", bounds=(0, -1))
    existing = ("ST", "Reserved", "O", 1, 10, None)
    assert gen.build_field(entry, existing) == ("CWE", "Observation Site", "O", 0, None, "0163")


def test_build_field_datatype_spelling(gen):
    assert gen.build_field(_leaf("X_1", "wd", "WITHDRAWN"), None)[0] == "WD"
    assert gen.build_field(_leaf("X_1", "varies", "VALUE"), None)[0] == "varies"
    assert gen.build_field(_leaf("X_1", None, "VALUE"), None)[0] == "varies"
    assert gen.build_field(_leaf("X_1", None, "VALUE"), ("NM", "Value", "O", 1, 5, None))[0] == "NM"


def test_build_segments_numbers_fields_in_hl7apy_order(gen):
    source = gen.Source(
        segments={
            "ZPI": (
                "sequence",
                (_leaf("ZPI_1", "SI", "SET_ID_ZPI"), _leaf("ZPI_2", "ST", "PET_NAME")),
            )
        }
    )
    out = gen.build_segments(source, {"ZLD": ("Legacy", ())}, {"ZPI": "Pet Information"})
    assert out["ZPI"] == (
        "Pet Information",
        (("SI", "Set ID ZPI", "O", 1, None, None), ("ST", "Pet Name", "O", 1, None, None)),
    )
    assert out["ZLD"] == ("Legacy", ())


def test_apply_optionality_pins_fields_and_components(gen):
    segments = {"PID": ("Patient", (("SI", "Set ID", "O", 1, 4, None), ("IS", "Sex", "O", 1, 1, "0001")))}
    datatypes = {"AD": ("Address", (("ST", "Street Address", "O", 1, 120, None),))}
    gen.apply_optionality(segments, datatypes, {"PID-2": "R", "AD.1": "R", "AD.9": "R", "ZZZ-1": "R"})
    assert segments["PID"][1] == (("SI", "Set ID", "O", 1, 4, None), ("IS", "Sex", "R", 1, 1, "0001"))
    assert datatypes["AD"][1] == (("ST", "Street Address", "R", 1, 120, None),)
    assert gen.load_overlay(gen.DEFAULT_OVERLAY)["optionality"]["2.5.1"] == {"AD.1": "R"}


@pytest.mark.parametrize(
    "code, expected",
    [("XPN","Extended Person Name"), ("CE_SIMPLE", "Coded Element"), ("CM_PAT_ID", "Pat ID"), ("ZZ", "ZZ")],
)
def test_datatype_description(gen, code, expected):
    names = {"XPN": "Extended Person Name", "CE": "Coded Element"}
    assert gen.datatype_description(code, {}, names) == expected


# ------------------------------------------------------------------------------
# Tables
# ------------------------------------------------------------------------------


def test_build_tables_sources_in_priority_order(gen):
    sources = {
        "2.2": gen.Source(tables={"0005": ("Race", ("W",))}),
        "2.3": gen.Source(tables={"0007": ("Admission Type", ("E", "R"))}),
        "2.3.1": gen.Source(tables={"0005": ("Ethnic Group", ("B",)), "0001": ("Sex", ("F", "M"))}),
    }
    existing = {"0002": ("Marital Status", (("S", "Single"),))}
    overlay = {"table_values": {"0005": {"W": "White"}, "0007": {"E": "Emergency"}}}
    referenced = {"0001": "Sex", "0005": "Race", "0009": "Ambulatory Status"}

    out = gen.build_tables("2.3", sources, existing, overlay, referenced)

    assert list(out) == ["0001", "0002", "0005", "0007", "0009"]
    assert out["0007"] == ("Admission Type", (("E", "Emergency"), ("R", "R")))
    assert out["0002"] == existing["0002"]
    # equally near 2.2 and 2.3.1: the earlier release wins
    assert out["0005"] == ("Race", (("W", "White"),))
    assert out["0001"] == ("Sex", (("F", "F"), ("M", "M")))
    assert out["0009"] == ("Ambulatory Status", ())


def test_build_tables_existing_descriptions_win(gen):
    sources = {"2.5": gen.Source(tables={"0001": ("Sex", ("F", "M", "U"))})}
    existing = {"0001": ("Administrative Sex", (("F", "Female"), ("M", "Male")))}
    out = gen.build_tables("2.5", sources, existing, {}, {})
    assert out["0001"] == (
        "Administrative Sex",
        (("F", "Female"), ("M", "Male"), ("U", "U")),
    )


def test_build_tables_applies_version_corrections(gen):
    sources = {"2.7": gen.Source(tables={"0104": ("Version ID", ("2.6", "2.7"))})}
    overlay = {
        "table_values": {"0104": {"2.6": "Release 2.6", "2.7": "Release 2.7"}},
        "corrections": {"2.7.1": {"0104": {"2.7": "ignored", "2.7.1": "Release 2.7.1"}}},
    }
    derived = gen.build_tables("2.7.1", sources, {}, overlay, {})
    assert derived["0104"][1] == (
        ("2.6", "Release 2.6"),
        ("2.7", "Release 2.7"),
        ("2.7.1", "Release 2.7.1"),
    )
    plain = gen.build_tables("2.7", sources, {}, overlay, {})
    assert ("2.7.1", "Release 2.7.1") not in plain["0104"][1]


def test_references_names_tables_after_first_field(gen):
    segments = {"PID": ("Patient", (("IS", "Sex", "O", 1, 1, "0001"),))}
    datatypes = {"XX": ("Thing", (("IS", "Gender", "O", 1, 1, "0001"), ("ID", "Kind", "O", 1, 1, "0002")))}
    assert gen._references(segments, datatypes) == {"0001": "Sex", "0002": "Kind"}


# ------------------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------------------


_GROUPS = {
    "ORM_O01_ORDER": ("sequence", (_seg("ORC"), ["ORM_O01_DETAIL", None, (1, 1), "GRP"])),
    "ORM_O01_DETAIL": ("choice", (_seg("OBR"), _seg("RXO"))),
    "ORM_O01_EMPTY": ("sequence", ()),
}

_NAMES = {"MSH": "Message Header", "ORC": "Common Order", "OBR": "Observation Request", "RXO": "Pharmacy Order"}


def test_build_reference_plain_segment(gen):
    assert gen.build_reference(_seg("MSH"), "ORM_O01", _GROUPS, _NAMES) == (
        "MSH",
        "Message Header",
        1,
        1,
    )


def test_build_reference_group_strips_prefix_and_lists_choices(gen):
    entry = ("ORM_O01_ORDER", None, (1, -1), "GRP")
    ref = gen.build_reference(entry, "ORM_O01", _GROUPS, _NAMES)
    detail = (("OBR", "Observation Request", 1, 1), ("RXO", "Pharmacy Order", 1, 1))
    assert ref == (
        "ORDER",
        "Order",
        1,
        -1,
        (("ORC", "Common Order", 1, 1), ("DETAIL", "Detail", 1, 1, detail, detail)),
    )


def test_build_references_drops_empty_groups(gen):
    members = (_seg("MSH"), ("ORM_O01_EMPTY", None, (0, 1), "GRP"))
    assert gen.build_references(members, "ORM_O01", _GROUPS, _NAMES) == (
        ("MSH", "Message Header", 1, 1),
    )


def test_message_description_lookup_order(gen):
    tables = {
        "0003": ("Event Type", (("A01", "ADT/ACK - Admit/visit notification"), ("Q01", "Q01"))),
        "0076": ("Message Type", (("QRY", "Query, original mode"),)),
    }
    existing = {"ACK": ("ACK", "General acknowledgment", ())}
    names = {"MFN_Znn": "Master files notification, site specific"}
    assert gen.message_description("ACK", existing, names, tables) == "General acknowledgment"
    assert gen.message_description("MFN_Znn", {}, names, tables) == names["MFN_Znn"]
    assert gen.message_description("ADT_A01", {}, names, tables) == "Admit/visit notification"
    assert gen.message_description("QRY_Q01", {}, names, tables) == "Query, original mode"
    assert gen.message_description("ZZZ_Z01", {}, names, tables) == "ZZZ_Z01"


def test_build_messages_aliases_listed_events(gen):
    source = gen.Source(
        messages={"ADT_A01": ("sequence", (_seg("MSH"), _seg("PID"))), "ACK": ("sequence", (_seg("MSH"),))},
    )
    tables = {"0003": ("Event Type", (("A01", "ADT/ACK - Admit"), ("A04", "ADT/ACK - Register")))}
    overlay = {"message_structures": {"ADT_A01": ["A01", "A04", "A05"]}}
    segments = {"MSH": ("Message Header", ()), "PID": ("Patient Identification", ())}

    constants, messages = gen.build_messages(source, {}, overlay, tables, segments)

    structure = (("MSH", "Message Header", 1, 1), ("PID", "Patient Identification", 1, 1))
    assert constants == {"_ADT_A01": structure}
    assert list(messages) == ["ACK", "ADT_A01", "ADT_A04"]
    assert messages["ADT_A04"] == ("ADT_A01", "Register", "_ADT_A01")
    assert messages["ADT_A01"] == ("ADT_A01", "Admit", "_ADT_A01")
    assert messages["ACK"][2] == (("MSH", "Message Header", 1, 1),)


# ------------------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------------------


def test_literal_quotes_and_single_item_tuples(gen):
    assert gen._literal(("A", None, 1, ("x",))) == '("A", None, 1, ("x",))'
    assert gen._literal('say "hi" \\ bye') == '"say \\"hi\\" \\\\ bye"'
    with pytest.raises(TypeError, match=r"^Cannot render list"):
        gen._literal(["A"])


def test_format_value_wraps_long_tuples(gen):
    short = gen.format_value(("ST", "Name"), 4, '"X": ')
    assert short == ['    "X": ("ST", "Name"),']

    long_value = tuple(f"Component number {i}" for i in range(6))
    lines = gen.format_value(long_value, 4, '"X": ')
    assert lines[0] == '    "X": ('
    assert lines[1] == '        "Component number 0",'
    assert lines[-1] == "    ),"
    assert all(len(line) <= gen.MAX_WIDTH for line in lines)


def test_render_module_executes_to_the_same_mapping(gen):
    constants = {"_ADT_A01": (("MSH", "Message Header", 1, 1),)}
    messages = {"ADT_A04": ("ADT_A01", "Register", gen._Name("_ADT_A01"))}
    text = gen.render_module("2.5", "messages", messages, constants)
    assert text.startswith('# src/hl7_definitions/data/v2_5/messages.py\n"""HL7 v2.5 message structures."""\n')

    namespace = {}
    exec(compile(text, "messages.py", "exec"), namespace)
    assert namespace["MESSAGES"] == {"ADT_A04": ("ADT_A01", "Register", constants["_ADT_A01"])}


def test_render_module_empty_mapping(gen):
    assert gen.render_module("2.1", "tables", {}).endswith("\nTABLES = {}\n")


def test_generate_version_round_trips_its_own_output(gen, tmp_path):
    sources = {
        "2.5": gen.Source(
            messages={"ACK": ("sequence", (_seg("MSH"),))},
            segments={"MSH": ("sequence", (_leaf("MSH_1", "ST", "FIELD_SEPARATOR", bounds=(1, 1)),))},
            tables={"0008": ("Acknowledgment Code", ("AA",))},
        )
    }
    overlay = {"table_values": {"0008": {"AA": "Application Accept"}}}

    first = gen.generate_version("2.5", tmp_path, sources, overlay)
    written = {p.name: p.read_text() for p in (tmp_path / "v2_5").iterdir()}
    second = gen.generate_version("2.5", tmp_path, sources, overlay)

    assert first == second == {"messages": 1, "segments": 1, "datatypes": 0, "tables": 1}
    assert {p.name: p.read_text() for p in (tmp_path / "v2_5").iterdir()} == written
    assert "__init__.py" in written
    assert '"0008": ("Acknowledgment Code", (("AA", "Application Accept"),)),' in written["tables.py"]


def test_overlay_file_is_a_mapping(gen):
    overlay = gen.load_overlay(gen.DEFAULT_OVERLAY)
    assert {"segments", "messages", "message_structures", "table_values", "corrections"} <= set(overlay)
    assert overlay["corrections"]["2.7.1"]["0104"]["2.7.1"] == "Release 2.7.1"


def test_load_overlay_rejects_non_mapping(gen, tmp_path):
    p = tmp_path / "overlay.yaml"
    p.write_text("- segments\n")
    with pytest.raises(TypeError, match=r"^Overlay must contain a mapping"):
        gen.load_overlay(p)


# ------------------------------------------------------------------------------
# Against hl7apy
# ------------------------------------------------------------------------------


@pytest.mark.parametrize("version", list(Version), ids=str)
def test_shipped_segments_match_hl7apy(gen, version):
    pytest.importorskip("hl7apy")
    source = gen.load_source(gen.DERIVED_FROM.get(version.value, version.value))
    shipped = data.load_module(version, "segments").SEGMENTS
    assert set(source.segments) <= set(shipped)
    for code, spec in source.segments.items():
        assert len(shipped[code][1]) == len(gen._children(spec)), code
