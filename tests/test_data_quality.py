# tests/test_data_quality.py
"""
Regression tests for the literal definition data shipped with each version.

These check properties of the generated data rather than of the code.
Every message round-trips and starts with MSH. Every segment, data type
and table a definition points at exists in the same version. Spot checks
pin a few well-known definitions.
"""

import pytest

from hl7_definitions import data
from hl7_definitions.loader import build_message, build_segment, build_table
from hl7_definitions.models import PRIMITIVE_DATATYPES, Optionality, Version

ALL_VERSIONS = list(Version)

COMMON_MESSAGES = ("ACK", "ADT_A01", "ADT_A03", "ADT_A04", "ADT_A08", "ORU_R01")


def _literal(version, kind):
    return getattr(data.load_module(version, kind), kind.upper())


# ------------------------------------------------------------------------------
# Round trip
# ------------------------------------------------------------------------------


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_every_message_round_trips(full_registry, version):
    messages = _literal(version, "messages")
    assert messages
    for message_type, raw in messages.items():
        assert full_registry.get_message(version, message_type) == build_message(
            message_type, raw
        )


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_every_segment_round_trips(full_registry, version):
    for code, raw in _literal(version, "segments").items():
        assert full_registry.get_segment(version, code) == build_segment(code, raw)


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_every_table_round_trips(full_registry, version):
    for table_id, raw in _literal(version, "tables").items():
        assert full_registry.get_table(version, table_id) == build_table(table_id, raw)


# ------------------------------------------------------------------------------
# Structural properties
# ------------------------------------------------------------------------------


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_referential_completeness(full_registry, version):
    assert full_registry.unresolved_segment_references(version) == ()
    defs = full_registry.get_definition(version)
    for message in defs.messages.values():
        for code in message.segment_codes():
            assert full_registry.get_segment(version, code) is not None


def _all_fields(defs):
    for segment in defs.segments.values():
        for position, f in enumerate(segment.fields, start=1):
            yield f"{segment.code}-{position}", f
    for datatype in defs.datatypes.values():
        for position, f in enumerate(datatype.components, start=1):
            yield f"{datatype.code}.{position}", f


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_every_field_table_resolves(full_registry, version):
    defs = full_registry.get_definition(version)
    missing = [
        (where, f.table)
        for where, f in _all_fields(defs)
        if f.table is not None and full_registry.get_table(version, f.table) is None
    ]
    assert missing == []


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_every_field_datatype_resolves(full_registry, version):
    defs = full_registry.get_definition(version)
    missing = [
        (where, f.datatype)
        for where, f in _all_fields(defs)
        if f.datatype not in PRIMITIVE_DATATYPES
        and full_registry.get_datatype(version, f.datatype) is None
    ]
    assert missing == []


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_primitive_datatypes_are_not_composites(full_registry, version):
    datatypes = full_registry.get_definition(version).datatypes
    assert PRIMITIVE_DATATYPES.isdisjoint(datatypes)


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_every_message_starts_with_msh(full_registry, version):
    for message in full_registry.get_definition(version).messages.values():
        first = message.segments[0]
        assert first.name == "MSH"
        assert first.min == 1 and first.max == 1


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_common_messages_present(full_registry, version):
    for message_type in COMMON_MESSAGES:
        assert full_registry.get_message(version, message_type) is not None


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_adt_a04_and_a08_share_the_a01_structure(full_registry, version):
    a01 = full_registry.get_message(version, "ADT_A01")
    for message_type in ("ADT_A04", "ADT_A08"):
        msg = full_registry.get_message(version, message_type)
        assert msg.segments == a01.segments
        # 2.1 and 2.2 predate named message structures
        if version not in (Version.V2_1, Version.V2_2):
            assert msg.name == "ADT_A01"


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_table_ids_and_codes(full_registry, version):
    for table_id, table in full_registry.get_definition(version).tables.items():
        assert len(table_id) == 4 and table_id.isdigit()
        assert table.description
        assert len(set(table.codes())) == len(table)


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_version_table_lists_own_version(full_registry, version):
    assert full_registry.table_value(version, "0104", version.value) is not None


@pytest.mark.parametrize("version", ALL_VERSIONS, ids=str)
def test_message_header_field_nine_is_message_type(full_registry, version):
    msh9 = full_registry.get_segment(version, "MSH").field(9)
    assert msh9.description.lower() == "message type"
    assert msh9.required


# ------------------------------------------------------------------------------
# Spot checks
# ------------------------------------------------------------------------------


def test_v251_msh(full_registry):
    msh = full_registry.get_segment("2.5.1", "MSH")
    assert len(msh.fields) == 21
    assert msh.field(10).description == "Message Control ID"
    assert msh.field(10).required


def test_v23_msh_security_is_optional(full_registry):
    security = full_registry.get_segment("2.3", "MSH").field(8)
    assert security.description == "Security"
    assert security.optionality is Optionality.OPTIONAL


def test_v251_adt_a01_top_level_references(full_registry):
    msg = full_registry.get_message("2.5.1", "ADT_A01")
    assert len(msg.segments) == 22
    assert [ref.name for ref in msg.segments[:5]] == ["MSH", "SFT", "EVN", "PID", "PD1"]


def test_v251_query_priority_table(full_registry):
    assert full_registry.table_values("2.5.1", "0091") == (
        ("D", "Deferred"),
        ("I", "Immediate"),
    )


def test_v251_address_datatype(full_registry):
    ad = full_registry.get_datatype("2.5.1", "AD")
    assert len(ad.components) == 8
    street = ad.components[0]
    assert street.datatype == "ST"
    assert street.description == "Street Address"
    assert street.optionality is Optionality.REQUIRED
    assert street.repeatability.single
    assert street.max_length == 120


def test_v251_event_type_a08_description(full_registry):
    assert (
        full_registry.table_value("2.5.1", "0003", "A08")
        == "ADT/ACK -  Update patient information"
    )


def test_observation_fields_differ_between_versions(full_registry):
    assert len(full_registry.get_segment("2.5", "OBX").fields) == 19
    obx_251 = full_registry.get_segment("2.5.1", "OBX")
    obx_26 = full_registry.get_segment("2.6", "OBX")
    assert obx_251.field(20).description == "Reserved for harmonization with V2.6"
    assert obx_26.field(20).description == "Observation Site"
    assert obx_26.field(20).datatype == "CWE"


def test_poa_indicator_table_starts_in_v251(full_registry):
    assert full_registry.get_table("2.5", "0895") is None
    assert full_registry.table_value("2.5.1", "0895", "Y") == "Yes"


def test_v27_header_and_participation(full_registry):
    assert len(full_registry.get_segment("2.7", "MSH").fields) == 25
    assert full_registry.get_segment("2.6", "PRT") is None
    oru = full_registry.get_message("2.7", "ORU_R01")
    assert "PRT" in oru.segment_codes()


def test_v21_acknowledgment_and_tables(full_registry):
    ack = full_registry.get_message("2.1", "ACK")
    assert ack.segment_codes() == ("MSH", "MSA", "ERR")
    assert full_registry.get_table("2.1", "0136") is None
    assert full_registry.table_value("2.1", "0001", "F") == "Female"


def test_v251_order_detail_is_a_choice_group(full_registry):
    order = full_registry.get_message("2.5.1", "ORM_O01").segments[3]
    assert order.name == "ORDER"
    choice = order.children[1].children[0]
    assert choice.is_choice
    assert [c.name for c in choice.compounds] == ["OBR", "RQD", "RQ1", "RXO", "ODS", "ODT"]
    assert [c.name for c in choice.compounds] == [ref.name for ref in choice.children]


def test_v271_follows_v27_structures(full_registry):
    for code in ("MSH", "PID", "OBX"):
        assert full_registry.get_segment("2.7.1", code) == full_registry.get_segment("2.7", code)
    assert full_registry.table_value("2.7.1", "0104", "2.7.1") is not None
    assert full_registry.table_value("2.7", "0104", "2.7.1") is None
