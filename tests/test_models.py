# tests/test_models.py
"""
Tests for hl7_definitions.models
"""

from dataclasses import FrozenInstanceError

import pytest

from hl7_definitions.models import (
    PRIMITIVE_DATATYPES,
    UNBOUNDED,
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


def _field(description="Field", opt=Optionality.OPTIONAL):
    return FieldDefinition("ST", description, opt, Repeatability(1), 20, None)


# ------------------------------------------------------------------------------
# Version
# ------------------------------------------------------------------------------


def test_version_members_compare_equal_to_dotted_strings():
    assert Version.V2_5 == "2.5"
    assert str(Version.V2_3_1) == "2.3.1"


def test_version_order_is_canonical():
    assert [v.value for v in Version] == [
        "2.1", "2.2", "2.3", "2.3.1", "2.4", "2.5", "2.5.1", "2.6", "2.7", "2.7.1",
    ]


def test_version_feature_and_module_name():
    assert Version.V2_5_1.feature == "251"
    assert Version.V2_5_1.module_name == "v2_5_1"
    assert Version.V2_1.feature == "21"


@pytest.mark.parametrize("raw", ["2.5.1", " 2.5.1 ", Version.V2_5_1])
def test_version_parse_known(raw):
    assert Version.parse(raw) is Version.V2_5_1


@pytest.mark.parametrize("raw", ["9.9", "", "251", 2.5, 25, None, object()])
def test_version_parse_unknown_returns_none(raw):
    assert Version.parse(raw) is None


# ------------------------------------------------------------------------------
# Optionality / Repeatability
# ------------------------------------------------------------------------------


def test_optionality_human_text():
    assert str(Optionality.REQUIRED) == "required"
    assert str(Optionality.OPTIONAL) == "optional"
    assert str(Optionality.CONDITIONAL) == "conditional"
    assert str(Optionality.BACKWARD_COMPATIBILITY) == "backwards compatibility"


def test_repeatability_from_count():
    unbounded = Repeatability.from_count(0)
    assert unbounded.unbounded and not unbounded.single
    assert str(unbounded) == "unbounded"

    single = Repeatability.from_count(1)
    assert single.single
    assert str(single) == "singular"

    bounded = Repeatability.from_count(5)
    assert bounded.maximum == 5
    assert str(bounded) == "maximum 5"


# ------------------------------------------------------------------------------
# Segment / message structures
# ------------------------------------------------------------------------------


def test_segment_field_is_one_based():
    seg = SegmentDefinition("ZZZ", "Test", (_field("First"), _field("Second")))
    assert seg.field(1).description == "First"
    assert seg.field(2).description == "Second"
    assert seg.field(0) is None
    assert seg.field(3) is None


def test_field_required_flag():
    assert _field(opt=Optionality.REQUIRED).required
    assert not _field(opt=Optionality.CONDITIONAL).required


def test_segment_reference_properties():
    plain = SegmentReference("PID", "Patient Identification", 1, 1)
    assert plain.required and not plain.repeatable and not plain.is_group

    repeating = SegmentReference("NK1", "Next of Kin", 0, UNBOUNDED)
    assert not repeating.required and repeating.repeatable

    bounded = SegmentReference("ERR", "Error", 0, 2)
    assert bounded.repeatable


def test_message_flattens_groups_in_document_order():
    group = SegmentReference(
        "INSURANCE",
        "Insurance",
        0,
        UNBOUNDED,
        (
            SegmentReference("IN1", "Insurance", 1, 1),
            SegmentReference("IN2", "Insurance Additional Information", 0, 1),
        ),
    )
    msg = MessageDefinition(
        "ADT_A01",
        "ADT_A01",
        "Admit",
        (
            SegmentReference("MSH", "Message Header", 1, 1),
            group,
            SegmentReference("ACC", "Accident", 0, 1),
        ),
    )
    assert group.is_group
    assert msg.segment_codes() == ("MSH", "IN1", "IN2", "ACC")


def test_choice_group_keeps_compounds_alongside_children():
    alternatives = (
        MessageCompound("OBR", "Observation Request", 1, 1),
        MessageCompound(None, "Unnamed alternative", 0, 1),
    )
    choice = SegmentReference(
        "ORDER_DETAIL",
        "Order Detail",
        0,
        1,
        (SegmentReference("OBR", "Observation Request", 1, 1),),
        alternatives,
    )
    plain = SegmentReference("MSH", "Message Header", 1, 1)
    msg = MessageDefinition("ORM_O01", "ORM_O01", "Order", (plain, choice))

    assert choice.is_choice and choice.is_group
    assert not plain.is_choice
    assert plain.compounds == ()
    assert tuple(msg.iter_compounds()) == alternatives
    assert msg.segment_codes() == ("MSH", "OBR")

    with pytest.raises(FrozenInstanceError):
        alternatives[0].name = "RXO"


# ------------------------------------------------------------------------------
# TableDefinition
# ------------------------------------------------------------------------------


def test_table_lookup_and_order():
    table = TableDefinition("0001", "Sex", (("M", "Male"), ("F", "Female")))
    assert table.get("F") == "Female"
    assert table.get("X") is None
    assert "M" in table and "X" not in table
    assert len(table) == 2
    assert table.codes() == ("M", "F")


@pytest.mark.parametrize("code", [None, 1, b"F", ("F",), ["F"]])
def test_table_lookup_of_non_string_code_is_not_found(code):
    table = TableDefinition("0001", "Sex", (("M", "Male"), ("F", "Female")))
    assert table.get(code) is None
    assert code not in table


def test_primitive_datatypes_have_no_components():
    assert {"ST", "ID", "IS", "NM", "DT", "TM", "varies"} <= PRIMITIVE_DATATYPES
    assert "XPN" not in PRIMITIVE_DATATYPES
    assert "CE" not in PRIMITIVE_DATATYPES


def test_tables_with_same_entries_are_equal():
    a = TableDefinition("0136", "Yes/no", (("Y", "Yes"), ("N", "No")))
    b = TableDefinition("0136", "Yes/no", (("Y", "Yes"), ("N", "No")))
    assert a == b


def test_models_are_immutable():
    table = TableDefinition("0001", "Sex", (("F", "Female"),))
    with pytest.raises(FrozenInstanceError, match=r"^cannot assign to field"):
        table.description = "changed"

    seg = SegmentDefinition("ZZZ", "Test", ())
    with pytest.raises(FrozenInstanceError):
        seg.code = "YYY"
