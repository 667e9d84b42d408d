# tests/test_loader.py
"""
Tests for hl7_definitions.loader and the hl7_definitions.data partitions.
"""

import logging
import types

import pytest

from hl7_definitions import data, loader
from hl7_definitions.config import AppConfig
from hl7_definitions.exceptions import DefinitionDataError, HL7DefinitionsError
from hl7_definitions.loader import (
    build_datatype,
    build_field,
    build_message,
    build_segment,
    build_table,
    load_partition,
    load_partitions,
)
from hl7_definitions.models import MessageCompound, Optionality, Version

# ------------------------------------------------------------------------------
# helpers
# ------------------------------------------------------------------------------


def _fake_partition(**modules):
    """
    Stand-in for data.load_module that serves literal dicts per kind.
    Kinds not given read as not packaged.
    """

    def _load(version, kind):
        if kind not in modules:
            return None
        return types.SimpleNamespace(**{kind.upper(): modules[kind]})

    return _load


_MSH_ONLY = {
    "ACK": ("ACK", "General acknowledgment", (("MSH", "Message Header", 1, 1),)),
}

# ------------------------------------------------------------------------------
# builders
# ------------------------------------------------------------------------------


def test_build_field_maps_every_column():
    f = build_field(("XPN", "Patient Name", "R", 0, 250, None))
    assert f.datatype == "XPN"
    assert f.description == "Patient Name"
    assert f.optionality is Optionality.REQUIRED
    assert f.repeatability.unbounded
    assert f.max_length == 250
    assert f.table is None


def test_build_field_keeps_table_id():
    f = build_field(("IS", "Administrative Sex", "O", 1, 1, "0001"))
    assert f.table == "0001"
    assert f.repeatability.single


@pytest.mark.parametrize(
    "raw, message",
    [
        (("ST", "Name", "X", 1, 10, None), r"unknown optionality 'X'"),
        (("ST", "Name", "O", -1, 10, None), r"repeat count must be >= 0"),
        (("ST", "Name", "O", 1, "10", None), r"length must be int or None"),
        (("ST", "Name", "O", 1, 10, "HL70001"), r"table must be a digit string"),
        (("ST", "Name", "O", 1, 10), r"expected a 6-tuple"),
        (["ST", "Name", "O", 1, 10, None], r"expected a 6-tuple"),
    ],
)
def test_build_field_rejects_malformed_entries(raw, message):
    with pytest.raises(DefinitionDataError, match=message):
        build_field(raw, "segment ZZZ field 1")


def test_build_segment_numbers_fields_in_errors():
    raw = ("Test", (("ST", "Ok", "O", 1, 1, None), ("ST", "Bad", "Q", 1, 1, None)))
    with pytest.raises(DefinitionDataError, match=r"^segment ZZZ field 2: "):
        build_segment("ZZZ", raw)


def test_build_datatype():
    dt = build_datatype(
        "HD",
        (
            "Hierarchic Designator",
            (
                ("IS", "Namespace ID", "O", 1, 20, "0300"),
                ("ST", "Universal ID", "C", 1, 199, None),
            ),
        ),
    )
    assert dt.code == "HD"
    assert [c.description for c in dt.components] == ["Namespace ID", "Universal ID"]
    assert dt.components[1].optionality is Optionality.CONDITIONAL


def test_build_message_with_groups():
    raw = (
        "ADT_A01",
        "Admit",
        (
            ("MSH", "Message Header", 1, 1),
            (
                "PROCEDURE",
                "Procedure",
                0,
                -1,
                (("PR1", "Procedures", 1, 1), ("ROL", "Role", 0, -1)),
            ),
        ),
    )
    msg = build_message("ADT_A04", raw)
    assert msg.message_type == "ADT_A04"
    assert msg.name == "ADT_A01"
    assert msg.segments[1].is_group
    assert msg.segment_codes() == ("MSH", "PR1", "ROL")


def test_build_message_rejects_empty_group():
    raw = ("ADT_A01", "Admit", (("MSH", "Message Header", 1, 1), ("G", "Group", 0, 1, ())))
    with pytest.raises(DefinitionDataError, match=r"group 'G' has no children"):
        build_message("ADT_A01", raw)


def test_build_message_with_choice_group_compounds():
    detail = (("OBR", "Observation Request", 1, 1), ("RXO", "Pharmacy/Treatment Order", 1, 1))
    raw = (
        "ORM_O01",
        "Order",
        (
            ("MSH", "Message Header", 1, 1),
            ("ORDER_DETAIL", "Order Detail", 0, 1, detail, detail),
        ),
    )
    msg = build_message("ORM_O01", raw)
    group = msg.segments[1]
    assert group.is_choice
    assert group.is_group
    assert [c.name for c in group.compounds] == ["OBR", "RXO"]
    assert group.compounds[1] == MessageCompound("RXO", "Pharmacy/Treatment Order", 1, 1)
    assert msg.segment_codes() == ("MSH", "OBR", "RXO")
    assert [c.name for c in msg.iter_compounds()] == ["OBR", "RXO"]


def test_build_message_accepts_compounds_without_children():
    raw = (
        "ZZZ_Z01",
        "Test",
        (("CHOICE", "Choice", 1, 1, (), ((None, "Unnamed", 0, 1), ("PID", "Patient", 1, 1))),),
    )
    ref = build_message("ZZZ_Z01", raw).segments[0]
    assert ref.children == ()
    assert ref.compounds[0].name is None
    assert ref.is_group
    assert list(ref.iter_segments()) == []


@pytest.mark.parametrize(
    "compounds, message",
    [
        (((1, "Bad", 0, 1),), r"compound name must be str or None, got 1"),
        ((("PID", "Patient", 1),), r"compound: expected a 4-tuple"),
    ],
)
def test_build_message_rejects_malformed_compound(compounds, message):
    raw = ("ZZZ_Z01", "Test", (("G", "Group", 0, 1, (("PID", "Patient", 1, 1),), compounds),))
    with pytest.raises(DefinitionDataError, match=message):
        build_message("ZZZ_Z01", raw)


def test_build_message_rejects_group_without_children_or_compounds():
    raw = ("ZZZ_Z01", "Test", (("G", "Group", 0, 1, (), ()),))
    with pytest.raises(DefinitionDataError, match=r"group 'G' has no children"):
        build_message("ZZZ_Z01", raw)


def test_build_table_preserves_order():
    table = build_table("0136", ("Yes/no indicator", (("Y", "Yes"), ("N", "No"))))
    assert table.codes() == ("Y", "N")


def test_build_table_rejects_bad_entry():
    with pytest.raises(DefinitionDataError, match=r"^table 0136: expected a 2-tuple"):
        build_table("0136", ("Yes/no indicator", (("Y", "Yes", "extra"),)))


def test_definition_data_error_is_package_error():
    assert issubclass(DefinitionDataError, HL7DefinitionsError)


# ------------------------------------------------------------------------------
# data package
# ------------------------------------------------------------------------------


def test_every_version_is_packaged():
    assert data.packaged_versions() == set(Version)


def test_load_module_rejects_unknown_kind():
    with pytest.raises(ValueError, match=r"^kind must be one of"):
        data.load_module(Version.V2_5, "fields")


def test_load_module_returns_none_when_not_packaged(monkeypatch):
    monkeypatch.setattr(data, "packaged_versions", lambda: set())
    assert data.load_module(Version.V2_5, "messages") is None


# ------------------------------------------------------------------------------
# load_partition / load_partitions
# ------------------------------------------------------------------------------


def test_load_partition_reads_all_kinds():
    part = load_partition(Version.V2_5)
    assert part.version is Version.V2_5
    assert "ADT_A01" in part.messages
    assert "MSH" in part.segments
    assert "XPN" in part.datatypes
    assert "0001" in part.tables


def test_load_partition_maps_are_read_only():
    part = load_partition(Version.V2_4)
    with pytest.raises(TypeError):
        part.messages["ZZZ_Z01"] = None
    with pytest.raises(TypeError):
        part.tables["9999"] = None


def test_load_partition_without_tables_never_imports_them(monkeypatch):
    seen = []
    real = data.load_module

    def _recording(version, kind):
        seen.append(kind)
        return real(version, kind)

    monkeypatch.setattr(data, "load_module", _recording)
    part = load_partition(Version.V2_6, include_tables=False)
    assert len(part.tables) == 0
    assert "tables" not in seen
    assert "segments" in seen


def test_load_partition_not_packaged_returns_none(monkeypatch):
    monkeypatch.setattr(data, "packaged_versions", lambda: set())
    assert load_partition(Version.V2_5) is None


def test_load_partition_missing_tables_module_reads_empty(monkeypatch):
    monkeypatch.setattr(data, "load_module", _fake_partition(messages=_MSH_ONLY))
    part = load_partition(Version.V2_5)
    assert set(part.messages) == {"ACK"}
    assert len(part.segments) == 0
    assert len(part.tables) == 0


def test_load_partition_malformed_literal_raises(monkeypatch):
    bad = {"ACK": ("ACK", "General acknowledgment")}
    monkeypatch.setattr(data, "load_module", _fake_partition(messages=bad))
    with pytest.raises(DefinitionDataError, match=r"^message ACK: expected a 3-tuple"):
        load_partition(Version.V2_5)


def test_load_partitions_honours_feature_selection():
    parts = load_partitions(AppConfig.with_features(["23", "tables"]))
    assert list(parts) == [Version.V2_3]
    assert "0001" in parts[Version.V2_3].tables


def test_load_partitions_with_no_features_is_empty(caplog):
    caplog.set_level(logging.INFO, logger="hl7_definitions")
    assert load_partitions(AppConfig(features=frozenset())) == {}
    assert "Tables feature not enabled" in caplog.text
    assert "Version 2.1 feature disabled" in caplog.text


def test_load_partitions_loads_exactly_the_configured_versions(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="hl7_definitions")
    loaded = []

    def _recording(version, include_tables=True):
        loaded.append((version, include_tables))
        return object()

    monkeypatch.setattr(loader, "load_partition", _recording)
    config = AppConfig.with_features(["271", "21"])
    parts = load_partitions(config)
    assert loaded == [(Version.V2_1, False), (Version.V2_7_1, False)]
    assert list(parts) == list(config.versions)
    assert "Version 2.5 feature disabled" in caplog.text
    assert "Version 2.1 feature disabled" not in caplog.text


def test_load_partitions_skips_unpackaged_versions(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="hl7_definitions")
    monkeypatch.setattr(data, "packaged_versions", lambda: {Version.V2_7})
    parts = load_partitions(AppConfig.with_features(["26", "27"]))
    assert list(parts) == [Version.V2_7]
    assert "Version 2.6 is not packaged" in caplog.text


def test_load_partition_logs_counts_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="hl7_definitions")
    load_partition(Version.V2_1)
    assert "Loaded HL7 2.1: 39 messages" in caplog.text


def test_loader_uses_package_logger():
    assert loader.LOG.name == "hl7_definitions.loader"
