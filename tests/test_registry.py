# tests/test_registry.py
"""
Tests for hl7_definitions.registry.
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

import hl7_definitions
from hl7_definitions import registry
from hl7_definitions.config import CONFIG_ENV_VAR, AppConfig
from hl7_definitions.loader import VersionDefinitions, build_message, build_segment
from hl7_definitions.models import MessageDefinition, TableDefinition, Version
from hl7_definitions.registry import DefinitionRegistry

# ------------------------------------------------------------------------------
# helpers
# ------------------------------------------------------------------------------

_ANY_TABLE_IDS = ["0001", "1", 1, "HL70001", "0003", "0104", "0136", "9999"]

_GARBAGE = [None, 3.5, [], {}, object(), True, -1, "", "   "]


def _every_lookup(reg, version, key):
    return [
        reg.get_definition(version),
        reg.get_message(version, key),
        reg.get_segment(version, key),
        reg.get_datatype(version, key),
        reg.get_table(version, key),
        reg.table_description(version, key),
        reg.table_value(version, key, "F"),
        reg.table_values(version, key),
    ]


# ------------------------------------------------------------------------------
# Concrete scenarios
# ------------------------------------------------------------------------------


def test_v23_adt_a01_starts_with_msh_and_sex_table_has_female(full_registry):
    msg = full_registry.get_message("2.3", "ADT_A01")
    assert isinstance(msg, MessageDefinition)
    assert msg.segments[0].name == "MSH"

    table = full_registry.get_table("2.3", "0001")
    assert isinstance(table, TableDefinition)
    assert table.get("F") == "Female"


def test_only_25_without_tables(v25_registry):
    assert [v.value for v in v25_registry.list_versions()] == ["2.5"]
    assert v25_registry.get_message("2.1", "ADT_A01") is None
    assert v25_registry.get_message("2.5", "ADT_A01") is not None
    for version in list(Version) + ["2.5", "9.9"]:
        for table_id in _ANY_TABLE_IDS:
            assert v25_registry.get_table(version, table_id) is None


def test_disabled_versions_are_not_found(v25_registry):
    for version in Version:
        if version is Version.V2_5:
            continue
        assert version not in v25_registry
        assert all(r is None for r in _every_lookup(v25_registry, version, "ADT_A01"))
        assert all(r is None for r in _every_lookup(v25_registry, version, "MSH"))


def test_tables_disabled_for_every_version():
    reg = DefinitionRegistry.build(AppConfig.with_features([v.feature for v in Version]))
    assert reg.list_versions() == tuple(Version)
    for version in Version:
        assert reg.get_message(version, "ACK") is not None
        assert reg.get_table(version, "0001") is None
        assert reg.table_value(version, "0001", "F") is None


def test_inert_registry_when_no_features():
    reg = DefinitionRegistry.build(AppConfig(features=frozenset()))
    assert reg.list_versions() == ()
    assert "2.5" not in reg
    for version in Version:
        assert all(r is None for r in _every_lookup(reg, version, "0001"))
        assert reg.unresolved_segment_references(version) == ()
    assert repr(reg) == "<DefinitionRegistry versions=[]>"


def test_empty_constructor_is_inert():
    reg = DefinitionRegistry()
    assert reg.list_versions() == ()
    assert reg.get_segment("2.5.1", "MSH") is None


# ------------------------------------------------------------------------------
# Versions
# ------------------------------------------------------------------------------


def test_list_versions_is_canonical_and_stable(full_registry):
    first = full_registry.list_versions()
    assert first == tuple(Version)
    assert full_registry.list_versions() == first


def test_version_accepts_member_or_string(full_registry):
    by_member = full_registry.get_segment(Version.V2_5_1, "PID")
    by_string = full_registry.get_segment("2.5.1", "PID")
    assert by_member is by_string
    assert Version.V2_7_1 in full_registry
    assert "2.7.1" in full_registry
    assert "2.8" not in full_registry


def test_versions_do_not_share_definitions(full_registry):
    a = full_registry.get_segment("2.5", "MSH")
    b = full_registry.get_segment("2.5.1", "MSH")
    assert a is not b
    assert full_registry.get_message("2.3", "ACK") != full_registry.get_message("2.5", "ACK")


def test_repr_lists_versions(v25_registry):
    assert repr(v25_registry) == "<DefinitionRegistry versions=[2.5]>"


# ------------------------------------------------------------------------------
# Key normalization and totality
# ------------------------------------------------------------------------------


@pytest.mark.parametrize(
    "key", ["ADT_A01", "adt_a01", " ADT_A01 ", "ADT^A01", "ADT^A01^ADT_A01"]
)
def test_message_type_forms(full_registry, key):
    assert full_registry.get_message("2.5.1", key) is full_registry.get_message(
        "2.5.1", "ADT_A01"
    )


@pytest.mark.parametrize("key", ["0001", "1", 1, "01", "HL70001", "hl70001", " 0001 "])
def test_table_id_forms(full_registry, key):
    table = full_registry.get_table("2.5.1", key)
    assert table is not None
    assert table.table_id == "0001"


@pytest.mark.parametrize("key", ["pid", " PID "])
def test_segment_code_forms(full_registry, key):
    assert full_registry.get_segment("2.5.1", key).code == "PID"


@pytest.mark.parametrize("key", _GARBAGE)
def test_garbage_keys_are_not_found(full_registry, key):
    assert full_registry.get_message("2.5.1", key) is None
    assert full_registry.get_segment("2.5.1", key) is None
    assert full_registry.get_datatype("2.5.1", key) is None
    assert full_registry.get_table("2.5.1", key) is None
    assert full_registry.table_value("2.5.1", "0001", key) is None


@pytest.mark.parametrize("version", _GARBAGE + ["2.8", "2.5.2", 25])
def test_garbage_versions_are_not_found(full_registry, version):
    assert all(r is None for r in _every_lookup(full_registry, version, "0001"))
    assert full_registry.unresolved_segment_references(version) == ()


def test_unknown_keys_in_loaded_version(full_registry):
    assert full_registry.get_message("2.5.1", "ZZZ_Z99") is None
    assert full_registry.get_segment("2.5.1", "ZZZ") is None
    assert full_registry.get_datatype("2.5.1", "ZZZ") is None
    assert full_registry.get_table("2.5.1", "9999") is None
    assert full_registry.table_value("2.5.1", "0001", "Q") is None


# ------------------------------------------------------------------------------
# Table helpers
# ------------------------------------------------------------------------------


def test_table_helpers(full_registry):
    assert full_registry.table_description("2.5.1", "0001") == "Administrative Sex"
    assert full_registry.table_value("2.5.1", 1, "F") == "Female"
    assert full_registry.table_values("2.5.1", "0091") == (
        ("D", "Deferred"),
        ("I", "Immediate"),
    )


def test_get_datatype(full_registry):
    xpn = full_registry.get_datatype("2.5.1", "xpn")
    assert xpn.code == "XPN"
    assert xpn.components[0].description == "Family Name"


# ------------------------------------------------------------------------------
# Immutability
# ------------------------------------------------------------------------------


def test_registry_rejects_new_attributes(full_registry):
    with pytest.raises(AttributeError):
        full_registry.extra = 1


def test_partition_maps_are_read_only(full_registry):
    defs = full_registry.get_definition("2.5.1")
    with pytest.raises(TypeError):
        defs.messages["ADT_A01"] = None
    with pytest.raises(TypeError):
        defs.segments["MSH"] = None


def test_registry_keeps_its_own_copy_of_partitions():
    source = {Version.V2_1: DefinitionRegistry.build().get_definition("2.1")}
    reg = DefinitionRegistry(source)
    source.clear()
    assert reg.list_versions() == (Version.V2_1,)


# ------------------------------------------------------------------------------
# Default registry
# ------------------------------------------------------------------------------


def test_get_registry_is_cached():
    assert registry.get_registry() is registry.get_registry()


def test_reset_registry_rebuilds():
    first = registry.get_registry()
    registry.reset_registry()
    assert registry.get_registry() is not first


def test_get_registry_builds_once_under_concurrency(monkeypatch):
    calls = []
    barrier = threading.Barrier(8)

    def _slow_build(cls, config=None):
        calls.append(config)
        time.sleep(0.05)
        return cls()

    monkeypatch.setattr(DefinitionRegistry, "build", classmethod(_slow_build))

    def _worker():
        barrier.wait()
        return registry.get_registry()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: _worker(), range(8)))

    assert len(calls) == 1
    assert all(r is results[0] for r in results)


def test_default_registry_reads_env_config(tmp_path, monkeypatch):
    p = tmp_path / "features.yaml"
    p.write_text("features: ['25']\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
    registry.reset_registry()

    assert hl7_definitions.list_versions() == (Version.V2_5,)
    assert hl7_definitions.get_table("2.5", "0001") is None


def test_module_level_shortcuts_use_default_registry():
    assert hl7_definitions.get_message("2.5.1", "ADT^A01").name == "ADT_A01"
    assert hl7_definitions.get_segment("2.5.1", "MSH").code == "MSH"
    assert hl7_definitions.get_datatype("2.5.1", "AD").code == "AD"
    assert hl7_definitions.get_table("2.3", "0001").get("F") == "Female"
    assert hl7_definitions.table_description("2.3", "0001") == "Sex"
    assert hl7_definitions.table_value("2.3", "0001", "M") == "Male"
    assert hl7_definitions.table_values("2.1", "0103")[0] == ("D", "Debugging")
    assert hl7_definitions.get_definition("2.2").version is Version.V2_2
    assert hl7_definitions.unresolved_segment_references("2.7.1") == ()
    assert hl7_definitions.list_versions() == tuple(Version)


# ------------------------------------------------------------------------------
# Referential audit
# ------------------------------------------------------------------------------


def test_unresolved_references_cover_choice_compounds():
    raw = (
        "ORM_O01",
        "Order",
        (
            ("MSH", "Message Header", 1, 1),
            (
                "DETAIL",
                "Detail",
                1,
                1,
                (("OBR", "Observation Request", 1, 1),),
                (
                    ("OBR", "Observation Request", 1, 1),
                    ("ZZ1", "Site specific", 1, 1),
                    (None, "Unnamed", 0, 1),
                ),
            ),
        ),
    )
    defs = VersionDefinitions(
        version=Version.V2_5,
        messages={"ORM_O01": build_message("ORM_O01", raw)},
        segments={"MSH": build_segment("MSH", ("Message Header", ()))},
        datatypes={},
        tables={},
    )
    reg = DefinitionRegistry({Version.V2_5: defs})
    assert reg.unresolved_segment_references("2.5") == (
        ("ORM_O01", "OBR"),
        ("ORM_O01", "ZZ1"),
    )
