# tests/test_cli.py
"""
Tests for hl7_definitions/cli.
"""

import json as _json
import runpy
import sys
from pathlib import Path

import pytest

from hl7_definitions import cli
from hl7_definitions.registry import DefinitionRegistry

# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------


def write_config(tmp_path: Path, text: str, name: str = "features.yaml") -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


# ------------------------------------------------------------------------------
# Happy paths
# ------------------------------------------------------------------------------


def test_versions_lists_every_version(capsys):
    code = cli.main(["versions"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert out.splitlines() == [
        "2.1", "2.2", "2.3", "2.3.1", "2.4", "2.5", "2.5.1", "2.6", "2.7", "2.7.1",
    ]


def test_versions_honours_config(tmp_path, capsys):
    cfg = write_config(tmp_path, "features: ['23', '251']\n")
    code = cli.main(["--config", str(cfg), "versions"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert out.splitlines() == ["2.3", "2.5.1"]


def test_message_text_describes_segments_and_fields(capsys):
    code = cli.main(["message", "2.5.1", "ADT^A01"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    lines = out.splitlines()
    assert lines[0] == "ADT_A01 (Admit/visit notification) segments:"
    assert lines[1] == "  MSH (required):"
    assert "    MSH.10 - Message Control ID [ST] required, singular" in lines
    assert "  SFT (repeatable):" in lines
    assert "  PROCEDURE (repeatable):" in lines
    assert "    PR1 (required):" in lines


def test_message_text_shows_tables(capsys):
    code = cli.main(["message", "2.3", "ADT_A01"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert "PID.8 - Sex [IS] optional, singular (table 0001)" in out


def test_message_text_marks_choice_groups(capsys):
    code = cli.main(["message", "2.5.1", "ORM_O01"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert "      OBRRQDRQ1RXOODSODT_SUPPGRP (required) (one of):" in out.splitlines()


def test_message_json_lists_compounds(capsys):
    code = cli.main(["message", "2.5.1", "ORM_O01", "--json"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    order = _json.loads(out)["segments"][3]
    choice = order["children"][1]["children"][0]
    assert choice["compounds"][0] == {
        "name": "OBR",
        "description": "Observation Request",
        "min": 1,
        "max": 1,
    }


def test_message_json(capsys):
    code = cli.main(["message", "2.5", "ACK", "--json"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    payload = _json.loads(out)
    assert payload["message_type"] == "ACK"
    assert payload["segments"][0] == {
        "name": "MSH",
        "description": "Message Header",
        "min": 1,
        "max": 1,
        "children": [],
        "compounds": [],
    }


def test_segment_text(capsys):
    code = cli.main(["segment", "2.5.1", "msa"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    lines = out.splitlines()
    assert lines[0].startswith("MSA (")
    assert lines[1].startswith("  MSA.1 - ")


def test_segment_json(capsys):
    code = cli.main(["segment", "2.5.1", "MSH", "--json"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    payload = _json.loads(out)
    assert payload["code"] == "MSH"
    assert len(payload["fields"]) == 21
    assert payload["fields"][9]["description"] == "Message Control ID"
    assert payload["fields"][9]["optionality"] == "R"
    assert payload["fields"][9]["repeatability"] == {"maximum": 1}


def test_table_text(capsys):
    code = cli.main(["table", "2.5.1", "91"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert out.splitlines() == [
        "0091 (Query priority):",
        "  D\tDeferred",
        "  I\tImmediate",
    ]


def test_table_json_hides_index(capsys):
    code = cli.main(["table", "2.3", "0001", "--json"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    payload = _json.loads(out)
    assert set(payload) == {"table_id", "description", "entries"}
    assert ["F", "Female"] in payload["entries"]


def test_check_ok(capsys):
    code = cli.main(["check"])
    out, _ = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert "2.5.1: ok" in out
    assert len(out.splitlines()) == 10


def test_check_reports_unresolved(monkeypatch, capsys):
    monkeypatch.setattr(
        DefinitionRegistry,
        "unresolved_segment_references",
        lambda self, version: (("ADT_A01", "ZZZ"),) if version.value == "2.4" else (),
    )
    code = cli.main(["check"])
    out, err = capsys.readouterr()
    assert code == cli.EXIT_ERR
    assert "2.4: 1 unresolved" in out
    assert "2.4 ADT_A01 references undefined segment ZZZ" in err


# ------------------------------------------------------------------------------
# Not found and bad config
# ------------------------------------------------------------------------------


@pytest.mark.parametrize(
    "argv, text",
    [
        (["message", "2.5.1", "ZZZ_Z99"], "Message 'ZZZ_Z99' not found for HL7 version 2.5.1"),
        (["message", "9.9", "ADT_A01"], "not found for HL7 version 9.9"),
        (["segment", "2.1", "SFT"], "Segment 'SFT' not found for HL7 version 2.1"),
        (["table", "2.5.1", "9999"], "Table '9999' not found for HL7 version 2.5.1"),
        (["table", "2.5.1", "abc"], "Table 'abc' not found"),
    ],
)
def test_not_found_is_handled_error(argv, text, capsys):
    code = cli.main(argv)
    out, err = capsys.readouterr()
    assert code == cli.EXIT_ERR
    assert out == ""
    assert text in err


def test_table_not_found_when_tables_disabled(tmp_path, capsys):
    cfg = write_config(tmp_path, "features: ['251']\n")
    code = cli.main(["--config", str(cfg), "table", "2.5.1", "0001"])
    _, err = capsys.readouterr()
    assert code == cli.EXIT_ERR
    assert "Table '0001' not found" in err


def test_missing_config_file(tmp_path, capsys):
    code = cli.main(["--config", str(tmp_path / "nope.yaml"), "versions"])
    _, err = capsys.readouterr()
    assert code == cli.EXIT_ERR
    assert "Failed to load config" in err


def test_config_not_a_mapping(tmp_path, capsys):
    cfg = write_config(tmp_path, "- tables\n")
    code = cli.main(["--config", str(cfg), "versions"])
    _, err = capsys.readouterr()
    assert code == cli.EXIT_ERR
    assert "Config file must contain a mapping" in err


def test_config_invalid_yaml(tmp_path):
    cfg = write_config(tmp_path, "features: [unclosed\n")
    assert cli.main(["--config", str(cfg), "versions"]) == cli.EXIT_ERR


def test_config_unknown_feature(tmp_path, capsys):
    cfg = write_config(tmp_path, "features: ['28']\n")
    code = cli.main(["--config", str(cfg), "versions"])
    _, err = capsys.readouterr()
    assert code == cli.EXIT_ERR
    assert "Unknown feature '28'" in err


def test_keyboard_interrupt_is_handled(monkeypatch, capsys):
    def _interrupt(registry):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "_cmd_versions", _interrupt)
    code = cli.main(["versions"])
    _, err = capsys.readouterr()
    assert code == cli.EXIT_ERR
    assert "Interrupted" in err


# ------------------------------------------------------------------------------
# argparse
# ------------------------------------------------------------------------------


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == cli.EXIT_CLI


def test_unknown_command_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(["parse", "x.hl7"])
    assert exc.value.code == cli.EXIT_CLI


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    out, _ = capsys.readouterr()
    assert exc.value.code == 0
    assert out.strip() == "hl7-definitions 0.1.0"


def test_verbose_logs_registry_build(capsys):
    code = cli.main(["-v", "versions"])
    _, err = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert "Definition registry ready with versions: 2.1" in err


def test_module_entrypoint(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["hl7-definitions", "versions"])
    with pytest.raises(SystemExit) as exc:
        runpy.run_module("hl7_definitions.cli", run_name="__main__")
    out, _ = capsys.readouterr()
    assert exc.value.code == cli.EXIT_OK
    assert "2.7.1" in out
