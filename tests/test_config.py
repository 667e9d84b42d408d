# tests/test_config.py
"""
Tests for hl7_definitions.config
"""

from dataclasses import FrozenInstanceError

import pytest
import yaml

from hl7_definitions.config import (
    CONFIG_ENV_VAR,
    KNOWN_FEATURES,
    AppConfig,
    config_from_env,
    load_config,
)
from hl7_definitions.exceptions import ConfigError, HL7DefinitionsError
from hl7_definitions.models import Version


def test_load_config_defaults_when_path_is_none():
    cfg = load_config(None)
    assert isinstance(cfg, AppConfig)
    assert cfg.features == KNOWN_FEATURES
    assert cfg.tables
    assert cfg.versions == tuple(Version)


def test_known_features():
    assert KNOWN_FEATURES == {
        "tables", "21", "22", "23", "231", "24", "25", "251", "26", "27", "271",
    }


def test_load_config_reads_features(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text('features:\n  - tables\n  - "231"\n')
    cfg = load_config(p)
    assert cfg.features == {"tables", "231"}
    assert cfg.versions == (Version.V2_3_1,)


def test_load_config_accepts_unquoted_numbers(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("features: [25, 271]\n")
    cfg = load_config(p)
    assert cfg.versions == (Version.V2_5, Version.V2_7_1)
    assert not cfg.tables


def test_load_config_empty_file_uses_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    cfg = load_config(p)
    assert cfg.features == KNOWN_FEATURES


def test_load_config_without_features_key_uses_defaults(tmp_path):
    p = tmp_path / "other.yaml"
    p.write_text("unrelated: true\n")
    assert load_config(p) == AppConfig()


def test_load_config_null_features_disables_everything(tmp_path):
    p = tmp_path / "none.yaml"
    p.write_text("features:\n")
    cfg = load_config(p)
    assert cfg.features == frozenset()
    assert cfg.versions == ()


def test_load_config_non_mapping_raises_type_error(tmp_path):
    p = tmp_path / "bad.yaml"
    # YAML list at top level, not a mapping/dict
    p.write_text("- item1\n- item2\n")
    with pytest.raises(
        TypeError, match=r"^Config file must contain a mapping at top level"
    ):
        load_config(p)


def test_load_config_invalid_yaml_raises_yaml_error(tmp_path):
    p = tmp_path / "invalid.yaml"
    p.write_text("features: [unclosed_list\n")
    with pytest.raises(yaml.YAMLError, match=r"^while parsing a flow sequence"):
        load_config(p)


def test_load_config_features_must_be_a_list(tmp_path):
    p = tmp_path / "scalar.yaml"
    p.write_text("features: tables\n")
    with pytest.raises(ConfigError, match=r"^'features' must be a list"):
        load_config(p)


def test_unknown_feature_raises_config_error():
    with pytest.raises(ConfigError, match=r"^Unknown feature '28'"):
        AppConfig.with_features(["tables", "28"])


@pytest.mark.parametrize("bad", [True, 2.5, None, ["25"]])
def test_non_string_feature_raises_config_error(bad):
    with pytest.raises(ConfigError, match=r"^Feature names must be strings"):
        AppConfig.with_features([bad])


def test_config_error_is_package_error():
    assert issubclass(ConfigError, HL7DefinitionsError)


def test_config_from_env_reads_named_file(tmp_path):
    p = tmp_path / "env.yaml"
    p.write_text("features: [tables, '23']\n")
    cfg = config_from_env({CONFIG_ENV_VAR: str(p)})
    assert cfg.versions == (Version.V2_3,)
    assert cfg.tables


def test_config_from_env_defaults_when_unset():
    assert config_from_env({}) == AppConfig()
    assert config_from_env({CONFIG_ENV_VAR: "  "}) == AppConfig()


def test_config_from_env_missing_file_raises_config_error(tmp_path):
    missing = tmp_path / "nope.yaml"
    with pytest.raises(ConfigError, match=r"^Failed to load HL7_DEFINITIONS_CONFIG=") as exc:
        config_from_env({CONFIG_ENV_VAR: str(missing)})
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_config_from_env_malformed_yaml_raises_config_error(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("features: [tables\n")
    with pytest.raises(ConfigError, match=r"^Failed to load HL7_DEFINITIONS_CONFIG=") as exc:
        config_from_env({CONFIG_ENV_VAR: str(p)})
    assert isinstance(exc.value.__cause__, yaml.YAMLError)


def test_config_from_env_non_mapping_raises_config_error(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- tables\n")
    with pytest.raises(ConfigError, match=r"must contain a mapping at top level") as exc:
        config_from_env({CONFIG_ENV_VAR: str(p)})
    assert isinstance(exc.value.__cause__, TypeError)


def test_appconfig_is_immutable():
    cfg = AppConfig()
    with pytest.raises(FrozenInstanceError, match=r"^cannot assign to field"):
        cfg.features = frozenset()
