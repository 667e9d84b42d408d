# src/hl7_definitions/config.py
"""
Feature configuration for hl7_definitions.

A feature names one data partition: "tables" for the coded value tables,
and one flag per version ("21", "22", "23", "231", "24", "25", "251",
"26", "27", "271"). Everything is enabled by default. The configuration
is read once, before a registry is built, and never changes afterwards.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple

import yaml

from .exceptions import ConfigError
from .models import Version

__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "FEATURE_TABLES",
    "KNOWN_FEATURES",
    "load_config",
    "config_from_env",
]

FEATURE_TABLES = "tables"
KNOWN_FEATURES: FrozenSet[str] = frozenset(
    [FEATURE_TABLES] + [v.feature for v in Version]
)

# Environment variable naming a YAML config file for the default registry.
CONFIG_ENV_VAR = "HL7_DEFINITIONS_CONFIG"


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable feature selection.

    Attributes
    ----------
    features : frozenset of str
        Enabled features. Defaults to every known feature.
    """

    features: FrozenSet[str] = KNOWN_FEATURES

    @classmethod
    def with_features(cls, features: Iterable[Any]) -> "AppConfig":
        """
        Build a configuration from feature names.

        Parameters
        ----------
        features : Iterable
            Feature names. Integers are accepted for version flags
            (e.g. 25 for "25") since YAML reads unquoted numbers as ints.

        Returns
        -------
        AppConfig
            Configuration enabling exactly the given features.

        Raises
        ------
        ConfigError
            If a name is not a known feature.
        """
        names = set()
        for raw in features:
            if isinstance(raw, bool) or not isinstance(raw, (str, int)):
                raise ConfigError(
                    f"Feature names must be strings, got {type(raw).__name__}"
                )
            name = str(raw).strip()
            if name not in KNOWN_FEATURES:
                raise ConfigError(
                    f"Unknown feature {name!r}; expected one of "
                    f"{', '.join(sorted(KNOWN_FEATURES))}"
                )
            names.add(name)
        return cls(features=frozenset(names))

    @property
    def tables(self) -> bool:
        """True when table data is enabled."""
        return FEATURE_TABLES in self.features

    @property
    def versions(self) -> Tuple[Version, ...]:
        """Enabled versions in canonical order."""
        return tuple(v for v in Version if v.feature in self.features)


def load_config(path: Optional[Path]) -> AppConfig:
    """
    Load a feature configuration from a YAML file.

    The file holds a single ``features`` list::

        features:
          - tables
          - "25"

    Parameters
    ----------
    path : Path or None
        Path to a YAML config file. If None, defaults are used.

    Returns
    -------
    AppConfig
        The loaded configuration.

    Raises
    ------
    TypeError
        If the YAML file does not parse to a mapping at the top level.
    ConfigError
        If ``features`` is not a list or names an unknown feature.
    yaml.YAMLError
        If the file is not valid YAML.
    """
    if path is None:
        return AppConfig()

    data: Any = yaml.safe_load(path.read_text())

    if data is None:
        return AppConfig()

    if not isinstance(data, Mapping):
        raise TypeError(
            f"Config file must contain a mapping at top level, "
            f"got {type(data).__name__}. "
            f"Config file: {path}"
        )

    if "features" not in data:
        return AppConfig()

    features = data["features"]
    if features is None:
        features = []
    if not isinstance(features, list):
        raise ConfigError(
            f"'features' must be a list, got {type(features).__name__}. "
            f"Config file: {path}"
        )
    return AppConfig.with_features(features)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Load the configuration named by HL7_DEFINITIONS_CONFIG, or the defaults.

    Parameters
    ----------
    environ : Mapping or None, default None
        Environment to consult; os.environ when None.

    Returns
    -------
    AppConfig
        The configuration for the process-wide default registry.

    Raises
    ------
    ConfigError
        If the named file cannot be read or holds an invalid configuration.
    """
    env = os.environ if environ is None else environ
    value = env.get(CONFIG_ENV_VAR, "").strip()
    if not value:
        return AppConfig()
    try:
        return load_config(Path(value))
    except (OSError, TypeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load {CONFIG_ENV_VAR}={value}: {exc}") from exc
