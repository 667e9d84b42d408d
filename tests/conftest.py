# tests/conftest.py
# Shared fixtures: prebuilt registries and isolation of process-wide state.
import logging

import pytest

from hl7_definitions import registry as registry_mod
from hl7_definitions.config import CONFIG_ENV_VAR, AppConfig
from hl7_definitions.registry import DefinitionRegistry


@pytest.fixture(scope="session")
def full_registry():
    """Registry with every version and the tables feature enabled."""
    return DefinitionRegistry.build(AppConfig())


@pytest.fixture(scope="session")
def v25_registry():
    """Registry with only version 2.5 enabled and tables disabled."""
    return DefinitionRegistry.build(AppConfig.with_features(["25"]))


@pytest.fixture(autouse=True)
def _isolate_default_registry(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    registry_mod.reset_registry()
    yield
    registry_mod.reset_registry()


@pytest.fixture(autouse=True)
def _restore_package_logger():
    # configure_logging binds handlers to whatever sys.stderr is at call time
    logger = logging.getLogger("hl7_definitions")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
