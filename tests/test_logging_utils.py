# tests/test_logging_utils.py
"""
tests for hl7_definitions.logging_utils
"""

import io
import logging

import pytest

from hl7_definitions.logging_utils import LOGGER_NAME, configure_logging, get_logger


def test_configure_logging_rejects_non_int_verbosity():
    with pytest.raises(TypeError, match=r"^verbosity must be int"):
        configure_logging("load")


def test_configure_logging_rejects_bool_verbosity():
    with pytest.raises(TypeError, match=r"^verbosity must be int"):
        configure_logging(True)


def test_configure_logging_rejects_negative_verbosity():
    with pytest.raises(ValueError, match=r"^verbosity must be non-negative"):
        configure_logging(-1)


def test_configure_logging_default_level_is_warning(capsys):
    logger = configure_logging(verbosity=0)
    logger.warning("hello warning")
    logger.info("hidden info")

    _, err = capsys.readouterr()
    assert "hello warning" in err
    assert "hidden info" not in err


def test_configure_logging_sets_info_level(capsys):
    logger = configure_logging(verbosity=1)
    logger.info("visible info")
    logger.debug("hidden debug")

    _, err = capsys.readouterr()
    assert "visible info" in err
    assert "hidden debug" not in err


@pytest.mark.parametrize("verbosity", [2, 5])
def test_configure_logging_sets_debug_level(verbosity):
    logger = configure_logging(verbosity=verbosity, stream=io.StringIO())
    assert logger.level == logging.DEBUG


def test_configure_logging_accepts_custom_stream():
    buf = io.StringIO()
    logger = configure_logging(verbosity=0, stream=buf)
    logger.warning("routed message")

    contents = buf.getvalue()
    assert "WARNING hl7_definitions: routed message" in contents


def test_configure_logging_child_loggers_reach_stream():
    buf = io.StringIO()
    configure_logging(verbosity=1, stream=buf)
    get_logger("hl7_definitions.loader").info("from child")
    assert "INFO hl7_definitions.loader: from child" in buf.getvalue()


def test_configure_logging_twice_does_not_duplicate_output():
    first = io.StringIO()
    second = io.StringIO()
    configure_logging(0, stream=first)
    logger = configure_logging(0, stream=second)
    logger.warning("once")

    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1


def test_configure_logging_rejects_bad_stream():
    class NotAStream:
        pass

    with pytest.raises(
        TypeError, match=r"^stream must be file-like \(support .write\(...\)\)"
    ):
        configure_logging(0, stream=NotAStream())


def test_get_logger_is_namespaced():
    assert get_logger("hl7_definitions.registry").name == f"{LOGGER_NAME}.registry"
    assert get_logger("anything").name == f"{LOGGER_NAME}.anything"
