"""Basic package tests for tastools."""

import logging

import pytest


def test_package_imports():
    """Test that the package can be imported."""
    import tastools
    assert tastools.__version__ == "0.1.0"


def test_subpackage_imports():
    """Test that subpackages can be imported."""
    import tastools.domain
    import tastools.runtime
    import tastools.services


def test_logging_setup(temp_log_dir):
    """Test that logging can be set up."""
    from tastools.logging_config import setup_logging

    log_path = setup_logging(temp_log_dir)
    try:
        assert log_path.exists()
        assert log_path.name == "debug.log"
    finally:
        root = logging.getLogger("tastools")
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()


def test_get_logger():
    """Test logger creation."""
    from tastools.logging_config import get_logger

    logger = get_logger("test_module")
    assert logger.name == "tastools.test_module"

    # Already prefixed should stay as-is
    logger2 = get_logger("tastools.runtime")
    assert logger2.name == "tastools.runtime"


def test_structured_helpers(caplog):
    """Test the tick-tagged log line format."""
    from tastools.logging_config import get_logger, log_match, log_tool

    logger = get_logger("test_helpers")
    with caplog.at_level(logging.DEBUG, logger="tastools"):
        log_tool(logger, 42, "duck", "START", "20 ticks")
        log_match(logger, 7, "setang", False, "missing <yaw>")

    assert "TICK 00042 | TOOL | duck | START | 20 ticks" in caplog.messages
    assert "TICK 00007 | MATCH | setang | FAILED | missing <yaw>" in caplog.messages


def test_cli_list(capsys, temp_log_dir):
    """Test the catalogue listing entry point."""
    from main import main

    try:
        assert main(["--list", "--log-dir", str(temp_log_dir)]) == 0
        out = capsys.readouterr().out
        assert "strafe" in out
        assert out.index("check") < out.index("decel")

        assert main(["--describe", "duck", "--log-dir", str(temp_log_dir)]) == 0
        assert "duck [duration]" in capsys.readouterr().out

        assert main(["--describe", "jump", "--log-dir", str(temp_log_dir)]) == 1
    finally:
        root = logging.getLogger("tastools")
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
