"""
Tests for logging setup.
"""

import logging

import pytest
from click.testing import CliRunner

from crudgen.core.observability.logging_config import (
    PACKAGE_LOGGER,
    ClickStderrHandler,
    resolve_level,
    setup_logging,
)
from crudgen.main import cli


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestResolveLevel:
    def test_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True, env_level="DEBUG") == "ERROR"
        assert resolve_level(env_level="info") == "INFO"
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_sets_package_level(self):
        logger = setup_logging("INFO")
        assert logger.name == "crudgen"
        assert logger.level == logging.INFO

    def test_unknown_level_falls_back(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging("INFO")
        logger = setup_logging("DEBUG")
        handlers = [h for h in logger.handlers if isinstance(h, ClickStderrHandler)]
        assert len(handlers) == 1

    def test_records_go_to_stderr(self, capsys):
        setup_logging("INFO")
        logging.getLogger("crudgen.core.services.resource_ops").info("Defined schema X")
        captured = capsys.readouterr()
        assert "Defined schema X" in captured.err
        assert captured.out == ""

    def test_debug_format_names_logger(self, capsys):
        setup_logging("DEBUG")
        logging.getLogger("crudgen.adapters.source_tree").debug("Indexed 2 modules")
        err = capsys.readouterr().err
        assert "DEBUG crudgen.adapters.source_tree: Indexed 2 modules" in err

    def test_below_level_suppressed(self, capsys):
        setup_logging("WARNING")
        logging.getLogger("crudgen.core").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_cli_verbose_flag(self):
        CliRunner().invoke(cli, ["--verbose", "gen", "--help"])
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
