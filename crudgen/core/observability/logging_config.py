"""
Logging for the crudgen package, configured once by the CLI group.

Modules log through ``logging.getLogger(__name__)``, so every record
lands under the ``crudgen`` logger.  Its records are written to stderr
through click, next to the ``❌`` error lines.  The ``* injecting ...``
status lines are not log records.
"""

from __future__ import annotations

import logging

import click

PACKAGE_LOGGER = "crudgen"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env_level: str | None = None,
) -> str:
    """Level name from the CLI flags, then ``CRUDGEN_LOG_LEVEL``."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return (env_level or "WARNING").upper()


class ClickStderrHandler(logging.Handler):
    """Emit records with ``click.echo(err=True)``.

    The stream is looked up on every record, so output follows
    whatever stderr click sees at the time (a ``CliRunner`` included).
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the ``crudgen`` logger.

    Unknown level names fall back to WARNING.  Calling this again
    replaces the handler instead of adding a second one.
    """
    numeric = _LEVELS.get(level.upper(), logging.WARNING)

    if numeric <= logging.DEBUG:
        fmt = "%(levelname)s %(name)s: %(message)s"
    else:
        fmt = "%(message)s"

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in logger.handlers if isinstance(h, ClickStderrHandler)]:
        logger.removeHandler(old)

    handler = ClickStderrHandler()
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger
