"""
Idempotent file injection — patch a file only when the patch changes it.

``inject_into_file`` reads a file, runs a transform over its text and
writes the result back only when it differs from what is on disk.
Running the same transform twice therefore writes at most once, which
lets generators re-run without duplicating content.

The comparison re-reads the file right before deciding, so an edit
made by someone else between the first read and the compare counts
as a difference and is overwritten by the transform's output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import click

from crudgen.core.errors import FileInjectionError

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]
Transform = Callable[[str], str]


def pad_inject_message(label: str) -> str:
    """Give a non-empty label exactly one trailing space."""
    if label != "" and not label.endswith(" "):
        return f"{label} "
    return label


def format_inject_status(path: Path, label: str = "") -> str:
    """Status line echoed after a write: ``* injecting <label> <path>``."""
    prefix = click.style(f"* injecting {pad_inject_message(label)}", fg="green")
    return f"{prefix}{path}"


def _read_current(path: Path) -> str | None:
    """File text, or None when the file does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as e:
        raise FileInjectionError(f"Cannot patch {path}: not UTF-8 text ({e.reason})") from e


def inject_into_file(
    path: Path,
    transform: Transform,
    label: str = "",
    echo: Echo = click.echo,
) -> bool:
    """Apply ``transform`` to the file at ``path`` and write it if it changed.

    A missing file is transformed from the empty string and always
    written.  Parent directories are created as needed.

    Args:
        path: Target file.
        transform: Maps the current text to the desired text.
        label: Short description shown in the status line.
        echo: Writer for the status line.

    Returns:
        True if the file was written.

    Raises:
        FileInjectionError: If the file exists but is not UTF-8 text.
        OSError: If the file exists but cannot be read or written.
    """
    path = Path(path)
    original = _read_current(path)
    contents = transform(original if original is not None else "")

    current = _read_current(path)
    if current is not None and current == contents:
        logger.debug("No changes for %s", path)
        return False

    echo(format_inject_status(path, label))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    logger.info("Wrote %d bytes to %s", len(contents), path)
    return True
