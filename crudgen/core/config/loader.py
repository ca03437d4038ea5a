"""
Configuration loader — reads crudgen.yml into GeneratorSettings.

The file is optional: without one every setting takes its default and
the project root is the working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from crudgen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = "crudgen.yml"


class ConfigError(Exception):
    """Raised when crudgen.yml is unreadable or invalid."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for crudgen.yml from ``start_dir`` (default: cwd) upward.

    Returns:
        Path to crudgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_settings(path: Path | None = None, start_dir: Path | None = None) -> GeneratorSettings:
    """Load and validate generator settings.

    Args:
        path: Explicit path to crudgen.yml. If None, searches upward.
        start_dir: Where the upward search starts (default: cwd).

    Returns:
        Validated settings, rooted at the config file's directory.

    Raises:
        ConfigError: If an explicit path is missing or any file is invalid.
    """
    if path is None:
        path = find_settings_file(start_dir)
        if path is None:
            root = (start_dir or Path.cwd()).resolve()
            logger.debug("No %s found, using defaults rooted at %s", SETTINGS_FILE, root)
            return GeneratorSettings(root=root)
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    data.pop("root", None)
    try:
        settings = GeneratorSettings.model_validate({**data, "root": path.parent.resolve()})
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded settings for app '%s' from %s", settings.app_name, path)
    return settings


def render_settings(settings: GeneratorSettings) -> str:
    """YAML text for a settings file, as written by ``crudgen init``."""
    data = settings.model_dump(exclude={"root"})
    data["app"] = settings.app_name
    return yaml.safe_dump(data, sort_keys=False)


def merge_settings_text(text: str, updates: dict[str, str]) -> str:
    """Apply ``updates`` to the YAML of an existing settings file.

    Text that already holds every update is returned unchanged, so a
    repeated ``crudgen init`` leaves the file alone.

    Raises:
        ConfigError: If the text is not a YAML mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in settings: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in settings, got {type(data).__name__}")

    if all(data.get(key) == value for key, value in updates.items()):
        return text

    data.update(updates)
    return yaml.safe_dump(data, sort_keys=False)
