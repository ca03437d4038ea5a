"""
Generator settings — loaded from crudgen.yml.

Holds the host project's layout conventions: where sources live,
where resource configs go, and how the config file is spelled.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from crudgen.core.services.naming import camelize, underscore


class GeneratorSettings(BaseModel):
    """Project-level configuration for the generators.

    ``root`` is not read from the file; the loader sets it to the
    directory holding crudgen.yml (or the cwd when there is none).
    """

    root: Path = Field(default_factory=Path.cwd, exclude=True)

    app: str = ""
    lib_dir: str = "lib"
    config_dir: str = "config/resources"
    config_extension: str = ".exs"
    source_extension: str = ".ex"
    config_namespace: str = "PhoenixConfig"
    generator_call: str = "crud_from_schema"

    @field_validator("app")
    @classmethod
    def _snake_case_app(cls, value: str) -> str:
        if value and not re.fullmatch(r"[a-z][a-z0-9_]*", value):
            raise ValueError(f"app must be a snake_case name, got {value!r}")
        return value

    @field_validator("config_extension", "source_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if value and not value.startswith("."):
            return f".{value}"
        return value

    @property
    def app_name(self) -> str:
        """Snake-case app name, falling back to the project directory name."""
        if self.app:
            return self.app
        return underscore(self.root.resolve().name).replace("/", "_").replace("-", "_")

    @property
    def app_namespace(self) -> str:
        """CamelCase namespace every generated module lives under."""
        return camelize(self.app_name)

    @property
    def lib_root(self) -> Path:
        return self.root / self.lib_dir

    def config_path(self, dirname: str | None = None) -> Path:
        """Output directory for resource configs, ``dirname`` wins over config."""
        directory = Path(dirname or self.config_dir)
        if not directory.is_absolute():
            directory = self.root / directory
        return directory
