"""
Source-tree adapters — resolve modules by scanning the project's lib dir.

A module "exists" when some source file under the lib dir declares it
with ``defmodule <Name> do``.  The tree is indexed once, on the first
lookup; files written afterwards must be passed to ``load`` before
they resolve.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import click

from crudgen.adapters.base import ModuleRegistry, SchemaReflector
from crudgen.core.models.module import ModuleRef
from crudgen.core.services.file_injection import Echo, inject_into_file
from crudgen.core.services.naming import underscore

logger = logging.getLogger(__name__)

_DEFMODULE_RE = re.compile(r"^\s*defmodule\s+([A-Z][\w.]*)\s+do\b", re.MULTILINE)


def scan_declarations(text: str) -> list[str]:
    """Module names declared in a source text, in order of appearance."""
    return _DEFMODULE_RE.findall(text)


class SourceTreeRegistry(ModuleRegistry):
    """Module registry backed by the files under ``lib_root``."""

    def __init__(
        self,
        lib_root: Path,
        extensions: tuple[str, ...] = (".ex",),
        echo: Echo = click.echo,
    ):
        self._lib_root = lib_root
        self._extensions = extensions
        self._echo = echo
        self._index: dict[str, Path] | None = None

    @property
    def name(self) -> str:
        return "source-tree"

    def _build_index(self) -> dict[str, Path]:
        index: dict[str, Path] = {}
        if not self._lib_root.is_dir():
            logger.debug("Lib dir %s does not exist, nothing to index", self._lib_root)
            return index

        for path in sorted(self._lib_root.rglob("*")):
            if path.suffix not in self._extensions or not path.is_file():
                continue
            for module in scan_declarations(path.read_text(encoding="utf-8", errors="ignore")):
                index.setdefault(module, path)

        logger.debug("Indexed %d modules under %s", len(index), self._lib_root)
        return index

    def resolve(self, qualified_name: str) -> ModuleRef | None:
        if self._index is None:
            self._index = self._build_index()
        path = self._index.get(qualified_name)
        if path is None:
            return None
        return ModuleRef(qualified_name=qualified_name, path=path)

    def scaffold(self, path: Path, contents: str) -> None:
        inject_into_file(path, lambda _current: contents, "creating", echo=self._echo)

    def load(self, path: Path) -> list[str]:
        if self._index is None:
            self._index = self._build_index()
        modules = scan_declarations(path.read_text(encoding="utf-8", errors="ignore"))
        for module in modules:
            self._index[module] = path
        logger.info("Loaded %s: %s", path, ", ".join(modules) or "no modules")
        return modules


class SourceSchemaReflector(SchemaReflector):
    """Resource names from the schema's module name."""

    def resource_name(self, schema: ModuleRef) -> str:
        return underscore(schema.short_name)
