"""
Mock adapters — in-memory doubles for the registry and the schema generator.

Used by tests to drive the orchestrator without a source tree.  Both
record every call they receive.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from crudgen.adapters.base import ModuleRegistry, SchemaGenerator
from crudgen.adapters.source_tree import scan_declarations
from crudgen.core.errors import SchemaGenerationError
from crudgen.core.models.module import ModuleRef


class MockModuleRegistry(ModuleRegistry):
    """Registry over a set of known module names.

    Scaffolded sources are kept in memory; ``load`` registers the
    modules they declare unless ``load_succeeds`` is False.
    """

    def __init__(self, modules: Sequence[str] = (), load_succeeds: bool = True):
        self._modules: dict[str, Path | None] = {m: None for m in modules}
        self._load_succeeds = load_succeeds
        self.files: dict[Path, str] = {}
        self.resolve_log: list[str] = []
        self.scaffold_log: list[Path] = []
        self.load_log: list[Path] = []

    @property
    def name(self) -> str:
        return "mock"

    def add(self, qualified_name: str, path: Path | None = None) -> None:
        self._modules[qualified_name] = path

    def resolve(self, qualified_name: str) -> ModuleRef | None:
        self.resolve_log.append(qualified_name)
        if qualified_name not in self._modules:
            return None
        return ModuleRef(qualified_name=qualified_name, path=self._modules[qualified_name])

    def scaffold(self, path: Path, contents: str) -> None:
        self.scaffold_log.append(path)
        self.files[path] = contents

    def load(self, path: Path) -> list[str]:
        self.load_log.append(path)
        if not self._load_succeeds:
            return []
        modules = scan_declarations(self.files.get(path, ""))
        for module in modules:
            self._modules[module] = path
        return modules


class MockSchemaGenerator(SchemaGenerator):
    """Schema generator double.

    Registers ``<namespace>.<alias>`` in the registry, or raises the
    configured error.
    """

    def __init__(
        self,
        registry: MockModuleRegistry,
        namespace: str = "MyApp",
        error: str | None = None,
    ):
        self._registry = registry
        self._namespace = namespace
        self._error = error
        self.calls: list[tuple[str, ...]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def run(self, args: Sequence[str]) -> str:
        self.calls.append(tuple(args))
        if self._error:
            raise SchemaGenerationError(self._error)
        qualified = f"{self._namespace}.{args[0]}"
        self._registry.add(qualified)
        return qualified
