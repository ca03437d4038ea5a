"""
Adapter base — the contracts between the orchestrator and the host project.

The resource orchestrator never reads project sources or runs the
schema generator itself; it goes through these interfaces so each
collaborator can be swapped for an in-memory double in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from crudgen.core.models.module import ModuleRef


class ModuleRegistry(ABC):
    """Looks up modules declared in the project and loads new sources.

    ``scaffold`` and ``load`` are separate steps: a scaffolded file is
    not visible to ``resolve`` until it has been loaded.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier (e.g. 'source-tree', 'mock')."""

    @abstractmethod
    def resolve(self, qualified_name: str) -> ModuleRef | None:
        """Return the module, or None if it is not known."""

    @abstractmethod
    def scaffold(self, path: Path, contents: str) -> None:
        """Write a new source file."""

    @abstractmethod
    def load(self, path: Path) -> list[str]:
        """Load a source file, returning the module names it declares."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class SchemaReflector(ABC):
    """Derives presentation names from a schema module."""

    @abstractmethod
    def resource_name(self, schema: ModuleRef) -> str:
        """Human-readable resource name, used as the default config file name."""


class SchemaGenerator(ABC):
    """The schema-definition sub-generator."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> str:
        """Define a new schema from positional args.

        Returns:
            The fully-qualified schema module name.

        Raises:
            SchemaGenerationError: If the arguments are rejected.
        """
