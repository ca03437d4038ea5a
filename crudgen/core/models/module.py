"""
Module models — source modules of the host project.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class ModuleRef(BaseModel):
    """A module declaration found in the project sources.

    Attributes:
        qualified_name: Dotted module name (e.g. ``MyApp.Accounts.User``).
        path:           Source file declaring it, None for in-memory modules.
    """

    qualified_name: str
    path: Path | None = None

    @property
    def short_name(self) -> str:
        """Last segment of the qualified name."""
        return self.qualified_name.rsplit(".", 1)[-1]


class ContextModule(BaseModel):
    """A grouping module for one or more schemas.

    Either looked up in the registry or scaffolded at ``file_path``.
    """

    app_namespace: str
    module_name: str
    file_path: Path

    @property
    def qualified_name(self) -> str:
        return f"{self.app_namespace}.{self.module_name}"
