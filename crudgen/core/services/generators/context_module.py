"""
Context module generator — scaffold a grouping module for schemas.
"""

from __future__ import annotations

from pathlib import Path

from crudgen.core.models.template import GeneratedFile
from crudgen.core.services.naming import underscore


def context_lib_path(lib_dir: str, app_name: str, context_name: str, extension: str) -> Path:
    """``lib/my_app/accounts.ex`` for context ``Accounts`` of app ``my_app``."""
    return Path(lib_dir) / app_name / f"{underscore(context_name)}{extension}"


def render_context_module(app_namespace: str, context_name: str, schemas: list[str]) -> str:
    """Source text of a context module aliasing the given schemas."""
    qualified = f"{app_namespace}.{context_name}"
    aliases = "\n".join(f"  alias {schema}" for schema in sorted(set(schemas)))

    lines = [
        f"defmodule {qualified} do",
        '  @moduledoc """',
        f"  The {context_name} context.",
        '  """',
        "",
        "  import Ecto.Query, warn: false",
        f"  alias {app_namespace}.Repo",
    ]
    if aliases:
        lines += ["", aliases]
    lines.append("end")
    return "\n".join(lines) + "\n"


def generate_context_module(
    app_namespace: str,
    app_name: str,
    context_name: str,
    schemas: list[str],
    lib_dir: str = "lib",
    extension: str = ".ex",
) -> GeneratedFile:
    """Generate a context module for ``schemas``.

    Args:
        app_namespace: CamelCase app namespace (``MyApp``).
        app_name: Snake-case app name (``my_app``), used for the path.
        context_name: Context alias relative to the namespace.
        schemas: Fully-qualified schema modules the context groups.
        lib_dir: Source root relative to the project root.
        extension: Source file extension.

    Returns:
        GeneratedFile at the conventional context path.
    """
    path = context_lib_path(lib_dir, app_name, context_name, extension)
    return GeneratedFile(
        path=path.as_posix(),
        content=render_context_module(app_namespace, context_name, schemas),
        reason=f"Context {app_namespace}.{context_name} for {', '.join(schemas)}",
    )
