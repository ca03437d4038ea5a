"""
Resource config generator — the file that exposes a schema's CRUD operations.

The config imports the generator call from the config namespace and
lists a single call for the context/schema pair:

    import PhoenixConfig, only: [crud_from_schema: 2]

    [
      crud_from_schema(MyApp.Accounts, MyApp.Accounts.User)
    ]

When an operation filter is given the call takes four arguments,
``(context, schema, only, except)``, with ``[]`` for the missing filter.
"""

from __future__ import annotations

from typing import Sequence

from crudgen.core.models.request import OperationTag
from crudgen.core.models.template import ConfigFileArtifact


def render_operation_tags(tags: Sequence[OperationTag] | None) -> str:
    """``[:create, :find]`` — an absent filter renders as ``[]``."""
    if not tags:
        return "[]"
    return "[" + ", ".join(f":{tag.value}" for tag in tags) + "]"


def render_resource_config(
    context: str,
    schema_module: str,
    only: Sequence[OperationTag] | None = None,
    except_: Sequence[OperationTag] | None = None,
    namespace: str = "PhoenixConfig",
    call: str = "crud_from_schema",
) -> str:
    """Render the resource config body for one context/schema pair."""
    args = [context, schema_module]
    if only is not None or except_ is not None:
        args += [render_operation_tags(only), render_operation_tags(except_)]

    return (
        f"import {namespace}, only: [{call}: {len(args)}]\n"
        "\n"
        "[\n"
        f"  {call}({', '.join(args)})\n"
        "]\n"
    )


def config_file_name(name: str, extension: str) -> str:
    """Append ``extension`` unless the name already carries it."""
    if extension and not name.endswith(extension):
        return f"{name}{extension}"
    return name


def generate_resource_config(
    context: str,
    schema_module: str,
    file_name: str,
    only: Sequence[OperationTag] | None = None,
    except_: Sequence[OperationTag] | None = None,
    namespace: str = "PhoenixConfig",
    call: str = "crud_from_schema",
    extension: str = ".exs",
) -> ConfigFileArtifact:
    """Build the config artifact: final file name plus rendered body."""
    return ConfigFileArtifact(
        file_name=config_file_name(file_name, extension),
        contents=render_resource_config(
            context, schema_module, only, except_, namespace=namespace, call=call,
        ),
    )
