"""
Schema module generator — turn ``Alias [table] name:type ...`` args into source.

The argument shape follows the host framework's schema generator:

    Accounts.User users email:string age:integer org_id:references:orgs

The table name is optional and defaults to the plural of the last
alias segment.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, Field

from crudgen.core.errors import SchemaGenerationError
from crudgen.core.models.template import GeneratedFile
from crudgen.core.services.naming import is_module_alias, pluralize, underscore

FIELD_TYPES = frozenset({
    "string",
    "text",
    "integer",
    "float",
    "decimal",
    "boolean",
    "date",
    "time",
    "naive_datetime",
    "utc_datetime",
    "uuid",
    "binary",
    "map",
})

_FIELD_NAME_RE = re.compile(r"^[a-z_][a-z0-9_]*$")
_TABLE_RE = re.compile(r"^[a-z_][a-z0-9_]*$")


class SchemaField(BaseModel):
    """One ``name:type`` column of a schema."""

    name: str
    type: str
    references: str | None = None

    @property
    def source_type(self) -> str:
        if self.type.startswith("array:"):
            return f"{{:array, :{self.type.split(':', 1)[1]}}}"
        return f":{self.type}"


class SchemaDefinition(BaseModel):
    """Parsed arguments of the schema sub-generator."""

    alias: str
    table: str
    fields: list[SchemaField] = Field(default_factory=list)


def _parse_field(spec: str) -> SchemaField:
    name, _, type_spec = spec.partition(":")
    if not _FIELD_NAME_RE.match(name):
        raise SchemaGenerationError(f"Invalid field name '{name}' in '{spec}'")

    if type_spec.startswith("references:"):
        table = type_spec.split(":", 1)[1]
        if not _TABLE_RE.match(table):
            raise SchemaGenerationError(f"Invalid referenced table in '{spec}'")
        return SchemaField(name=name, type="references", references=table)

    if type_spec.startswith("array:"):
        inner = type_spec.split(":", 1)[1]
        if inner not in FIELD_TYPES:
            raise SchemaGenerationError(f"Unknown array type '{inner}' in '{spec}'")
        return SchemaField(name=name, type=type_spec)

    if type_spec not in FIELD_TYPES:
        valid = ", ".join(sorted(FIELD_TYPES))
        raise SchemaGenerationError(
            f"Unknown type '{type_spec}' in '{spec}'. Valid: {valid}, array:<type>, references:<table>"
        )
    return SchemaField(name=name, type=type_spec)


def parse_schema_args(args: Sequence[str]) -> SchemaDefinition:
    """Parse sub-generator arguments.

    Raises:
        SchemaGenerationError: On a malformed alias, table or field spec.
    """
    if not args:
        raise SchemaGenerationError("Expected a schema module name, e.g. Accounts.User")

    alias, rest = args[0], list(args[1:])
    if not is_module_alias(alias):
        raise SchemaGenerationError(
            f"Expected the schema argument '{alias}' to be a valid module name, e.g. Accounts.User"
        )

    if rest and ":" not in rest[0]:
        table = rest.pop(0)
        if not _TABLE_RE.match(table):
            raise SchemaGenerationError(f"Invalid table name '{table}'")
    else:
        table = pluralize(underscore(alias).rsplit("/", 1)[-1])

    fields: list[SchemaField] = []
    for spec in rest:
        if ":" not in spec:
            raise SchemaGenerationError(f"Expected a name:type field spec, got '{spec}'")
        field = _parse_field(spec)
        if any(f.name == field.name for f in fields):
            raise SchemaGenerationError(f"Duplicate field '{field.name}'")
        fields.append(field)

    return SchemaDefinition(alias=alias, table=table, fields=fields)


def render_schema_module(app_namespace: str, definition: SchemaDefinition) -> str:
    """Source text of a schema module with a changeset over all fields."""
    qualified = f"{app_namespace}.{definition.alias}"
    var = underscore(definition.alias).rsplit("/", 1)[-1]

    lines = [
        f"defmodule {qualified} do",
        "  use Ecto.Schema",
        "  import Ecto.Changeset",
        "",
        f'  schema "{definition.table}" do',
    ]
    for field in definition.fields:
        if field.references:
            lines.append(f"    field :{field.name}, :id")
        else:
            lines.append(f"    field :{field.name}, {field.source_type}")
    if definition.fields:
        lines.append("")
    lines += [
        "    timestamps()",
        "  end",
    ]

    attrs = ", ".join(f":{f.name}" for f in definition.fields if not f.references)
    lines += [
        "",
        "  @doc false",
        f"  def changeset({var}, attrs) do",
        f"    {var}",
        f"    |> cast(attrs, [{attrs}])",
        f"    |> validate_required([{attrs}])",
        "  end",
        "end",
    ]
    return "\n".join(lines) + "\n"


def schema_lib_path(lib_dir: str, app_name: str, alias: str, extension: str) -> Path:
    """``lib/my_app/accounts/user.ex`` for ``Accounts.User``."""
    return Path(lib_dir) / app_name / f"{underscore(alias)}{extension}"


def generate_schema_module(
    app_namespace: str,
    app_name: str,
    definition: SchemaDefinition,
    lib_dir: str = "lib",
    extension: str = ".ex",
) -> GeneratedFile:
    """Generate the schema module for a parsed definition."""
    path = schema_lib_path(lib_dir, app_name, definition.alias, extension)
    return GeneratedFile(
        path=path.as_posix(),
        content=render_schema_module(app_namespace, definition),
        reason=f"Schema {app_namespace}.{definition.alias} on table {definition.table}",
    )
