"""
CLI commands for resource generation.

Thin wrappers over ``crudgen.core.services.resource_ops``.
"""

from __future__ import annotations

import sys

import click

from crudgen.core.config.loader import ConfigError
from crudgen.core.errors import GenerationError
from crudgen.core.models.settings import GeneratorSettings


def _load_settings(ctx: click.Context) -> GeneratorSettings:
    """Load crudgen.yml from --config or by searching upward."""
    from crudgen.core.config.loader import load_settings

    return load_settings(ctx.obj.get("config_path"))


@click.group()
def gen() -> None:
    """Generate resource configs and the modules they need."""


@gen.command("resource")
@click.argument("schema_args", nargs=-1)
@click.option("--dirname", default=None, help="Directory to write the config file in.")
@click.option("--file-name", "file_name", default=None, help="File name for the config.")
@click.option(
    "--only",
    "only",
    multiple=True,
    help="Operation to generate (create, find, update, delete, all). Repeatable.",
)
@click.option(
    "--except",
    "except_",
    multiple=True,
    help="Operation to exclude. Repeatable.",
)
@click.option("--context", default=None, help="Context module, with --from-ecto-schema.")
@click.option(
    "--from-ecto-schema",
    "from_ecto_schema",
    default=None,
    help="Existing schema module instead of defining a new one.",
)
@click.pass_context
def resource(
    ctx: click.Context,
    schema_args: tuple[str, ...],
    dirname: str | None,
    file_name: str | None,
    only: tuple[str, ...],
    except_: tuple[str, ...],
    context: str | None,
    from_ecto_schema: str | None,
) -> None:
    """Create a resource config, defining the schema if needed.

    Existing schema:

        crudgen gen resource --context MyApp.Accounts --from-ecto-schema MyApp.Accounts.User

    New schema (same arguments as the schema generator):

        crudgen gen resource Accounts.User email:string name:string birthday:date
    """
    from crudgen.core.models.request import GenerationRequest, parse_operation_tags
    from crudgen.core.services.resource_ops import build_generator

    try:
        settings = _load_settings(ctx)
        request = GenerationRequest(
            directory=settings.config_path(dirname),
            file_name=file_name,
            only_ops=parse_operation_tags(only),
            except_ops=parse_operation_tags(except_),
            context=context,
            schema_module=from_ecto_schema,
            extra_args=schema_args,
        )
        build_generator(settings).run(request)
    except (GenerationError, ConfigError, OSError) as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
