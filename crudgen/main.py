"""
crudgen — CLI entrypoint.

Usage:
    python -m crudgen.main --help
    python -m crudgen.main init
    python -m crudgen.main gen resource Accounts.User email:string
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from crudgen import __version__
from crudgen.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="crudgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to crudgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """crudgen — generate CRUD resource configs from schema modules."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(resolve_level(debug, verbose, quiet, os.environ.get("CRUDGEN_LOG_LEVEL")))


@cli.command()
@click.option("--dirname", default=None, help="Directory for resource configs.")
@click.option("--app", default=None, help="Snake-case app name (default: directory name).")
@click.pass_context
def init(ctx: click.Context, dirname: str | None, app: str | None) -> None:
    """Write crudgen.yml and create the resource config directory."""
    from crudgen.core.config.loader import (
        SETTINGS_FILE,
        ConfigError,
        load_settings,
        merge_settings_text,
        render_settings,
    )
    from crudgen.core.models.settings import GeneratorSettings
    from crudgen.core.services.file_injection import inject_into_file

    config_path: Path | None = ctx.obj.get("config_path")
    try:
        if config_path is not None and not config_path.exists():
            settings = GeneratorSettings(root=config_path.parent.resolve())
        else:
            settings = load_settings(config_path)
        updates = {k: v for k, v in (("app", app), ("config_dir", dirname)) if v}
        if updates:
            settings = GeneratorSettings.model_validate(
                {**settings.model_dump(), **updates, "root": settings.root}
            )
        settings_file = config_path or settings.root / SETTINGS_FILE

        inject_into_file(
            settings_file,
            lambda current: (
                merge_settings_text(current, updates) if current else render_settings(settings)
            ),
            "settings",
        )
        config_dir = settings.config_path()
        config_dir.mkdir(parents=True, exist_ok=True)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
    except ValueError as e:
        click.secho(f"❌ Invalid option: {e}", fg="red", err=True)
        sys.exit(1)
    except OSError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.secho(f"✅ Initialized {settings.app_namespace}", fg="green", bold=True)
        click.echo(f"   Resource configs: {config_dir}")


# ── Register sub-command groups from crudgen/ui/cli/ ──────────────

from crudgen.ui.cli.gen import gen

cli.add_command(gen)


if __name__ == "__main__":
    cli()
