"""
Resource generation — turn a GenerationRequest into a written config file.

Dispatch, first match wins:

    1. no schema reference and no schema args  → UsageError
    2. no context and no schema args           → UsageError
    3. schema reference and context given      → config from those two
    4. schema args given                       → define the schema, ensure its
                                                 context exists, then config

Every collaborator (module registry, schema reflector, schema generator,
context scaffolder, status writer) is injected, so the orchestrator
itself touches the filesystem only to write the config file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import click

from crudgen.adapters.base import ModuleRegistry, SchemaGenerator, SchemaReflector
from crudgen.core.errors import (
    ProjectNotInitializedError,
    ScaffoldConflictError,
    UnresolvableContextError,
    UnresolvableModuleError,
    UsageError,
)
from crudgen.core.models.module import ContextModule, ModuleRef
from crudgen.core.models.request import GenerationRequest
from crudgen.core.models.settings import GeneratorSettings
from crudgen.core.models.template import ConfigFileArtifact, GeneratedFile
from crudgen.core.services.file_injection import Echo, inject_into_file
from crudgen.core.services.generators.context_module import generate_context_module
from crudgen.core.services.generators.resource_config import generate_resource_config
from crudgen.core.services.naming import context_name_from_schema

logger = logging.getLogger(__name__)

ContextScaffolder = Callable[..., GeneratedFile]

MISSING_SCHEMA_MESSAGE = "Must provide an existing schema reference or define a new schema"
MISSING_CONTEXT_MESSAGE = "Must provide a context or define a new schema"


def ensure_initialized(directory: Path) -> None:
    """The config directory must exist before resources are generated."""
    if not directory.is_dir():
        raise ProjectNotInitializedError(
            f"Config directory {directory} does not exist. Run 'crudgen init' first."
        )


class ResourceGenerator:
    """Resolves a request to a context/schema pair and writes its config."""

    def __init__(
        self,
        settings: GeneratorSettings,
        registry: ModuleRegistry,
        reflector: SchemaReflector,
        schema_generator: SchemaGenerator,
        scaffold_context: ContextScaffolder = generate_context_module,
        echo: Echo = click.echo,
    ):
        self.settings = settings
        self.registry = registry
        self.reflector = reflector
        self.schema_generator = schema_generator
        self.scaffold_context = scaffold_context
        self.echo = echo

    # ── Dispatch ────────────────────────────────────────────────

    def resolve_request(self, request: GenerationRequest) -> GenerationRequest:
        """Return a request with both ``context`` and ``schema_module`` set.

        Raises:
            UsageError: When neither identifiers nor schema args are given.
            SchemaGenerationError: Propagated from the sub-generator.
        """
        has_args = bool(request.extra_args)

        if not request.schema_module and not has_args:
            raise UsageError(MISSING_SCHEMA_MESSAGE)

        if not request.context and not has_args:
            raise UsageError(MISSING_CONTEXT_MESSAGE)

        if request.schema_module and request.context:
            return request

        context, schema_module = self.create_schema_from_args(request.extra_args)
        return request.with_identifiers(context, schema_module)

    def create_schema_from_args(self, args: tuple[str, ...]) -> tuple[str, str]:
        """Define a new schema and make sure its context exists.

        Returns:
            (qualified context name, qualified schema name)
        """
        schema_module = self.schema_generator.run(args)
        logger.info("Defined schema %s", schema_module)

        context_name = context_name_from_schema(args[0])
        context = self.ensure_context_module(context_name, schema_module)
        return context.qualified_name, schema_module

    # ── Context ─────────────────────────────────────────────────

    def ensure_context_module(self, context_name: str, schema_module: str) -> ContextModule:
        """Find the context module, scaffolding it once if it is missing.

        Raises:
            ScaffoldConflictError: If the context's conventional file
                already exists but does not declare the context.
            UnresolvableContextError: If the scaffolded context still
                does not resolve after loading it.
        """
        settings = self.settings
        qualified = f"{settings.app_namespace}.{context_name}"

        found = self.registry.resolve(qualified)
        if found is not None:
            return self._context_from_ref(context_name, found)

        generated = self.scaffold_context(
            settings.app_namespace,
            settings.app_name,
            context_name,
            [schema_module],
            lib_dir=settings.lib_dir,
            extension=settings.source_extension,
        )
        path = settings.root / generated.path
        if path.exists():
            raise ScaffoldConflictError(
                f"Context file {generated.path} already exists but does not "
                f"declare {qualified}; refusing to overwrite it"
            )

        self.echo(f"No context found for schema at {qualified}, creating...")
        self.registry.scaffold(path, generated.content)
        self.registry.load(path)

        found = self.registry.resolve(qualified)
        if found is None:
            raise UnresolvableContextError(qualified)
        logger.info("Created context %s at %s", qualified, path)
        return self._context_from_ref(context_name, found, default_path=path)

    def _context_from_ref(
        self,
        context_name: str,
        ref: ModuleRef,
        default_path: Path | None = None,
    ) -> ContextModule:
        return ContextModule(
            app_namespace=self.settings.app_namespace,
            module_name=context_name,
            file_path=ref.path or default_path or Path(),
        )

    # ── Config ──────────────────────────────────────────────────

    def _resolve_module(self, qualified_name: str, kind: str) -> ModuleRef:
        ref = self.registry.resolve(qualified_name)
        if ref is None:
            raise UnresolvableModuleError(
                qualified_name, f"Could not find {kind} module {qualified_name}"
            )
        return ref

    def build_config(self, request: GenerationRequest) -> ConfigFileArtifact:
        """Render the config artifact for a fully-resolved request."""
        if not request.context or not request.schema_module:
            raise UsageError("Both a context and a schema are required to build a config")

        schema = self._resolve_module(request.schema_module, "schema")
        self._resolve_module(request.context, "context")

        file_name = request.file_name or self.reflector.resource_name(schema)
        return generate_resource_config(
            request.context,
            request.schema_module,
            file_name,
            only=request.only_ops,
            except_=request.except_ops,
            namespace=self.settings.config_namespace,
            call=self.settings.generator_call,
            extension=self.settings.config_extension,
        )

    def write_config(self, directory: Path, artifact: ConfigFileArtifact) -> Path:
        path = directory / artifact.file_name
        inject_into_file(path, lambda _current: artifact.contents, "resource config", echo=self.echo)
        return path

    def run(self, request: GenerationRequest) -> Path:
        """Generate and write the resource config for ``request``.

        Returns:
            Path of the config file.
        """
        ensure_initialized(request.directory)
        resolved = self.resolve_request(request)
        artifact = self.build_config(resolved)
        path = self.write_config(request.directory, artifact)
        logger.info("Resource config for %s at %s", resolved.schema_module, path)
        return path


def build_generator(settings: GeneratorSettings, echo: Echo = click.echo) -> ResourceGenerator:
    """Wire a ResourceGenerator to the project's source tree."""
    from crudgen.adapters.schema_generator import SourceSchemaGenerator
    from crudgen.adapters.source_tree import SourceSchemaReflector, SourceTreeRegistry

    registry = SourceTreeRegistry(
        settings.lib_root,
        extensions=(settings.source_extension,),
        echo=echo,
    )
    return ResourceGenerator(
        settings,
        registry=registry,
        reflector=SourceSchemaReflector(),
        schema_generator=SourceSchemaGenerator(settings, registry),
        echo=echo,
    )
