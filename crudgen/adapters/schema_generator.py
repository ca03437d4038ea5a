"""
Schema generator adapter — writes a new schema module into the source tree.
"""

from __future__ import annotations

import logging
from typing import Sequence

from crudgen.adapters.base import ModuleRegistry, SchemaGenerator
from crudgen.core.errors import SchemaGenerationError
from crudgen.core.models.settings import GeneratorSettings
from crudgen.core.services.generators.schema_module import (
    generate_schema_module,
    parse_schema_args,
)

logger = logging.getLogger(__name__)


class SourceSchemaGenerator(SchemaGenerator):
    """Defines schemas as source files under the project's lib dir."""

    def __init__(self, settings: GeneratorSettings, registry: ModuleRegistry):
        self._settings = settings
        self._registry = registry

    def run(self, args: Sequence[str]) -> str:
        settings = self._settings
        definition = parse_schema_args(args)
        qualified = f"{settings.app_namespace}.{definition.alias}"

        if self._registry.resolve(qualified) is not None:
            raise SchemaGenerationError(f"Schema {qualified} already exists")

        generated = generate_schema_module(
            settings.app_namespace,
            settings.app_name,
            definition,
            lib_dir=settings.lib_dir,
            extension=settings.source_extension,
        )
        path = settings.root / generated.path
        if path.exists():
            raise SchemaGenerationError(f"Schema file already exists: {generated.path}")

        logger.info(generated.reason)
        self._registry.scaffold(path, generated.content)
        self._registry.load(path)
        return qualified
