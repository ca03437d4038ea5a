"""Adapters — bindings to the host project's sources.

Public re-exports for convenient access.
"""

from crudgen.adapters.base import ModuleRegistry, SchemaGenerator, SchemaReflector
from crudgen.adapters.mock import MockModuleRegistry, MockSchemaGenerator
from crudgen.adapters.schema_generator import SourceSchemaGenerator
from crudgen.adapters.source_tree import SourceSchemaReflector, SourceTreeRegistry

__all__ = [
    "MockModuleRegistry",
    "MockSchemaGenerator",
    "ModuleRegistry",
    "SchemaGenerator",
    "SchemaReflector",
    "SourceSchemaGenerator",
    "SourceSchemaReflector",
    "SourceTreeRegistry",
]
