"""
Domain models — Pydantic types for crudgen.

All models are re-exported here for convenient access:

    from crudgen.core.models import GenerationRequest, GeneratorSettings
"""

from crudgen.core.models.module import ContextModule, ModuleRef
from crudgen.core.models.request import (
    GenerationRequest,
    OperationTag,
    parse_operation_tags,
)
from crudgen.core.models.settings import GeneratorSettings
from crudgen.core.models.template import ConfigFileArtifact, GeneratedFile

__all__ = [
    # template.py
    "ConfigFileArtifact",
    # module.py
    "ContextModule",
    "GeneratedFile",
    # request.py
    "GenerationRequest",
    # settings.py
    "GeneratorSettings",
    "ModuleRef",
    "OperationTag",
    "parse_operation_tags",
]
