"""
Error taxonomy for resource generation.

Every failure the CLI reports to the user derives from ``GenerationError``.
Filesystem failures are left as ``OSError``.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for fatal, user-facing generation failures."""


class UsageError(GenerationError):
    """Required identifiers are missing or a flag value is invalid."""


class ProjectNotInitializedError(GenerationError):
    """The output directory for resource configs does not exist."""


class SchemaGenerationError(GenerationError):
    """The schema-definition sub-generator rejected its arguments."""


class UnresolvableModuleError(GenerationError):
    """A module identifier could not be found in the project sources."""

    def __init__(self, qualified_name: str, message: str | None = None):
        self.qualified_name = qualified_name
        super().__init__(message or f"Module not found: {qualified_name}")


class UnresolvableContextError(UnresolvableModuleError):
    """The context module is still missing after it was scaffolded."""

    def __init__(self, qualified_name: str):
        super().__init__(
            qualified_name,
            f"Context {qualified_name} could not be loaded after scaffolding it",
        )


class FileInjectionError(GenerationError):
    """A file to be patched exists but is not valid UTF-8 text."""


class ScaffoldConflictError(GenerationError):
    """A scaffold target already exists without the expected module."""
