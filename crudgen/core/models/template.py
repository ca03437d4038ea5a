"""
Generated artifact models — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A source file produced by a template generator.

    Attributes:
        path:    Path relative to the project root.
        content: Full file content.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""


class ConfigFileArtifact(BaseModel):
    """The resource config file: final name and full text body."""

    file_name: str
    contents: str
