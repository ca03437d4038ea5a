"""
Generation request — the fully-parsed input of one ``gen resource`` run.

Built once from the CLI flags and never mutated.  The new-schema path
derives a second request through ``with_identifiers``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from crudgen.core.errors import UsageError


class OperationTag(str, Enum):
    """CRUD operations a resource config can include or exclude."""

    CREATE = "create"
    FIND = "find"
    UPDATE = "update"
    DELETE = "delete"
    ALL = "all"


_TAG_ALIASES = {"read": OperationTag.FIND}


def parse_operation_tags(tokens: Iterable[str] | None) -> tuple[OperationTag, ...] | None:
    """Turn repeated ``--only``/``--except`` tokens into operation tags.

    Returns None when no token was given, so "absent" stays distinct
    from an explicit empty filter.  Order is kept, duplicates dropped.

    Raises:
        UsageError: On a token outside the closed tag set.
    """
    if not tokens:
        return None

    tags: list[OperationTag] = []
    for token in tokens:
        name = token.strip().lower()
        tag = _TAG_ALIASES.get(name)
        if tag is None:
            try:
                tag = OperationTag(name)
            except ValueError:
                valid = ", ".join(t.value for t in OperationTag)
                raise UsageError(
                    f"Unknown operation '{token}'. Valid: {valid}, read"
                ) from None
        if tag not in tags:
            tags.append(tag)
    return tuple(tags)


class GenerationRequest(BaseModel):
    """Everything needed to generate one resource config.

    Attributes:
        directory:     Output directory for the config file.
        file_name:     Explicit config file name (derived when None).
        only_ops:      Operations to include exclusively.
        except_ops:    Operations to exclude.
        context:       Fully-qualified context module name.
        schema_module: Fully-qualified schema module name.
        extra_args:    Positional args for the schema sub-generator.
    """

    model_config = ConfigDict(frozen=True)

    directory: Path
    file_name: str | None = None
    only_ops: tuple[OperationTag, ...] | None = None
    except_ops: tuple[OperationTag, ...] | None = None
    context: str | None = None
    schema_module: str | None = None
    extra_args: tuple[str, ...] = ()

    @property
    def has_filters(self) -> bool:
        return self.only_ops is not None or self.except_ops is not None

    def with_identifiers(self, context: str, schema_module: str) -> GenerationRequest:
        """Return a copy pointing at the given context and schema."""
        return self.model_copy(update={"context": context, "schema_module": schema_module})
