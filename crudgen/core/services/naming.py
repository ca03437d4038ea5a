"""
Module-name inflection helpers.

Conversions between dotted CamelCase module aliases (``Accounts.UserProfile``)
and the snake_case paths and names derived from them
(``accounts/user_profile``).
"""

from __future__ import annotations

import re

_ALIAS_RE = re.compile(r"^[A-Z][A-Za-z0-9_]*(\.[A-Z][A-Za-z0-9_]*)*$")
_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def is_module_alias(name: str) -> bool:
    """True for dotted CamelCase aliases such as ``Accounts.User``."""
    return bool(_ALIAS_RE.match(name))


def camelize(name: str) -> str:
    """``my_app`` → ``MyApp``; ``my_app/accounts`` → ``MyApp.Accounts``."""
    return ".".join(
        "".join(part[:1].upper() + part[1:] for part in segment.split("_") if part)
        for segment in name.split("/")
    )


def underscore(name: str) -> str:
    """``MyApp.UserProfile`` → ``my_app/user_profile``."""
    return "/".join(
        _CAMEL_BOUNDARY_RE.sub("_", segment).lower() for segment in name.split(".")
    )


def pluralize(word: str) -> str:
    """Naive English plural, good enough for default table names."""
    if re.search(r"[^aeiou]y$", word):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word):
        return word + "es"
    return word + "s"


def context_name_from_schema(schema_module: str) -> str:
    """Drop the last segment of a schema alias to get its context.

    ``Accounts.User`` → ``Accounts``; ``A.B.C`` → ``A.B``.  A single
    segment has no parent and is returned unchanged.
    """
    parts = schema_module.split(".")
    if len(parts) == 1:
        return schema_module
    return ".".join(parts[:-1])
