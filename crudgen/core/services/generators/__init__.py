"""
Generators — render source and config text from parsed input.

Each generator module exposes a ``generate_*()`` function returning a
``GeneratedFile`` (or ``ConfigFileArtifact``); writing is left to callers.
"""
