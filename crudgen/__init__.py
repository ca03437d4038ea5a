"""crudgen — CRUD resource config generator."""

__version__ = "0.1.0"
