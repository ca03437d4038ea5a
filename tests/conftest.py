"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from crudgen.adapters.mock import MockModuleRegistry, MockSchemaGenerator
from crudgen.core.models.settings import GeneratorSettings


@pytest.fixture
def settings(tmp_path: Path) -> GeneratorSettings:
    """Settings for app ``my_app`` rooted at a temp project."""
    return GeneratorSettings(root=tmp_path, app="my_app")


@pytest.fixture
def config_dir(settings: GeneratorSettings) -> Path:
    """An initialized resource config directory."""
    directory = settings.config_path()
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def registry() -> MockModuleRegistry:
    return MockModuleRegistry(["MyApp.Accounts", "MyApp.Accounts.User"])


@pytest.fixture
def schema_generator(registry: MockModuleRegistry) -> MockSchemaGenerator:
    return MockSchemaGenerator(registry, namespace="MyApp")


@pytest.fixture
def echoed() -> list[str]:
    """Captures status lines passed to ``echo``."""
    return []


@pytest.fixture
def phoenix_project(tmp_path: Path) -> Path:
    """A project with crudgen.yml, a config dir and one existing schema."""
    (tmp_path / "crudgen.yml").write_text("app: my_app\n")
    (tmp_path / "config" / "resources").mkdir(parents=True)
    schema_dir = tmp_path / "lib" / "my_app" / "accounts"
    schema_dir.mkdir(parents=True)
    (tmp_path / "lib" / "my_app" / "accounts.ex").write_text(
        "defmodule MyApp.Accounts do\nend\n"
    )
    (schema_dir / "user.ex").write_text(
        'defmodule MyApp.Accounts.User do\n  use Ecto.Schema\n\n  schema "users" do\n  end\nend\n'
    )
    return tmp_path
