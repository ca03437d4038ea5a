"""
Tests for domain models — requests, operation tags, settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from crudgen.core.errors import UsageError
from crudgen.core.models import (
    ContextModule,
    GenerationRequest,
    GeneratorSettings,
    ModuleRef,
    OperationTag,
    parse_operation_tags,
)


class TestParseOperationTags:
    def test_none_when_absent(self):
        assert parse_operation_tags(()) is None
        assert parse_operation_tags(None) is None

    def test_parses_in_order(self):
        assert parse_operation_tags(["update", "create"]) == (
            OperationTag.UPDATE,
            OperationTag.CREATE,
        )

    def test_read_is_find(self):
        assert parse_operation_tags(["read"]) == (OperationTag.FIND,)

    def test_duplicates_dropped(self):
        assert parse_operation_tags(["find", "read", "FIND"]) == (OperationTag.FIND,)

    def test_unknown_tag(self):
        with pytest.raises(UsageError, match="Unknown operation 'upsert'"):
            parse_operation_tags(["upsert"])


class TestGenerationRequest:
    def test_frozen(self, tmp_path: Path):
        req = GenerationRequest(directory=tmp_path)
        with pytest.raises(ValidationError):
            req.context = "MyApp.Accounts"

    def test_with_identifiers_returns_copy(self, tmp_path: Path):
        req = GenerationRequest(directory=tmp_path, extra_args=("Accounts.User",))
        resolved = req.with_identifiers("MyApp.Accounts", "MyApp.Accounts.User")
        assert req.context is None
        assert resolved.context == "MyApp.Accounts"
        assert resolved.schema_module == "MyApp.Accounts.User"
        assert resolved.extra_args == ("Accounts.User",)

    def test_has_filters(self, tmp_path: Path):
        assert not GenerationRequest(directory=tmp_path).has_filters
        assert GenerationRequest(directory=tmp_path, except_ops=()).has_filters


class TestModules:
    def test_context_qualified_name(self, tmp_path: Path):
        ctx = ContextModule(app_namespace="MyApp", module_name="Accounts", file_path=tmp_path)
        assert ctx.qualified_name == "MyApp.Accounts"

    def test_module_ref_short_name(self):
        assert ModuleRef(qualified_name="MyApp.Accounts.User").short_name == "User"


class TestGeneratorSettings:
    def test_defaults(self, tmp_path: Path):
        s = GeneratorSettings(root=tmp_path, app="my_app")
        assert s.app_namespace == "MyApp"
        assert s.lib_root == tmp_path / "lib"
        assert s.config_path() == tmp_path / "config" / "resources"
        assert s.config_extension == ".exs"

    def test_app_from_directory(self, tmp_path: Path):
        root = tmp_path / "shop-front"
        root.mkdir()
        s = GeneratorSettings(root=root)
        assert s.app_name == "shop_front"
        assert s.app_namespace == "ShopFront"

    def test_dirname_override(self, tmp_path: Path):
        s = GeneratorSettings(root=tmp_path)
        assert s.config_path("priv/crud") == tmp_path / "priv" / "crud"
        assert s.config_path(str(tmp_path / "abs")) == tmp_path / "abs"

    def test_extension_gets_dot(self, tmp_path: Path):
        assert GeneratorSettings(root=tmp_path, config_extension="exs").config_extension == ".exs"

    def test_invalid_app(self, tmp_path: Path):
        with pytest.raises(ValidationError):
            GeneratorSettings(root=tmp_path, app="MyApp")
