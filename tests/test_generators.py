"""
Tests for generators — resource config, context module, schema module.

Pure unit tests: names and parsed args in → text / GeneratedFile out.
"""

import pytest

from crudgen.core.errors import SchemaGenerationError
from crudgen.core.models.request import OperationTag
from crudgen.core.services.generators.context_module import (
    context_lib_path,
    generate_context_module,
)
from crudgen.core.services.generators.resource_config import (
    config_file_name,
    generate_resource_config,
    render_operation_tags,
    render_resource_config,
)
from crudgen.core.services.generators.schema_module import (
    generate_schema_module,
    parse_schema_args,
)


# ═══════════════════════════════════════════════════════════════════
#  Resource config
# ═══════════════════════════════════════════════════════════════════


class TestRenderResourceConfig:
    def test_two_argument_form(self):
        body = render_resource_config("MyApp.Accounts", "MyApp.Accounts.User")
        assert body == (
            "import PhoenixConfig, only: [crud_from_schema: 2]\n"
            "\n"
            "[\n"
            "  crud_from_schema(MyApp.Accounts, MyApp.Accounts.User)\n"
            "]\n"
        )

    def test_only_given(self):
        body = render_resource_config(
            "MyApp.Accounts",
            "MyApp.Accounts.User",
            only=(OperationTag.CREATE, OperationTag.FIND),
        )
        assert "crud_from_schema: 4" in body
        assert "crud_from_schema(MyApp.Accounts, MyApp.Accounts.User, [:create, :find], [])" in body

    def test_except_given(self):
        body = render_resource_config(
            "MyApp.Accounts", "MyApp.Accounts.User", except_=(OperationTag.DELETE,)
        )
        assert "crud_from_schema(MyApp.Accounts, MyApp.Accounts.User, [], [:delete])" in body

    def test_both_given(self):
        body = render_resource_config(
            "C", "C.S", only=(OperationTag.ALL,), except_=(OperationTag.DELETE,)
        )
        assert "crud_from_schema(C, C.S, [:all], [:delete])" in body

    def test_custom_namespace_and_call(self):
        body = render_resource_config("C", "C.S", namespace="Api.Config", call="crud")
        assert body.startswith("import Api.Config, only: [crud: 2]\n")
        assert "  crud(C, C.S)\n" in body

    def test_render_operation_tags(self):
        assert render_operation_tags(None) == "[]"
        assert render_operation_tags(()) == "[]"
        assert render_operation_tags((OperationTag.UPDATE,)) == "[:update]"


class TestConfigFileName:
    def test_appends_extension(self):
        assert config_file_name("user", ".exs") == "user.exs"

    def test_keeps_existing_extension(self):
        assert config_file_name("user.exs", ".exs") == "user.exs"

    def test_generate_resource_config(self):
        artifact = generate_resource_config("C", "C.S", "s")
        assert artifact.file_name == "s.exs"
        assert "crud_from_schema(C, C.S)" in artifact.contents


# ═══════════════════════════════════════════════════════════════════
#  Context module
# ═══════════════════════════════════════════════════════════════════


class TestContextModule:
    def test_path(self):
        path = context_lib_path("lib", "my_app", "Accounts.Admin", ".ex")
        assert path.as_posix() == "lib/my_app/accounts/admin.ex"

    def test_generated_source(self):
        gf = generate_context_module("MyApp", "my_app", "Accounts", ["MyApp.Accounts.User"])
        assert gf.path == "lib/my_app/accounts.ex"
        assert gf.content.startswith("defmodule MyApp.Accounts do\n")
        assert "  alias MyApp.Repo\n" in gf.content
        assert "  alias MyApp.Accounts.User\n" in gf.content
        assert gf.content.endswith("end\n")
        assert "MyApp.Accounts.User" in gf.reason


# ═══════════════════════════════════════════════════════════════════
#  Schema module
# ═══════════════════════════════════════════════════════════════════


class TestParseSchemaArgs:
    def test_default_table(self):
        d = parse_schema_args(["Accounts.User", "email:string", "birthday:date"])
        assert d.alias == "Accounts.User"
        assert d.table == "users"
        assert [(f.name, f.type) for f in d.fields] == [("email", "string"), ("birthday", "date")]

    def test_explicit_table(self):
        d = parse_schema_args(["Blog.Post", "blog_posts", "title:string"])
        assert d.table == "blog_posts"

    def test_references_and_arrays(self):
        d = parse_schema_args(["Blog.Post", "author_id:references:users", "tags:array:string"])
        assert d.fields[0].references == "users"
        assert d.fields[1].source_type == "{:array, :string}"

    @pytest.mark.parametrize(
        "args",
        [
            [],
            ["accounts.user"],
            ["Accounts.User", "email:strin"],
            ["Accounts.User", "Email:string"],
            ["Accounts.User", "email:string", "email:text"],
            ["Accounts.User", "users", "loose"],
            ["Accounts.User", "tags:array:widget"],
        ],
    )
    def test_rejects_bad_args(self, args):
        with pytest.raises(SchemaGenerationError):
            parse_schema_args(args)


class TestSchemaModule:
    def test_generated_source(self):
        d = parse_schema_args(["Accounts.User", "email:string", "org_id:references:orgs"])
        gf = generate_schema_module("MyApp", "my_app", d)
        assert gf.path == "lib/my_app/accounts/user.ex"
        assert gf.content.startswith("defmodule MyApp.Accounts.User do\n")
        assert '  schema "users" do\n' in gf.content
        assert "    field :email, :string\n" in gf.content
        assert "    field :org_id, :id\n" in gf.content
        assert "    |> cast(attrs, [:email])\n" in gf.content
        assert "  def changeset(user, attrs) do\n" in gf.content
