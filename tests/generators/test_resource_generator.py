import pytest

from generators.exceptions import FileWriteError, InvalidIdentifierError
from generators.introspection import MappingSchemaIntrospector
from generators.resource_generator import ResourceGenerator
from models.attribute import Attribute, FieldKind
from tools.base import EmptyProperty

from tests.conftest import POST_ATTRIBUTES, load_source

FILES = ["create_tool.py", "delete_tool.py", "index_tool.py", "show_tool.py", "update_tool.py"]


def _tool(path, class_name):
    return load_source(path)[class_name]


def test_generates_five_files_in_resource_directory(tmp_path):
    actions = ResourceGenerator("post", POST_ATTRIBUTES, root=tmp_path).generate()

    directory = tmp_path / "app" / "tools" / "posts"
    assert len(actions) == 5
    assert all(a.status == "create" for a in actions)
    assert sorted(p.name for p in directory.iterdir()) == FILES


def test_create_and_update_carry_all_attributes_in_order(tmp_path):
    ResourceGenerator("post", POST_ATTRIBUTES, root=tmp_path).generate()
    directory = tmp_path / "app" / "tools" / "posts"

    create = _tool(directory / "create_tool.py", "CreatePostTool")
    assert list(create.properties.items()) == [
        ("title", {"type": "string"}),
        ("views", {"type": "integer"}),
        ("published", {"type": "boolean"}),
    ]
    assert create.required == ["title", "views", "published"]

    update = _tool(directory / "update_tool.py", "UpdatePostTool")
    assert list(update.properties) == ["id", "title", "views", "published"]
    assert update.properties["published"] == {"type": "boolean"}
    assert update.required == ["id"]


def test_identifier_only_tools(tmp_path):
    ResourceGenerator("post", POST_ATTRIBUTES, root=tmp_path).generate()
    directory = tmp_path / "app" / "tools" / "posts"

    index = _tool(directory / "index_tool.py", "ListPostsTool")
    assert index.name == "list_posts"
    assert index.properties is EmptyProperty

    for file_name, class_name, tool_name in (
        ("show_tool.py", "ShowPostTool", "show_post"),
        ("delete_tool.py", "DeletePostTool", "delete_post"),
    ):
        tool_class = _tool(directory / file_name, class_name)
        assert tool_class.name == tool_name
        assert tool_class.properties == {"id": {"type": "integer"}}
        assert tool_class.required == ["id"]


def test_attribute_kind_is_identical_across_tools(tmp_path):
    attributes = POST_ATTRIBUTES + [Attribute("author", "belongs_to"), Attribute("body", "jsonb")]
    definitions = ResourceGenerator("post", attributes, root=tmp_path).definitions()

    kinds = {}
    for definition in definitions:
        for field in definition.fields:
            kinds.setdefault(field.name, set()).add(field.kind)
    assert all(len(found) == 1 for found in kinds.values())
    assert kinds["author"] == {FieldKind.INTEGER}
    assert kinds["body"] == {FieldKind.STRING}


def test_plural_and_namespaced_resource_names(tmp_path):
    ResourceGenerator("posts", root=tmp_path).generate()
    assert "ShowPostTool" in load_source(tmp_path / "app" / "tools" / "posts" / "show_tool.py")

    ResourceGenerator("admin/category", root=tmp_path).generate()
    directory = tmp_path / "app" / "tools" / "admin" / "categories"
    assert _tool(directory / "index_tool.py", "AdminListCategoriesTool").name == "admin_list_categories"
    assert _tool(directory / "update_tool.py", "AdminUpdateCategoryTool").name == "admin_update_category"


def test_invalid_resource_name_writes_nothing(tmp_path):
    with pytest.raises(InvalidIdentifierError):
        ResourceGenerator("2cool", POST_ATTRIBUTES, root=tmp_path).generate()
    assert not (tmp_path / "app").exists()


@pytest.mark.parametrize("name", ["_", "_1/post"])
def test_resource_name_must_produce_class_names(tmp_path, name):
    with pytest.raises(InvalidIdentifierError, match="class name"):
        ResourceGenerator(name, POST_ATTRIBUTES, root=tmp_path).generate()
    assert not (tmp_path / "app").exists()


def test_self_attribute_is_rejected(tmp_path):
    with pytest.raises(InvalidIdentifierError, match="call signature"):
        ResourceGenerator("post", [Attribute("self", "string")], root=tmp_path).generate()
    assert not (tmp_path / "app").exists()


def test_id_attribute_is_reserved(tmp_path):
    with pytest.raises(InvalidIdentifierError, match="record identifier"):
        ResourceGenerator("post", [Attribute("id", "integer")], root=tmp_path).generate()
    assert not (tmp_path / "app").exists()


def test_introspector_supplies_attributes_when_none_given(tmp_path):
    introspector = MappingSchemaIntrospector({"post": {"title": "string", "views": "integer"}})
    ResourceGenerator("post", root=tmp_path, introspector=introspector).generate()

    create = _tool(tmp_path / "app" / "tools" / "posts" / "create_tool.py", "CreatePostTool")
    assert create.properties == {"title": {"type": "string"}, "views": {"type": "integer"}}


def test_explicit_attributes_win_over_introspection(tmp_path):
    introspector = MappingSchemaIntrospector({"post": {"title": "string", "views": "integer"}})
    generator = ResourceGenerator("post", [Attribute("slug", "string")], root=tmp_path, introspector=introspector)

    create = next(d for d in generator.definitions() if d.action == "create")
    assert [f.name for f in create.fields] == ["slug"]


def test_failed_write_leaves_earlier_files(tmp_path):
    directory = tmp_path / "app" / "tools" / "posts"
    (directory / "update_tool.py").mkdir(parents=True)

    with pytest.raises(FileWriteError) as exc:
        ResourceGenerator("post", POST_ATTRIBUTES, root=tmp_path).generate()

    assert exc.value.target == directory / "update_tool.py"
    assert (directory / "index_tool.py").is_file()
    assert (directory / "show_tool.py").is_file()
    assert (directory / "create_tool.py").is_file()
    assert not (directory / "delete_tool.py").exists()


def test_destroy_removes_all_five_files_and_directory(tmp_path):
    ResourceGenerator("post", POST_ATTRIBUTES, root=tmp_path).generate()
    actions = ResourceGenerator("post", root=tmp_path).destroy()

    assert [a.status for a in actions] == ["remove"] * 5
    assert not (tmp_path / "app" / "tools" / "posts").exists()
    assert (tmp_path / "app" / "tools").is_dir()
