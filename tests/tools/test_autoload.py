import pytest

from generators.resource_generator import ResourceGenerator
from generators.tool_generator import ToolGenerator
from models.attribute import parse_attributes
from tools.autoload import ToolAutoloader, autoload_tools
from tools.exceptions import DuplicateToolError, ToolLoadError
from tools.registry import get_registry

from tests.conftest import POST_ATTRIBUTES

EXPECTED = ["create_post", "delete_post", "list_posts", "search_posts", "show_post", "update_post"]


@pytest.fixture
def project(tmp_path):
    ResourceGenerator("post", POST_ATTRIBUTES, root=tmp_path).generate()
    ToolGenerator("search_posts", parse_attributes(["query:string"]), root=tmp_path).generate()
    return tmp_path


def test_load_all_registers_generated_tools(project, registry):
    loader = ToolAutoloader(registry, root=project / "app" / "tools")
    descriptors = loader.load_all()

    assert sorted(d.name for d in descriptors) == EXPECTED
    assert registry.names() == EXPECTED
    show = registry.get("show_post")
    assert show.class_name == "ShowPostTool"
    assert show.source == (project / "app" / "tools" / "posts" / "show_tool.py").resolve()
    assert registry.get("list_posts").input_schema() == {"type": "object"}
    assert registry.get("update_post").input_schema()["properties"]["views"] == {"type": "integer"}


def test_loading_twice_is_idempotent(project, registry):
    loader = ToolAutoloader(registry, root=project / "app" / "tools")
    loader.load_all()
    first = {d.name: d.class_name for d in registry}

    loader.load_all()
    assert {d.name: d.class_name for d in registry} == first
    assert len(registry) == len(EXPECTED)


def test_broken_tool_file_is_fatal(project, registry):
    broken = project / "app" / "tools" / "broken_tool.py"
    broken.write_text("def oops(:\n    pass\n")

    with pytest.raises(ToolLoadError) as exc:
        ToolAutoloader(registry, root=project / "app" / "tools").load_all()
    assert exc.value.path == broken
    assert "SyntaxError" in str(exc.value)


def test_reference_error_is_fatal(tmp_path, registry):
    root = tmp_path / "app" / "tools"
    root.mkdir(parents=True)
    (root / "dangling.py").write_text("from tools.base import Tool\n\n\nclass DanglingTool(MissingBase):\n    pass\n")

    with pytest.raises(ToolLoadError, match="NameError"):
        ToolAutoloader(registry, root=root).load_all()


def test_duplicate_tool_names_across_files(tmp_path, registry):
    root = tmp_path / "app" / "tools"
    ToolGenerator("ping", root=tmp_path).generate()
    (root / "pong.py").write_text(
        "from tools.base import Tool\n\n\nclass PongTool(Tool):\n    name = \"ping\"\n    description = \"Pong\"\n"
    )

    with pytest.raises(DuplicateToolError) as exc:
        ToolAutoloader(registry, root=root).load_all()
    assert exc.value.name == "ping"


def test_namespaced_copies_of_a_resource_load_together(tmp_path, registry):
    ResourceGenerator("post", POST_ATTRIBUTES, root=tmp_path).generate()
    ResourceGenerator("admin/post", POST_ATTRIBUTES, root=tmp_path).generate()
    ToolGenerator("ping", root=tmp_path).generate()
    ToolGenerator("admin/ping", root=tmp_path).generate()

    ToolAutoloader(registry, root=tmp_path / "app" / "tools").load_all()

    assert len(registry) == 12
    assert registry.get("show_post").class_name == "ShowPostTool"
    assert registry.get("admin_show_post").class_name == "AdminShowPostTool"
    assert registry.get("admin_ping").source == (tmp_path / "app" / "tools" / "admin" / "ping.py").resolve()


def test_only_tools_defined_in_the_file_are_registered(tmp_path, registry):
    root = tmp_path / "app" / "tools"
    root.mkdir(parents=True)
    (root / "__init__.py").write_text("raise RuntimeError('package init must not be loaded')\n")
    (root / "helpers.py").write_text("from tools.base import Tool\n\nHELPER = 1\n")

    assert ToolAutoloader(registry, root=root).load_all() == []
    assert len(registry) == 0


def test_missing_tools_dir_loads_nothing(tmp_path, registry):
    assert ToolAutoloader(registry, root=tmp_path / "app" / "tools").discover() == []


def test_autoload_tools_uses_process_registry(project):
    registry = autoload_tools(root=project / "app" / "tools")
    assert registry is get_registry()
    assert registry.names() == EXPECTED

    autoload_tools(root=project / "app" / "tools")
    assert get_registry().names() == EXPECTED
