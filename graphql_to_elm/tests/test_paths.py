"""
Tests for input discovery and output path resolution.
"""

from pathlib import Path

from graphql_to_elm.pipeline import find_schema_files, module_name_for, resolve_output_path


def test_module_name_for():
    assert module_name_for("schemas/shapes.graphql") == "Shapes"
    assert module_name_for(Path("shop_items.gql")) == "ShopItems"
    assert module_name_for("/tmp/user-profile.graphql") == "UserProfile"


def test_find_schema_files(tmp_path):
    for name in ["b.gql", "a.graphql", "notes.txt", "c.graphql.bak"]:
        (tmp_path / name).write_text("")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "d.graphql").write_text("")

    assert [p.name for p in find_schema_files(tmp_path)] == ["a.graphql", "b.gql"]


def test_find_schema_files_custom_extensions(tmp_path):
    (tmp_path / "a.graphqls").write_text("")
    (tmp_path / "b.graphql").write_text("")

    assert [p.name for p in find_schema_files(tmp_path, [".graphqls"])] == ["a.graphqls"]


def test_resolve_output_path_directory(tmp_path):
    assert resolve_output_path(tmp_path, "Shapes") == tmp_path / "Shapes.elm"


def test_resolve_output_path_file(tmp_path):
    target = tmp_path / "Out.elm"
    assert resolve_output_path(target, "Shapes") == target
    assert resolve_output_path(str(target), "Shapes") == target
