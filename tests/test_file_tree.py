from pathlib import Path

import pytest

from calcifer.file_tree import (
    FileEntry,
    generate_folder_entry,
    get_file_path_id,
    update_file_tree,
)


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (root / "b_dir").mkdir()
    (root / "a_dir").mkdir()
    (root / "a_dir" / "inner.txt").write_text("x")
    (root / "z.txt").write_text("z")
    (root / "c.rs").write_text("c")
    (root / ".hidden").write_text("h")
    (root / ".hidden_dir").mkdir()
    return root


def test_get_file_path_id():
    assert get_file_path_id(Path("/a/b")) == "#/a/b"


def test_new_entry_is_leaf():
    entry = FileEntry.new_entry("f.txt", "/x/f.txt")
    assert entry.folder_content is None
    assert entry.content_checked
    assert entry.id.startswith("/x/f.txt#")


def test_end_of_branch_is_unchecked_directory():
    entry = FileEntry.end_of_branch("d", Path("/x/d"))
    assert entry.folder_content == []
    assert not entry.content_checked
    assert entry.id.startswith("/x/d#")


def test_generate_folder_entry_orders_and_hides(tree):
    entry = generate_folder_entry(tree)
    assert entry.name == "root"
    assert entry.content_checked
    assert [child.name for child in entry.folder_content] == [
        "a_dir",
        "b_dir",
        "c.rs",
        "z.txt",
    ]


def test_generate_folder_entry_children_kinds(tree):
    children = {c.name: c for c in generate_folder_entry(tree).folder_content}
    assert children["a_dir"].folder_content == []
    assert not children["a_dir"].content_checked
    assert children["c.rs"].folder_content is None
    assert children["c.rs"].path == tree / "c.rs"


def test_generate_folder_entry_missing_directory(tmp_path):
    missing = tmp_path / "missing"
    entry = generate_folder_entry(missing)
    assert entry.name.startswith("Error reading directory: ")
    assert entry.folder_content is None
    assert entry.path == missing


def test_generate_folder_entry_without_name():
    entry = generate_folder_entry(Path("/"))
    assert entry.name == "Error reading directory name"


def test_update_file_tree_ignores_closed_root(tree):
    root = generate_folder_entry(tree)
    assert update_file_tree(root, []) is root


def test_update_file_tree_reads_opened_directories(tree):
    root = generate_folder_entry(tree)
    opened = [get_file_path_id(tree), get_file_path_id(tree / "a_dir")]
    updated = update_file_tree(root, opened)
    children = {c.name: c for c in updated.folder_content}
    assert children["a_dir"].content_checked
    assert [c.name for c in children["a_dir"].folder_content] == ["inner.txt"]
    assert children["b_dir"].folder_content == []
    assert not children["b_dir"].content_checked


def test_update_file_tree_reads_unchecked_root(tree):
    branch = FileEntry.end_of_branch("root", tree)
    updated = update_file_tree(branch, [get_file_path_id(tree)])
    assert updated.content_checked
    assert [c.name for c in updated.folder_content] == [
        c.name for c in generate_folder_entry(tree).folder_content
    ]


def test_update_file_tree_leaves_files_alone(tree):
    leaf = FileEntry.new_entry("z.txt", tree / "z.txt")
    assert update_file_tree(leaf, [get_file_path_id(tree / "z.txt")]) is leaf