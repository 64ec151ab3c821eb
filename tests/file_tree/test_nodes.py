"""Unit tests for FolderNode and FileNode."""

from repo2html.file_tree.nodes import FileNode, FolderNode


def test_folder_defaults():
    root = FolderNode("repo")
    assert root.name == "repo"
    assert root.tree_path == "repo"
    assert root.is_dir
    assert root.children == ()


def test_children_keep_insertion_order():
    root = FolderNode("repo")
    for name in ["zeta", "alpha", "mid"]:
        FolderNode(name, parent=root, tree_path=f"repo/{name}")
    assert [child.name for child in root.children] == ["zeta", "alpha", "mid"]


def test_child_lookup_is_exact():
    root = FolderNode("repo")
    src = FolderNode("src", parent=root)
    assert root.child("src") is src
    assert root.child("SRC") is None
    assert root.child("sr") is None


def test_file_node_attributes():
    root = FolderNode("repo")
    node = FileNode("a.txt", parent=root, tree_path="repo/a.txt", extension="txt", content="héllo", file_size=6)
    assert node.parent is root
    assert not node.is_dir
    assert node.extension == "txt"
    assert node.content == "héllo"
    assert node.content_length == 5
    assert node.file_size == 6
    assert node.rendered is False


def test_content_length_fixed_at_construction():
    node = FileNode("a.txt", content="abc")
    node.content = "abcdef"
    assert node.content_length == 3


def test_mark_rendered():
    node = FileNode("a.txt", content="abc")
    node.mark_rendered()
    assert node.rendered is True
    node.mark_rendered()
    assert node.rendered is True
