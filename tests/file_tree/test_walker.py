"""Unit tests for the recursive directory walker."""

import os
import stat

import pytest

from repo2html.file_tree.walker import walk


def collect(root, **kwargs):
    seen = []
    walk(root, lambda path, stat_result: seen.append(os.path.relpath(path, root)), **kwargs)
    return seen


def test_visits_every_file_depth_first(make_files):
    root = make_files({"b.txt": "b", "a/z.txt": "z", "a/deep/y.txt": "y", "c.txt": "c"})
    assert collect(root) == [
        os.path.join("a", "deep", "y.txt"),
        os.path.join("a", "z.txt"),
        "b.txt",
        "c.txt",
    ]


def test_directories_are_not_visited(make_files):
    root = make_files({"a/b/c.txt": "c"})
    (root / "empty").mkdir()
    assert collect(root) == [os.path.join("a", "b", "c.txt")]


def test_visit_receives_stat_result(make_files):
    root = make_files({"a.txt": "hello"})
    results = []
    walk(root, lambda path, stat_result: results.append(stat_result))
    assert len(results) == 1
    assert stat.S_ISREG(results[0].st_mode)
    assert results[0].st_size == 5


def test_unsorted_listing_visits_same_files(make_files):
    root = make_files({"b.txt": "b", "a.txt": "a", "sub/c.txt": "c"})
    assert sorted(collect(root, sort_entries=False)) == sorted(collect(root))


def test_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        walk(tmp_path / "missing", lambda path, stat_result: None)


def test_root_is_a_file(make_files):
    root = make_files({"a.txt": "a"})
    with pytest.raises(NotADirectoryError):
        walk(root / "a.txt", lambda path, stat_result: None)


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root ignores permissions")
def test_unreadable_directory_aborts_walk(make_files):
    root = make_files({"locked/a.txt": "a"})
    locked = root / "locked"
    locked.chmod(0)
    try:
        with pytest.raises(PermissionError):
            walk(root, lambda path, stat_result: None)
    finally:
        locked.chmod(0o755)


@pytest.fixture
def tree_with_symlinks(make_files):
    root = make_files({"src/main.txt": "main", "src/utils/helpers.txt": "helpers"})
    try:
        os.symlink(root / "src", root / "linked")
        os.symlink(root / "src" / "main.txt", root / "alias.txt")
        os.symlink(root / "src", root / "src" / "utils" / "loop")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")
    return root


def test_symlinks_skipped_by_default(tree_with_symlinks):
    assert collect(tree_with_symlinks) == [
        os.path.join("src", "main.txt"),
        os.path.join("src", "utils", "helpers.txt"),
    ]


def test_follow_symlinks_cuts_loops(tree_with_symlinks):
    seen = collect(tree_with_symlinks, follow_symlinks=True)
    assert "alias.txt" in seen
    assert os.path.join("linked", "main.txt") in seen
    assert os.path.join("src", "main.txt") in seen
    # The loop back to src is entered at most once per branch
    assert len(seen) == len(set(seen))
    assert all(path.count("loop") <= 1 for path in seen)


def test_follow_symlinks_skips_self_referencing_link(make_files):
    root = make_files({"a.txt": "a"})
    try:
        os.symlink(root / "self", root / "self")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")
    assert collect(root, follow_symlinks=True) == ["a.txt"]
