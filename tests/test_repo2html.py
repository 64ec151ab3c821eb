"""Tests for the Repo2Html facade, covering the end-to-end scenarios."""

import logging
import math

import pytest

from repo2html.filter_policy import FilterPolicy
from repo2html.ignore_rules import IgnoreRules
from repo2html.repo2html import Repo2Html


@pytest.fixture
def two_files(make_files):
    return make_files({"a.txt": "a" * 10, "b.txt": "b" * 10})


def test_unbounded_budget_single_document(two_files, tmp_path):
    converter = Repo2Html(two_files, policy=FilterPolicy(["txt"]), budget=math.inf)
    written = converter.write(tmp_path / "out.html")
    assert written == [tmp_path / "out0.html"]
    html = written[0].read_text(encoding="utf-8")
    assert "a" * 10 in html and "b" * 10 in html
    assert converter.rendering_complete
    assert converter.document_count == 1


def test_budget_produces_two_documents(two_files, tmp_path):
    converter = Repo2Html(two_files, budget=15)
    written = converter.write(tmp_path / "out.html")
    assert written == [tmp_path / "out0.html", tmp_path / "out1.html"]
    first = written[0].read_text(encoding="utf-8")
    second = written[1].read_text(encoding="utf-8")
    assert "a" * 10 in first and "b" * 10 not in first
    assert "b" * 10 in second and "a" * 10 not in second


def test_only_unlisted_file_produces_nothing(make_files, tmp_path, caplog):
    root = make_files({"notes.md": "# notes"})
    converter = Repo2Html(root, policy=FilterPolicy(["txt"], []))
    with caplog.at_level(logging.WARNING, logger="repo2html"):
        written = converter.write(tmp_path / "out.html")
    assert written == []
    assert converter.skipped_count == 1
    assert "Did not include" in caplog.text
    assert list(tmp_path.glob("out*.html")) == []


def test_hidden_file_excluded_without_warning(make_files, caplog):
    root = make_files({".env": "X=1", "a.txt": "a"})
    converter = Repo2Html(root, policy=FilterPolicy(["txt", "env"]))
    with caplog.at_level(logging.WARNING, logger="repo2html"):
        documents = list(converter.stream_documents())
    assert len(documents) == 1
    assert "X=1" not in documents[0]
    assert converter.skipped_count == 0
    assert caplog.records == []


def test_counts(make_files):
    root = make_files(
        {
            "src/lib/util.txt": "12345",
            "src/main.txt": "123",
            "docs/readme.md": "# hi",
            "bad.txt": b"\xff\xfe",
        }
    )
    converter = Repo2Html(root)
    assert converter.file_count == 2
    assert converter.directory_count == 2
    assert converter.character_count == 8
    assert converter.skipped_count == 1
    assert converter.read_error_count == 1
    assert converter.document_count == 0
    assert not converter.rendering_complete


def test_nested_tree(make_files):
    root = make_files({"src/lib/util.txt": "util"})
    tree = Repo2Html(root).tree
    assert tree.name == "repo"
    src = tree.children[0]
    lib = src.children[0]
    util = lib.children[0]
    assert (src.name, lib.name, util.name) == ("src", "lib", "util.txt")
    assert src.is_dir and lib.is_dir and not util.is_dir


def test_ignore_rules(make_files):
    root = make_files({"vendor/x.txt": "x", "a.txt": "a"})
    converter = Repo2Html(root, ignore_rules=IgnoreRules(["vendor/"]))
    assert converter.file_count == 1
    assert converter.directory_count == 0


def test_documents_can_only_be_rendered_once(two_files):
    converter = Repo2Html(two_files)
    assert len(list(converter.stream_documents())) == 1
    with pytest.raises(RuntimeError):
        list(converter.stream_documents())


def test_two_runs_are_byte_identical(make_files):
    root = make_files({"a/x.txt": "x" * 7, "a/y.txt": "y<&>" * 3, "b.txt": "b" * 9, "c/d/e.txt": "e"})
    first = list(Repo2Html(root, budget=10).stream_documents())
    second = list(Repo2Html(root, budget=10).stream_documents())
    assert first == second
    assert len(first) > 1


def test_escaped_output_has_no_raw_markup_from_sources(make_files):
    root = make_files({"a.txt": "<script>alert('x & y')</script>"})
    document = next(Repo2Html(root).stream_documents())
    assert "<script>" not in document
    assert "&lt;script&gt;alert(&apos;x &amp; y&apos;)&lt;/script&gt;" in document


def test_invalid_directory(tmp_path):
    with pytest.raises(ValueError):
        Repo2Html(tmp_path / "missing")


def test_negative_budget(tmp_path):
    with pytest.raises(ValueError):
        Repo2Html(tmp_path, budget=-1)
