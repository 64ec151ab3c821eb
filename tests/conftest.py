"""Test configuration and fixtures for repo2html."""

import pytest


@pytest.fixture
def make_files(tmp_path):
    """Create files under a fresh ``repo`` directory from a {relative path: content} mapping."""

    def _make(files, root_name="repo"):
        root = tmp_path / root_name
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make
