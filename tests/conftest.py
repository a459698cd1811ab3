"""Pytest configuration for include_shader tests."""

import pytest


@pytest.fixture
def shader_tree(tmp_path):
    """Return a helper that writes {relative path: content} under tmp_path."""

    def write(files: dict[str, str]):
        for name, content in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        return tmp_path

    return write
