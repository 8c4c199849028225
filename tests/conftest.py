"""Shared fixtures for the declaration scanner tests."""

import pytest

from decl.reporter import Reporter
from decl.scanner import Scanner


@pytest.fixture
def reporter():
    return Reporter()


@pytest.fixture
def scanner(reporter):
    """A fresh scanner with its own reporter."""
    return Scanner(reporter)


@pytest.fixture
def source(tmp_path):
    """Write text to a file under tmp_path and return its path as str."""
    def write(text, name="input.txt"):
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return str(path)
    return write
