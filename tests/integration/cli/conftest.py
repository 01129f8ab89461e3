"""Fixtures for CLI integration tests"""

import logging

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI callback reconfigures logging; put the root logger back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(name="runner")
def runner_fixture():
    return CliRunner()


@pytest.fixture(name="articles")
def articles_fixture(tmp_path, monkeypatch):
    """A working directory holding a small article tree under ./articles."""
    monkeypatch.chdir(tmp_path)
    root = tmp_path / "articles"
    root.mkdir()
    (root / "ub.md").write_text(
        "<!-- alias undefined -->\n# Undefined Behavior\nNo meaning :tux:\n## Example\nSigned overflow.\n"
    )
    (root / "hello.md").write_text("<!-- no embed -->\n# Hello\nHi there!\n")
    return root
