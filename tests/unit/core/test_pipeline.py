"""Unit tests for core/pipeline.py"""

import json

import pytest

from wikidoc.core.models import WikiContext
from wikidoc.core.pipeline import run_export, run_load


def test_run_load_missing_path(tmp_path):
    """A missing article root is reported as RuntimeError."""
    with pytest.raises(RuntimeError, match="not found"):
        run_load(str(tmp_path / "missing"), WikiContext())


def test_load_then_export(tmp_path):
    """Loaded articles are exported one JSON file each, with their aliases."""
    src = tmp_path / "articles"
    src.mkdir()
    (src / "one.md").write_text("<!-- alias uno -->\n# One\nfirst\n")
    (src / "two.md").write_text("# Two\nsecond\n")

    result = run_load(str(src), WikiContext())
    exported = run_export(result.library, tmp_path / "dist", 0x123456)

    assert [name for name, _ in exported] == ["one", "two"]
    record = json.loads((tmp_path / "dist" / "one.json").read_text(encoding="utf-8"))
    assert record["aliases"] == ["uno"]
    assert record["article"]["body"] == "first"
