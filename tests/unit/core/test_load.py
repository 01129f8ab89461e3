"""Unit tests for core/load.py"""

import logging

from wikidoc.core.load import discover_articles, load_dir, read_article


def test_discover_single_file(tmp_path):
    """A single .md path is returned as-is."""
    f = tmp_path / "doc.md"
    f.write_text("# Hello")
    assert discover_articles(f) == [f]


def test_discover_skips_other_files(tmp_path):
    """Only .md files are articles."""
    (tmp_path / "notes.txt").write_text("text")
    (tmp_path / "page.mdx").write_text("# X")
    assert discover_articles(tmp_path) == []


def test_discover_recursive_sorted(tmp_path):
    """Articles are found recursively in sorted order."""
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.md").write_text("# B")
    (tmp_path / "a.md").write_text("# A")
    assert discover_articles(tmp_path) == [tmp_path / "a.md", sub / "b.md"]


def test_read_article_uses_stem(tmp_path, context):
    """The article name is the file stem."""
    f = tmp_path / "move-semantics.md"
    f.write_text("<!-- alias move -->\n# Move Semantics\nBody :tux:\n", encoding="utf-8")
    article, aliases = read_article(f, context)
    assert article.name == "move-semantics"
    assert article.body == "Body <:tux:1>"
    assert aliases == {"move"}


def test_load_dir_collects_failures(tmp_path, caplog):
    """Broken articles are logged and skipped; the rest still load."""
    (tmp_path / "good.md").write_text("<!-- alias g -->\n# Good\nbody\n")
    (tmp_path / "bad.md").write_text("# One\n# Two\n")
    with caplog.at_level(logging.ERROR, logger="wikidoc"):
        result = load_dir(tmp_path)
    assert list(result.library.articles) == ["good"]
    assert result.library.aliases == {"g": "good"}
    assert len(result.failures) == 1
    path, message = result.failures[0]
    assert path == tmp_path / "bad.md"
    assert "Duplicate title heading" in message
    assert "bad.md" in caplog.text


def test_load_dir_skips_undecodable_file(tmp_path, caplog):
    """A file that is not valid UTF-8 is recorded as a failure without aborting the batch."""
    (tmp_path / "good.md").write_text("# Good\nbody\n")
    (tmp_path / "bad.md").write_bytes(b"# T\n\xff\xfe body\n")
    with caplog.at_level(logging.ERROR, logger="wikidoc"):
        result = load_dir(tmp_path)
    assert list(result.library.articles) == ["good"]
    assert [path for path, _ in result.failures] == [tmp_path / "bad.md"]
    assert "utf-8" in result.failures[0][1]
    assert "bad.md" in caplog.text
