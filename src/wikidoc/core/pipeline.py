"""Pipeline step functions: load and export orchestration"""

from pathlib import Path

from wikidoc.core.export import write_article
from wikidoc.core.library import WikiLibrary
from wikidoc.core.load import LoadResult, load_dir
from wikidoc.core.models import WikiContext


def run_load(path: str, context: WikiContext) -> LoadResult:
    """Load all articles under path. Raises RuntimeError when path does not exist."""
    root = Path(path)
    if not root.exists():
        raise RuntimeError(f"Article path not found: {root}")
    return load_dir(root, context)


def run_export(library: WikiLibrary, output_dir: Path, color: int) -> list[tuple[str, Path]]:
    """Write every article in the library to output_dir. Returns (name, json_path) pairs."""
    results = []
    for name, article in library.articles.items():
        path = write_article(article, library.aliases_of(name), output_dir, color)
        results.append((name, path))
    return results
