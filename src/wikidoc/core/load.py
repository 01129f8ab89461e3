"""Article discovery and bulk loading from the filesystem"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wikidoc.core.errors import ArticleParseError
from wikidoc.core.library import WikiLibrary
from wikidoc.core.models import WikiArticle, WikiContext
from wikidoc.core.parse.parser import parse_article


logger = logging.getLogger(__name__)

ARTICLE_SUFFIX = ".md"


@dataclass
class LoadResult:
    library: WikiLibrary
    failures: list[tuple[Path, str]] = field(default_factory=list)   # (path, error message)


def is_article(path: Path) -> bool:
    return path.suffix == ARTICLE_SUFFIX


def discover_articles(path: Path) -> list[Path]:
    """Return sorted .md files under path, or [path] if it is a single article."""
    if path.is_file():
        return [path] if is_article(path) else []
    return sorted(p for p in path.rglob('*') if p.is_file() and is_article(p))


def read_article(path: Path, context: WikiContext | None = None) -> tuple[WikiArticle, set[str]]:
    """Parse a single article file; its name is the file stem."""
    content = path.read_text(encoding='utf-8')
    return parse_article(path.stem, content, context)


def load_dir(path: Path, context: WikiContext | None = None) -> LoadResult:
    """Parse every article under path, skipping (and recording) those that fail to read or parse."""
    result = LoadResult(library=WikiLibrary())
    for p in discover_articles(path):
        try:
            article, aliases = read_article(p, context)
        except (ArticleParseError, UnicodeDecodeError, OSError) as e:
            logger.error("Failed to load article %s: %s", p, e)
            result.failures.append((p, str(e)))
            continue
        result.library.add(article, aliases)
        logger.debug("Loaded article %s with %d alias(es)", article.name, len(aliases))
    return result
