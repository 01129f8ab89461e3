"""In-memory article registry: lookup by name, title or alias, and title search"""

import logging

from wikidoc.core.models import WikiArticle


logger = logging.getLogger(__name__)

AUTOCOMPLETE_LIMIT = 25


class WikiLibrary:
    """All successfully loaded articles keyed by name, plus the alias -> name routing table."""

    def __init__(self):
        self.articles: dict[str, WikiArticle] = {}
        self.aliases: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.articles)

    def add(self, article: WikiArticle, aliases: set[str]) -> None:
        if article.name is None:
            raise ValueError(f"Cannot register anonymous article '{article.title}'")
        self.articles[article.name] = article
        for alias in sorted(aliases):
            previous = self.aliases.get(alias)
            if previous is not None and previous != article.name:
                logger.warning("Alias %s of article %s overrides article %s", alias, article.name, previous)
            self.aliases[alias] = article.name

    def find(self, query: str) -> WikiArticle | None:
        """Return the first article whose name or title equals query."""
        for name, article in self.articles.items():
            if name == query or article.title == query:
                return article
        return None

    def resolve_alias(self, alias: str) -> WikiArticle | None:
        name = self.aliases.get(alias)
        return self.articles.get(name) if name is not None else None

    def lookup(self, query: str) -> WikiArticle | None:
        """Find by name or title first, then by alias."""
        return self.find(query) or self.resolve_alias(query)

    def aliases_of(self, name: str) -> set[str]:
        return {alias for alias, target in self.aliases.items() if target == name}

    def search_titles(self, query: str, limit: int = AUTOCOMPLETE_LIMIT) -> list[str]:
        """Titles containing query (case-insensitive), in load order."""
        needle = query.lower()
        titles = [a.title for a in self.articles.values() if needle in a.title.lower()]
        return titles[:limit]
