"""Export: build rich-message payloads and write per-article JSON"""

import json
import logging
from pathlib import Path
from typing import Any

from wikidoc.core.models import WikiArticle


logger = logging.getLogger(__name__)


def build_embed(article: WikiArticle, color: int, author: dict[str, str] | None = None) -> dict[str, Any]:
    """Return the embed dict for an article; absent values are omitted."""
    embed: dict[str, Any] = {
        "color": color,
        "title": article.title,
        "fields": [f.model_dump() for f in article.fields],
    }
    if article.body:
        embed["description"] = article.body
    if article.image:
        embed["image"] = {"url": article.image}
    if article.set_author and author:
        embed["author"] = {"name": author["name"], "icon_url": author.get("icon_url")}
    if article.footer:
        embed["footer"] = {"text": article.footer}
    return embed


def build_message(
    article: WikiArticle,
    color: int,
    mention: str | None = None,
    author: dict[str, str] | None = None,
    ) -> dict[str, Any]:
    """Build the message payload: plain content in plain mode, otherwise a single embed.

    mention (e.g. '<@123>') is prepended to plain content or sent as the embed message content.
    author ({'name', 'icon_url'}) is only used when the article sets `user author`.
    """
    if article.plain_mode:
        return {"content": (f"{mention}\n" if mention else "") + article.body}
    message: dict[str, Any] = {"embeds": [build_embed(article, color, author)]}
    if mention:
        message["content"] = mention
    return message


def build_record(article: WikiArticle, aliases: set[str], color: int) -> dict[str, Any]:
    return {
        "article": article.model_dump(),
        "aliases": sorted(aliases),
        "message": build_message(article, color),
    }


def write_article(article: WikiArticle, aliases: set[str], output_dir: Path, color: int) -> Path:
    """Write output_dir/<name>.json for a named article. Returns the written path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{article.name}.json"
    path.write_text(
        json.dumps(build_record(article, aliases, color), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    logger.debug("Exported article %s to %s", article.name, path)
    return path
