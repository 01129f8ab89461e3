"""Data models for parsed wiki articles and the parse context"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from wikidoc.config import Settings


class ParseState(str, Enum):
    """Section of the article that regular content lines currently flow into."""
    body = "body"
    field = "field"
    footer = "footer"
    before_inline_field = "before_inline_field"
    done = "done"


class WikiField(BaseModel):
    """A named sub-section of an article, created by a level-2 heading."""
    name: str
    value: str = ""
    inline: bool = False


class WikiArticle(BaseModel):
    """Structured result of parsing one wiki article."""
    name: Optional[str] = None          # file stem; None for previews
    title: str
    body: Optional[str] = None
    fields: list[WikiField] = Field(default_factory=list)
    footer: Optional[str] = None
    image: Optional[str] = None
    set_author: bool = False
    plain_mode: bool = False            # render as plain text rather than an embed


@dataclass(frozen=True)
class WikiContext:
    """Read-only platform context consulted by placeholder substitution."""
    freestanding: bool = False
    emojis: dict[str, str] = field(default_factory=dict)      # shortcode name -> emoji token
    channels: dict[str, str] = field(default_factory=dict)    # shortcut name -> channel id

    @classmethod
    def from_settings(cls, settings: Settings) -> "WikiContext":
        return cls(
            freestanding=settings.freestanding,
            emojis=dict(settings.emojis),
            channels=dict(settings.channels),
        )
