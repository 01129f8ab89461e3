"""Wiki article parser: line-by-line state machine over headings, directives and content

Articles are a constrained markdown dialect. A level-1 heading is the title, level-2
headings start fields, and whole-line HTML comments are directives:

    <!-- inline -->          next field is rendered inline
    <!-- --- -->             following content goes to the footer (same as a bare ---)
    <!-- user author -->     show the invoking user as the embed author
    <!-- no embed -->        send the body as plain text
    <!-- ![](url) -->        embed image (same as a bare image line)
    <!-- alias a, b -->      extra names that route to this article
"""

import logging
import re
from dataclasses import dataclass

from wikidoc.core.errors import ArticleParseError
from wikidoc.core.models import ParseState, WikiArticle, WikiContext, WikiField
from wikidoc.core.parse.inline import InlineSubstituter
from wikidoc.core.parse.references import REFERENCE_DEFINITION_RE, collect_references


logger = logging.getLogger(__name__)

IMAGE_RE = re.compile(r'!\[[^\]]*]\(([^)]*)\)')
DIRECTIVE_RE = re.compile(r'<!--(.*?)-->')
ORDERED_ITEM_RE = re.compile(r'\d+\.')
LINE_SPLIT_RE = re.compile(r'\r?\n')
ALIAS_PREFIX = "alias "


@dataclass
class _LineState:
    """Mutable state owned by a single parse pass."""
    section: ParseState = ParseState.body
    in_code: bool = False
    last_was_blockquote: bool = False


class ArticleParser:
    """Single-use parser; call parse() once, then read article and aliases."""

    def __init__(self, context: WikiContext | None = None):
        self.context = context or WikiContext()
        self.state = _LineState()
        self.aliases: set[str] = set()

        self.name: str | None = None
        self.title: str | None = None
        self.body = ""
        self.fields: list[WikiField] = []
        self.footer = ""
        self.image: str | None = None
        self.set_author = False
        self.plain_mode = False

        self._inline: InlineSubstituter | None = None
        self._lineno = 0
        self._directives = {
            "inline": self._directive_inline,
            "---": self._directive_footer,
            "user author": self._directive_user_author,
            "no embed": self._directive_no_embed,
        }

    def parse(self, name: str | None, content: str) -> None:
        if self.state.section == ParseState.done:
            raise RuntimeError("ArticleParser instances are single-use")
        self.name = name
        lines = LINE_SPLIT_RE.split(content)
        self._inline = InlineSubstituter(collect_references(lines), self.context)

        for lineno, line in enumerate(lines, start=1):
            self._lineno = lineno
            try:
                self.parse_line(line)
            except ArticleParseError as e:
                if e.line is not None:
                    raise
                raise ArticleParseError(e.message, lineno) from e

        self._validate()
        self.state.section = ParseState.done

    def _validate(self) -> None:
        if self.state.in_code:
            raise ArticleParseError("Unclosed code block in wiki article")
        if self.state.section == ParseState.before_inline_field:
            raise ArticleParseError("Trailing inline field directive")
        if not self.title:
            raise ArticleParseError("Wiki article must have a title")

        self.body = self.body.strip()
        self.footer = self.footer.strip()
        for f in self.fields:
            f.value = f.value.strip()

        if self.plain_mode:
            if not self.body:
                raise ArticleParseError("Must have a body if it's not an embed")
            if self.footer:
                raise ArticleParseError("Can't have a footer if it's not an embed")
            if self.fields:
                raise ArticleParseError("Can't have fields if it's not an embed")

    def parse_line(self, line: str) -> None:
        """Classify one source line and dispatch it."""
        trimmed = line.strip()
        if trimmed.startswith("```"):
            self.state.in_code = not self.state.in_code
            self.parse_regular_line(line)
        elif self.state.in_code:
            self.parse_regular_line(line)
        elif line.startswith("#"):
            self.parse_heading(line)
        elif m := DIRECTIVE_RE.fullmatch(trimmed):
            self.parse_directive(m.group(1).strip())
        elif trimmed == "---":
            self.parse_directive(trimmed)
        elif IMAGE_RE.search(trimmed):
            self.parse_directive(trimmed)
        elif REFERENCE_DEFINITION_RE.match(line):
            pass  # consumed by collect_references
        else:
            self.parse_regular_line(line)

        if not self.state.in_code and trimmed:
            self.state.last_was_blockquote = line.startswith(">")

    def parse_heading(self, line: str) -> None:
        level = len(line) - len(line.lstrip("#"))
        if level == 1:
            if self.title is not None:
                raise ArticleParseError("Duplicate title heading")
            self.title = line[1:].strip()
            self.state.section = ParseState.body
        elif level == 2:
            name = self._inline.substitute_emojis(line[2:].strip())
            inline = self.state.section == ParseState.before_inline_field
            self.fields.append(WikiField(name=name, value="", inline=inline))
            self.state.section = ParseState.field
        else:
            self.parse_regular_line(line)

    def parse_directive(self, directive: str) -> None:
        """Apply a directive, given the text between `<!--` and `-->`."""
        if handler := self._directives.get(directive):
            handler()
        elif m := IMAGE_RE.search(directive):
            self.image = m.group(1).strip()
        elif directive.startswith(ALIAS_PREFIX):
            self._directive_alias(directive[len(ALIAS_PREFIX):])
        else:
            logger.warning(
                "Unknown directive encountered while parsing article %s (line %d): %s",
                self.name, self._lineno, directive,
            )

    def _directive_inline(self) -> None:
        self.state.section = ParseState.before_inline_field

    def _directive_footer(self) -> None:
        self.state.section = ParseState.footer

    def _directive_user_author(self) -> None:
        self.set_author = True

    def _directive_no_embed(self) -> None:
        self.plain_mode = True

    def _directive_alias(self, names: str) -> None:
        for alias in (a.strip() for a in names.split(",")):
            if not alias:
                raise ArticleParseError("Empty alias in alias directive")
            if alias in self.aliases:
                raise ArticleParseError(f'Duplicate alias "{alias}"')
            self.aliases.add(alias)

    def _requires_line_break(self, line: str) -> bool:
        """Structural lines need a hard break; prose lines are joined with a space."""
        trimmed = line.strip()
        return (
            self.state.in_code
            or (line.startswith(">") and self.state.last_was_blockquote)
            or trimmed.startswith("```")
            or line.startswith("#")
            or trimmed == ""
            or trimmed.startswith("- ")
            or ORDERED_ITEM_RE.match(trimmed) is not None
        )

    def parse_regular_line(self, line: str) -> None:
        requires_line_break = self._requires_line_break(line)
        terminated = line + "\n" if requires_line_break else line
        if not self.state.in_code:
            terminated = self._inline.substitute(terminated)

        def append_line(content: str) -> str:
            if content:
                tail = content[-1]
                if requires_line_break:
                    if tail != "\n":
                        content += "\n"
                elif not tail.isspace():
                    content += " "
            return content + terminated

        section = self.state.section
        if section == ParseState.body:
            self.body = append_line(self.body)
        elif section == ParseState.field:
            self.fields[-1].value = append_line(self.fields[-1].value)
        elif section == ParseState.footer:
            self.footer = append_line(self.footer)
        elif line.strip():  # blank lines may separate the inline directive from its heading
            raise ArticleParseError("Content between inline directive and field heading")

    @property
    def is_done(self) -> bool:
        return self.state.section == ParseState.done

    @property
    def article(self) -> WikiArticle:
        if not self.is_done:
            raise RuntimeError("Attempting to access article of a parser without success")
        return WikiArticle(
            name=self.name,
            title=self.title,
            body=self.body or None,
            fields=self.fields,
            footer=self.footer or None,
            image=self.image,
            set_author=self.set_author,
            plain_mode=self.plain_mode,
        )

    @property
    def article_aliases(self) -> set[str]:
        if not self.is_done:
            raise RuntimeError("Attempting to access aliases of a parser without success")
        return set(self.aliases)


def parse_article(name: str | None, content: str, context: WikiContext | None = None) -> tuple[WikiArticle, set[str]]:
    """Parse article content into (article, aliases); raises ArticleParseError on malformed input."""
    parser = ArticleParser(context)
    parser.parse(name, content)
    return parser.article, parser.article_aliases


def parse_preview(content: str, context: WikiContext | None = None) -> tuple[WikiArticle, set[str]]:
    """Parse an anonymous article, e.g. one pasted for preview."""
    return parse_article(None, content, context)
