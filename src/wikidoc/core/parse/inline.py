"""Inline substitution: placeholders, emojis, channel shortcuts and link masks outside inline code"""

import re

from wikidoc.core.errors import ArticleParseError
from wikidoc.core.models import WikiContext
from wikidoc.core.utils.strings import index_of_first_unescaped


LINE_BREAK_RE = re.compile(r'<br/?>\n?')


class InlineSubstituter:
    """Rewrites single lines of article text into platform-ready markdown.

    Inline code spans are copied through untouched. Everything else is split into
    plain fragments, which get placeholder substitution, and link masks, which get
    resolved against the reference table.
    """

    def __init__(self, references: dict[str, str], context: WikiContext):
        self.references = references
        self.context = context
        self._emoji_patterns = [
            (re.compile(rf'(?<!<):{re.escape(name)}:'), token)
            for name, token in context.emojis.items()
        ]
        self._channel_patterns = [
            (re.compile(rf'#{re.escape(name)}(?![a-zA-Z0-9_])'), f"<#{channel_id}>")
            for name, channel_id in context.channels.items()
        ]

    def substitute(self, line: str) -> str:
        """Substitute placeholders and link masks in line, leaving inline code as-is."""
        result: list[str] = []
        piece: list[str] = []
        after_escape = False
        i = 0
        while i < len(line):
            c = line[i]
            if after_escape:
                # The platform renderer needs the same escapes, so keep the backslash.
                piece.append("\\" + c)
                after_escape = False
            elif c == "\\":
                after_escape = True
            elif c == "`":
                result.append(self.substitute_plain("".join(piece)))
                piece = []
                end = index_of_first_unescaped(line, "`", i + 1)
                if end is None:
                    result.append(line[i:])
                    return "".join(result)
                result.append(line[i:end + 1])
                i = end
            elif c == "[":
                replacement, consumed = self.substitute_link_mask(line, i)
                if consumed == 0:
                    piece.append(c)
                else:
                    result.append(self.substitute_plain("".join(piece)))
                    result.append(replacement)
                    piece = []
                    i += consumed
                    continue
            else:
                piece.append(c)
            i += 1

        if after_escape:
            piece.append("\\")
        result.append(self.substitute_plain("".join(piece)))
        return "".join(result)

    def substitute_link_mask(self, line: str, start: int) -> tuple[str, int]:
        """Resolve a link mask opening at line[start] == '['.

        Returns (replacement, consumed_length). A consumed length of zero means the
        bracket never closes on this line and should be treated as a literal '['.
        Brackets inside inline code within the mask do not count towards nesting.
        """
        after_escape = False
        depth = 0
        i = start
        while i < len(line):
            c = line[i]
            if after_escape:
                after_escape = False
            elif c == "\\":
                after_escape = True
            elif c == "`":
                end = index_of_first_unescaped(line, "`", i + 1)
                if end is None:
                    # e.g. [`abc
                    return "", 0
                i = end
            elif c == "[":
                depth += 1
            elif c == "]":
                depth -= 1
                if depth == 0:
                    return self._resolve_mask(line, start, i)
            i += 1
        return "", 0

    def _resolve_mask(self, line: str, start: int, close: int) -> tuple[str, int]:
        following = line[close + 1:close + 2]

        # [mask](url) is native platform syntax
        if following == "(":
            end = index_of_first_unescaped(line, ")", close + 1)
            if end is None:
                raise ArticleParseError("Masked link with unterminated URL found")
            return line[start:end + 1], end + 1 - start

        mask = line[start:close + 1]

        # [mask][ref] -> [mask](url)
        if following == "[":
            end = index_of_first_unescaped(line, "]", close + 2)
            if end is None:
                # Almost certainly a typo, so refuse to guess.
                raise ArticleParseError("Masked link with unterminated reference found")
            ref = line[close + 2:end]
            return f"{mask}({self.resolve_reference(ref)})", end + 1 - start

        # [mask] is shorthand for [mask][mask]
        ref = line[start + 1:close]
        return f"{mask}({self.resolve_reference(ref)})", close + 1 - start

    def resolve_reference(self, ref: str) -> str:
        """Return the url defined for ref, raising ArticleParseError when it is undefined."""
        try:
            return self.references[ref]
        except KeyError:
            raise ArticleParseError(f'Unknown reference "{ref}" in reference-style link') from None

    def substitute_emojis(self, text: str) -> str:
        """Replace :shortcode: emojis not already inside an emoji token."""
        if self.context.freestanding:
            return text
        for pattern, token in self._emoji_patterns:
            text = pattern.sub(lambda _m, token=token: token, text)
        return text

    def substitute_plain(self, text: str) -> str:
        """Substitute placeholders in text that contains no inline code or link masks."""
        text = LINE_BREAK_RE.sub("\n", self.substitute_emojis(text))
        if self.context.freestanding:
            return text
        for pattern, token in self._channel_patterns:
            text = pattern.sub(lambda _m, token=token: token, text)
        return text
