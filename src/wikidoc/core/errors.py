"""Errors raised while parsing wiki articles"""


class ArticleParseError(ValueError):
    """An authoring error in a wiki article; carries the 1-based source line when known."""

    def __init__(self, message: str, line: int | None = None):
        self.message = message
        self.line = line
        super().__init__(f"line {line}: {message}" if line is not None else message)
