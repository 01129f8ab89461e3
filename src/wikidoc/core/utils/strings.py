"""Escape-aware string search helpers"""


def index_of_first_unescaped(text: str, c: str, start: int = 0) -> int | None:
    """Return the index of the first occurrence of c in text not escaped by a backslash, else None.

    A backslash escapes the character that follows it, so searching for '"' in '\\""'
    finds the second quote. Two consecutive backslashes cancel out.
    """
    if len(c) != 1:
        raise ValueError("terminator must be a single character")
    after_escape = False
    for i in range(start, len(text)):
        if after_escape:
            after_escape = False
        elif text[i] == "\\":
            after_escape = True
        elif text[i] == c:
            return i
    return None
