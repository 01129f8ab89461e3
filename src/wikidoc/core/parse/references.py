"""Reference-definition pre-pass: collect `[key]: url` lines before parsing"""

import re


REFERENCE_DEFINITION_RE = re.compile(r'\s*\[([^\]]*)]: (.+)')


def collect_references(lines: list[str]) -> dict[str, str]:
    """Return a key -> url table of every reference definition; later definitions win."""
    references: dict[str, str] = {}
    for line in lines:
        if m := REFERENCE_DEFINITION_RE.match(line):
            references[m.group(1).strip()] = m.group(2).strip()
    return references
