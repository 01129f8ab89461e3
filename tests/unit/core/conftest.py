"""Shared fixtures for core unit tests"""

import pytest

from wikidoc.core.models import WikiContext


SAMPLE_ARTICLE = """\
<!-- alias ub, undefined -->
# Undefined Behavior

Undefined behavior means the program has no meaning :tux:
at all. See [the standard][std] and #resources.

- one
- two

## Examples
Signed overflow.
<!-- inline -->
## Related
[UB][std]

---
Read more in `[expr]`.

[std]: https://eel.is/c++draft
"""


@pytest.fixture(name="context")
def context_fixture():
    return WikiContext(
        freestanding=False,
        emojis={"tux": "<:tux:1>", "apple": "<:apple:2>"},
        channels={"resources": "10", "rules": "11"},
    )


@pytest.fixture(name="freestanding_context")
def freestanding_context_fixture(context):
    return WikiContext(freestanding=True, emojis=context.emojis, channels=context.channels)


@pytest.fixture(name="sample_article")
def sample_article_fixture():
    return SAMPLE_ARTICLE
