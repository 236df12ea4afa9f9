"""Derived Fields: blog slug and reading time computed from author input.

Invariants:
    - derive_slug is a pure function of the title (same title, same slug)
    - derive_slug never guarantees uniqueness; the blogs.slug constraint does
    - derive_reading_time is ceil(words / 200), never below 1
    - Both run at write time only; reads return the stored values

Design Decisions:
    - ASCII word characters only ([A-Za-z0-9_]): slugs stay URL-safe without percent-encoding
    - Empty content clamps to 1 minute (a post always reads as "1 min read")
    - Collisions are rejected, not auto-suffixed: the admin picks an explicit slug
    - Surrounding whitespace (and punctuation that leaves only whitespace at the edges)
      is stripped before hyphenation: " Hello World! " gives "hello-world", never a
      leading or trailing hyphen
"""

import math
import re

WORDS_PER_MINUTE = 200

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def derive_slug(title: str) -> str:
    """Lower-case, drop punctuation, join words with hyphens.

    >>> derive_slug("Hello, World! 2024")
    'hello-world-2024'
    """
    cleaned = _NON_WORD.sub("", title.lower()).strip()
    return _WHITESPACE.sub("-", cleaned)


def count_words(content: str) -> int:
    return len(content.split())


def derive_reading_time(content: str) -> int:
    """Minutes to read `content` at 200 words/minute, rounded up, minimum 1."""
    minutes = math.ceil(count_words(content) / WORDS_PER_MINUTE)
    return max(1, minutes)
