"""Tag and search helpers: pure functions over blog tag lists and LIKE patterns."""

from typing import Iterable

LIKE_ESCAPE = "\\"


def collect_distinct_tags(tag_lists: Iterable[list[str] | None]) -> list[str]:
    """Flatten, de-duplicate and sort tags. Empty/None lists are skipped."""
    return sorted({t for tags in tag_lists if tags for t in tags if t})


def escape_like(text: str) -> str:
    """Escape LIKE metacharacters so `text` matches literally (use with escape=LIKE_ESCAPE)."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(text: str) -> str:
    """LIKE pattern matching `text` anywhere, metacharacters taken literally."""
    return f"%{escape_like(text)}%"
