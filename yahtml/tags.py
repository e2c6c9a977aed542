"""Tag classification tables."""

from __future__ import annotations

# HTML5 void elements: never closed, never given a body.
SELF_CLOSING_TAGS: frozenset[str] = frozenset(
    {
        "br",
        "hr",
        "img",
        "input",
        "meta",
        "area",
        "base",
        "col",
        "embed",
        "link",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose scalar text body is written without escaping.
RAW_CONTENT_TAGS: frozenset[str] = frozenset({"script", "style"})


def is_self_closing(tag: str) -> bool:
    return tag in SELF_CLOSING_TAGS


def is_raw_content(tag: str) -> bool:
    return tag in RAW_CONTENT_TAGS


__all__ = ["RAW_CONTENT_TAGS", "SELF_CLOSING_TAGS", "is_raw_content", "is_self_closing"]
