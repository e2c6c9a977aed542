"""HTML escaping for text content and attribute values."""

from __future__ import annotations

_TEXT_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

# Attribute values are always written inside double quotes, so the apostrophe
# stays as-is.
_ATTRIBUTE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)


def escape_text(text: str) -> str:
    """Escape ``& < > " '`` for use in HTML body text."""
    return text.translate(_TEXT_TABLE)


def escape_attribute(text: str) -> str:
    """Escape ``& < > "`` for use inside a double-quoted attribute value."""
    return text.translate(_ATTRIBUTE_TABLE)


__all__ = ["escape_attribute", "escape_text"]
