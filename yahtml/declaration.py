"""Recognition of one-line string declarations like ``'h1: "Title"'``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_DOUBLE_QUOTE_SEPARATOR = ': "'
_SINGLE_QUOTE_SEPARATOR = ": '"
_SIMPLE_RE = re.compile(r"([^:]+?):\s+(.*)")


@dataclass(frozen=True)
class Declaration:
    key: str
    content: Optional[str]


def _unquote(text: str) -> str:
    for quote in ('"', "'"):
        if text.startswith(quote) and text.endswith(quote):
            inner = text[1:-1]
            return inner.replace('\\"', '"').replace("\\'", "'")
    return text


def _quoted_separator_index(text: str) -> int:
    dq = text.find(_DOUBLE_QUOTE_SEPARATOR)
    sq = text.find(_SINGLE_QUOTE_SEPARATOR)
    if dq >= 0 and (sq < 0 or dq < sq):
        return dq
    return sq


def normalize_declaration(text: str) -> Optional[Declaration]:
    """Return the declaration encoded in ``text``, or ``None`` for plain text.

    Recognized forms, checked in order:

    * ``'br:'`` / ``'img src=a.png:'`` -- element without content;
    * ``'h1: "Title"'`` / ``"p: 'Body'"`` -- quoted content, the earliest
      ``: "`` or ``: '`` separates key and content;
    * ``'p: Body'`` -- unquoted single-line content after the first colon,
      unless the key part contains ``//`` (then the colon most likely belongs
      to a URL and the string stays plain text).
    """

    if text.endswith(":"):
        return Declaration(text[:-1].strip(), None)

    index = _quoted_separator_index(text)
    if index >= 0:
        content = _unquote(text[index + 2:])
        if content in ('""', "''"):
            content = ""
        return Declaration(text[:index], content)

    match = _SIMPLE_RE.fullmatch(text)
    if match and "//" not in match.group(1):
        return Declaration(match.group(1), match.group(2))

    return None


__all__ = ["Declaration", "normalize_declaration"]
