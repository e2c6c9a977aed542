"""Parser for element declarations such as ``div#main.card data-id=7``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

AttributeValue = Union[str, bool]

_HEAD_RE = re.compile(r"\S+")
_TAG_RE = re.compile(r"[a-zA-Z0-9-]+")
_TAG_WITH_SHORTHAND_RE = re.compile(r"[a-zA-Z0-9-]+[#.]")
_ID_RE = re.compile(r"#([a-zA-Z0-9-]+)")
_CLASS_RE = re.compile(r"\.([a-zA-Z0-9-]+)")

_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-")


@dataclass
class Attribute:
    name: str
    # ``True`` marks a boolean attribute written without a value.
    value: AttributeValue


@dataclass
class ParsedElement:
    """Components of an element declaration."""

    tag: str = ""
    id: Optional[str] = None
    classes: List[str] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)

    @property
    def resolved_id(self) -> Optional[str]:
        """The id to render; an ``id=`` attribute beats the ``#id`` shorthand."""

        resolved = self.id
        for attr in self.attributes:
            if attr.name == "id":
                resolved = "true" if attr.value is True else attr.value
        return resolved

    @property
    def class_list(self) -> List[str]:
        """Shorthand classes followed by the tokens of the first ``class=``."""

        merged = list(self.classes)
        for attr in self.attributes:
            if attr.name == "class":
                if isinstance(attr.value, str):
                    merged.extend(attr.value.split())
                break
        return merged

    @property
    def extra_attributes(self) -> List[Attribute]:
        """Attributes other than ``id`` and ``class``, in declaration order."""

        return [attr for attr in self.attributes if attr.name not in ("id", "class")]


class _AttributeScanner:
    """Left-to-right scanner over the attribute part of a declaration.

    Each value form (double-quoted, single-quoted, unquoted) is its own state.
    Scanning stops quietly at the first position where no attribute name can be
    read; unterminated quotes run to the end of the text.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def scan(self) -> List[Attribute]:
        attributes: List[Attribute] = []
        while True:
            self._skip_whitespace()
            if self._at_end():
                break
            name = self._read_name()
            if not name:
                break
            if self._peek() == "=":
                self.pos += 1
                attributes.append(Attribute(name, self._read_value()))
            else:
                attributes.append(Attribute(name, True))
        return attributes

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _peek(self) -> str:
        return "" if self._at_end() else self.text[self.pos]

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self.text[self.pos].isspace():
            self.pos += 1

    def _read_name(self) -> str:
        start = self.pos
        while not self._at_end() and self.text[self.pos] in _NAME_CHARS:
            self.pos += 1
        return self.text[start:self.pos]

    def _read_value(self) -> str:
        quote = self._peek()
        if quote in ('"', "'"):
            return self._read_quoted(quote)
        return self._read_unquoted()

    def _read_quoted(self, quote: str) -> str:
        self.pos += 1
        start = self.pos
        end = self.text.find(quote, start)
        if end < 0:
            self.pos = len(self.text)
            return self.text[start:]
        self.pos = end + 1
        return self.text[start:end]

    def _read_unquoted(self) -> str:
        start = self.pos
        last = len(self.text) - 1
        while not self._at_end() and not self.text[self.pos].isspace():
            # A colon closing the whole declaration is not part of the value.
            if self.text[self.pos] == ":" and self.pos == last:
                break
            self.pos += 1
        return self.text[start:self.pos]


def parse_attributes(text: str) -> List[Attribute]:
    """Tokenize ``name=value`` / ``name="value"`` / ``flag`` sequences."""

    return _AttributeScanner(text).scan()


def parse_element_key(key: str) -> ParsedElement:
    """Split a declaration into tag, id, classes and attributes.

    Never raises. A declaration without a usable tag yields ``tag == ""``;
    deciding whether that is an error is left to the caller.

    ``'div#main.container.active class="extra" data-id=123'`` parses to tag
    ``div``, id ``main``, classes ``["container", "active"]`` and attributes
    ``class="extra"`` and ``data-id="123"``.
    """

    if key.endswith(":"):
        key = key[:-1]

    head_match = _HEAD_RE.match(key)
    if head_match is None:
        return ParsedElement()

    head = head_match.group(0)
    attributes = parse_attributes(key[head_match.end():].strip())

    # "href=x" in the head position is an attribute with no tag in front of it.
    if "=" in head and not _TAG_WITH_SHORTHAND_RE.match(head):
        return ParsedElement(attributes=attributes)

    tag = ""
    rest = head
    tag_match = _TAG_RE.match(head)
    if tag_match:
        tag = tag_match.group(0)
        rest = head[tag_match.end():]

    id_match = _ID_RE.search(rest)
    return ParsedElement(
        tag=tag,
        id=id_match.group(1) if id_match else None,
        classes=_CLASS_RE.findall(rest),
        attributes=attributes,
    )


__all__ = ["Attribute", "AttributeValue", "ParsedElement", "parse_attributes", "parse_element_key"]
