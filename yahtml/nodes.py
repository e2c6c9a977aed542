"""Node variants of a YAHTML tree.

Input trees are plain YAML data. Each value is classified exactly once, when the
renderer reaches it, into one of the variants below; the renderer then only
dispatches on the variant type.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional, Sequence as SequenceT, Tuple, Union

from .declaration import normalize_declaration
from .errors import MalformedElementError, UnsupportedContentTypeError

Scalar = Union[str, int, float, bool]

_DATE_TYPES = (dt.date, dt.datetime, dt.time)


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Text:
    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number:
    value: Union[int, float]

    @property
    def text(self) -> str:
        return format_scalar(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    @property
    def text(self) -> str:
        return format_scalar(self.value)


@dataclass(frozen=True)
class Sequence:
    items: SequenceT[Any]


@dataclass(frozen=True)
class Element:
    key: str
    content: Any = None


@dataclass(frozen=True)
class AttributeObject:
    """Content written as ``{attr: value, ..., children: [...]}``."""

    attributes: List[Tuple[str, Any]] = field(default_factory=list)
    children: Any = None


Node = Union[Empty, Text, Number, Boolean, Sequence, Element]
Content = Union[None, Text, Number, Boolean, Sequence, AttributeObject]


def format_scalar(value: Scalar) -> str:
    """String form of a scalar as YAML/JavaScript would print it."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return _js_float(repr(value))
    return str(value)


def _js_float(text: str) -> str:
    # repr() switches to exponent form below 1e-4 and pads the exponent;
    # JavaScript stays positional down to 1e-6 and writes 1e-7, 1e+21.
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _resolve_scalar(value: Any, where: str) -> Union[Text, Number, Boolean]:
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, str):
        return Text(value)
    raise UnsupportedContentTypeError(value, where)


def _element_from_mapping(value: dict, *, allow_multi_key: bool) -> Element:
    if not value:
        raise MalformedElementError("", "empty element key")
    keys = list(value)
    if len(keys) > 1 and not allow_multi_key:
        joined = ", ".join(str(key) for key in keys)
        raise MalformedElementError(
            str(keys[0]), f"element mapping must have exactly one key (got: {joined})"
        )
    key = keys[0]
    content = value[key]
    if isinstance(key, (bool, int, float)):
        # YAML reads ``404: Not found`` with an integer key.
        key = format_scalar(key)
    elif not isinstance(key, str):
        raise MalformedElementError(repr(key), "element key must be a string or number")
    return Element(key, content)


def resolve_node(value: Any, *, allow_multi_key: bool = False) -> Node:
    """Classify one tree value."""

    if value is None:
        return Empty()
    if isinstance(value, str):
        declaration = normalize_declaration(value)
        if declaration is None:
            return Text(value)
        return Element(declaration.key, declaration.content)
    if isinstance(value, (list, tuple)):
        return Sequence(value)
    if isinstance(value, dict):
        return _element_from_mapping(value, allow_multi_key=allow_multi_key)
    if isinstance(value, _DATE_TYPES):
        raise UnsupportedContentTypeError(value, "nodes")
    return _resolve_scalar(value, "nodes")


def resolve_content(value: Any) -> Content:
    """Classify the value stored under an element key."""

    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return Sequence(value)
    if isinstance(value, dict):
        attributes = [(name, item) for name, item in value.items() if name != "children"]
        return AttributeObject(attributes=attributes, children=value.get("children"))
    return _resolve_scalar(value, "content")


def resolve_children(value: Any) -> Optional[Union[Text, Number, Boolean, Sequence, Element]]:
    """Classify the ``children`` entry of an attribute object."""

    if value is None or value == "":
        return None
    if isinstance(value, (list, tuple)):
        return Sequence(value)
    if isinstance(value, dict):
        return Sequence([value])
    return _resolve_scalar(value, "content")


__all__ = [
    "AttributeObject",
    "Boolean",
    "Content",
    "Element",
    "Empty",
    "Node",
    "Number",
    "Scalar",
    "Sequence",
    "Text",
    "format_scalar",
    "resolve_children",
    "resolve_content",
    "resolve_node",
]
