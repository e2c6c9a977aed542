"""Tree renderer turning YAHTML nodes into an HTML string."""

from __future__ import annotations

from typing import Any, List, Optional, Set, Tuple, Union

from .element_key import ParsedElement, parse_element_key
from .errors import MalformedElementError, UnsupportedContentTypeError
from .escape import escape_attribute, escape_text
from .models import ConvertOptions
from .nodes import (
    AttributeObject,
    Boolean,
    Element,
    Empty,
    Number,
    Sequence,
    Text,
    format_scalar,
    resolve_children,
    resolve_content,
    resolve_node,
)
from .tags import is_raw_content, is_self_closing

DOCTYPE_HTML = "<!DOCTYPE html>"

# Work stack entries: (True, literal html) or (False, tree value).
_WorkItem = Tuple[bool, Any]


def _is_doctype(key: str) -> bool:
    return key.startswith("!DOCTYPE") or key.startswith('"!DOCTYPE')


def _render_attr(name: str, value: Union[str, bool]) -> str:
    if value is True:
        return f" {name}"
    if value == "":
        return f' {name}=""'
    return f' {name}="{escape_attribute(value)}"'


def _render_attrs(parsed: ParsedElement, written: Set[str]) -> str:
    parts: List[str] = []

    element_id = parsed.resolved_id
    if element_id is not None:
        parts.append(f' id="{escape_attribute(element_id)}"')
        written.add("id")

    classes = parsed.class_list
    if classes:
        parts.append(f' class="{escape_attribute(" ".join(classes))}"')
        written.add("class")

    for attr in parsed.extra_attributes:
        parts.append(_render_attr(attr.name, attr.value))
        written.add(attr.name)

    return "".join(parts)


def _merge_object_attrs(content: AttributeObject, written: Set[str]) -> str:
    """Attributes from ``{attr: value, children: ...}`` not already on the tag."""

    parts: List[str] = []
    for name, value in content.attributes:
        if name in written:
            continue
        if value is True or isinstance(value, str):
            parts.append(_render_attr(name, value))
        elif value is None:
            parts.append(_render_attr(name, "null"))
        elif isinstance(value, (int, float)):
            # False lands here and renders as "false".
            parts.append(_render_attr(name, format_scalar(value)))
        else:
            raise UnsupportedContentTypeError(value, "attribute values")
        written.add(name)
    return "".join(parts)


def _text(node: Union[Text, Number, Boolean], *, raw: bool) -> str:
    if raw:
        return node.text
    return escape_text(node.text)


def _push_sequence(stack: List[_WorkItem], items: Any) -> None:
    stack.extend((False, child) for child in reversed(items))


class _Renderer:
    """Depth-first renderer driven by an explicit stack.

    Children are pushed in reverse so they pop in document order, and an
    element's closing tag is pushed before its children so it is emitted after
    them. Nesting depth is therefore limited by memory only.
    """

    def __init__(self, options: ConvertOptions) -> None:
        self.options = options
        self.parts: List[str] = []
        self.stack: List[_WorkItem] = []

    def run(self, value: Any) -> str:
        self.stack.append((False, value))
        while self.stack:
            is_literal, item = self.stack.pop()
            if is_literal:
                self.parts.append(item)
                continue
            self._visit(item)
        return "".join(self.parts)

    def _visit(self, value: Any) -> None:
        node = resolve_node(value, allow_multi_key=self.options.allow_multi_key)
        if isinstance(node, Empty):
            return
        if isinstance(node, (Text, Number, Boolean)):
            self.parts.append(escape_text(node.text))
        elif isinstance(node, Sequence):
            _push_sequence(self.stack, node.items)
        else:
            self._element(node)

    def _element(self, element: Element) -> None:
        if _is_doctype(element.key):
            self.parts.append(DOCTYPE_HTML)
            return

        parsed = parse_element_key(element.key)
        if not parsed.tag:
            raise MalformedElementError(element.key)
        tag = parsed.tag

        content = resolve_content(element.content)
        written: Set[str] = set()
        opening = f"<{tag}{_render_attrs(parsed, written)}"
        if isinstance(content, AttributeObject):
            opening += _merge_object_attrs(content, written)
        self.parts.append(opening + ">")

        if is_self_closing(tag):
            return

        self.stack.append((True, f"</{tag}>"))
        body = resolve_children(content.children) if isinstance(content, AttributeObject) else content
        self._body(body, raw=is_raw_content(tag))

    def _body(self, body: Optional[Union[Text, Number, Boolean, Sequence]], *, raw: bool) -> None:
        if body is None:
            return
        if isinstance(body, Sequence):
            _push_sequence(self.stack, body.items)
        else:
            self.parts.append(_text(body, raw=raw))


def render(value: Any, options: Optional[ConvertOptions] = None) -> str:
    """Render one YAHTML node (string, number, list, element mapping, ...)."""

    return _Renderer(options or ConvertOptions()).run(value)


__all__ = ["DOCTYPE_HTML", "render"]
