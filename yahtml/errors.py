"""Exceptions raised while converting a tree to HTML."""

from __future__ import annotations


class YahtmlError(Exception):
    """Base class for all conversion errors."""


class InputShapeError(YahtmlError, TypeError):
    """The root passed to ``convert`` is not a sequence."""

    def __init__(self, received: object) -> None:
        self.received_type = type(received).__name__
        super().__init__(
            "YAHTML content must be a list. YAHTML documents always start with a "
            f"list at the root level (got {self.received_type})."
        )


class MalformedElementError(YahtmlError, ValueError):
    """An element declaration has no usable tag name."""

    def __init__(self, declaration: str, reason: str | None = None) -> None:
        self.declaration = declaration
        if reason is None:
            reason = "element must have a valid tag name"
        super().__init__(f'Malformed YAHTML element: "{declaration}" - {reason}')


class UnsupportedContentTypeError(YahtmlError, TypeError):
    """A value that is not plain YAML data was found in the tree."""

    def __init__(self, value: object, where: str = "content") -> None:
        self.value_type = type(value).__name__
        super().__init__(
            f"{self.value_type} values cannot be used as element {where}. "
            "Convert to string first (e.g., value.isoformat() or str(value))."
        )


__all__ = [
    "InputShapeError",
    "MalformedElementError",
    "UnsupportedContentTypeError",
    "YahtmlError",
]
