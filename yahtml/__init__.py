"""Convert YAML-shaped data trees to HTML."""

from .convert import convert, convert_to_html
from .element_key import ParsedElement, parse_element_key
from .errors import InputShapeError, MalformedElementError, UnsupportedContentTypeError, YahtmlError
from .escape import escape_attribute, escape_text
from .models import ConvertOptions
from .tags import RAW_CONTENT_TAGS, SELF_CLOSING_TAGS

__version__ = "0.1.0"

__all__ = [
    "ConvertOptions",
    "InputShapeError",
    "MalformedElementError",
    "ParsedElement",
    "RAW_CONTENT_TAGS",
    "SELF_CLOSING_TAGS",
    "UnsupportedContentTypeError",
    "YahtmlError",
    "convert",
    "convert_to_html",
    "escape_attribute",
    "escape_text",
    "parse_element_key",
]
