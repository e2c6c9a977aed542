"""Public entry point: convert a YAHTML document (a list) to HTML."""

from __future__ import annotations

from typing import Any, Optional

from .errors import InputShapeError
from .models import ConvertOptions
from .render import render


def convert(root: Any, options: Optional[ConvertOptions] = None) -> str:
    """Convert a YAHTML document to an HTML string.

    ``root`` is the already-loaded YAML document and must be a list; each member
    is rendered in order and the results are concatenated.

    Examples:

    * ``convert(['h1: "Hello World"'])`` gives ``<h1>Hello World</h1>``
    * ``convert([{"div#main.container": ['h1: "Title"', 'p: "Content"']}])``
      gives ``<div id="main" class="container"><h1>Title</h1><p>Content</p></div>``
    * ``convert(['img src="photo.jpg" alt="Photo":'])`` gives
      ``<img src="photo.jpg" alt="Photo">``

    Raises ``InputShapeError`` when ``root`` is not a list,
    ``MalformedElementError`` for declarations without a tag and
    ``UnsupportedContentTypeError`` for values such as dates.
    """

    if not isinstance(root, (list, tuple)):
        raise InputShapeError(root)
    options = options or ConvertOptions()
    return "".join(render(member, options) for member in root)


convert_to_html = convert

__all__ = ["convert", "convert_to_html"]
