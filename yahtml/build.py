"""Build HTML files from a set of YAHTML pages."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape
from markupsafe import Markup
from pydantic import ValidationError

from .convert import convert
from .errors import YahtmlError
from .io_utils import read_yaml, warn, write_json_stable, write_text
from .models import ConvertOptions, PageSet, PageSpec

MANIFEST_FILENAME = "manifest.json"


@dataclass
class BuildContext:
    """Where pages are read from and written to."""

    pages_file: Path
    out_root: Path
    _env: Optional[Environment] = field(default=None, init=False, repr=False)

    @property
    def base_dir(self) -> Path:
        """Directory that page sources and templates are relative to."""

        return self.pages_file.parent

    @property
    def manifest_path(self) -> Path:
        return self.out_root / MANIFEST_FILENAME

    def jinja_env(self) -> Environment:
        """Create (once) a Jinja environment rooted at the page set directory."""

        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader([self.base_dir]),
                autoescape=select_autoescape(["html", "jinja"]),
                trim_blocks=True,
                lstrip_blocks=True,
                undefined=StrictUndefined,
            )
        return self._env


def prettify(html: str) -> str:
    """Indent HTML for reading; the markup itself is unchanged."""

    return BeautifulSoup(html, "html.parser").prettify()


def load_page_set(path: Path) -> PageSet:
    """Load pages.yaml, accepting either a bare list of pages or a mapping."""

    data: Any = read_yaml(path) or {}
    if isinstance(data, list):
        data = {"pages": data}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a list of pages or a mapping with 'pages'.")
    try:
        return PageSet.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid page set in {path}: {exc}") from exc


def convert_file(source: Path, options: Optional[ConvertOptions] = None) -> str:
    """Load one YAHTML document and convert it to an HTML fragment."""

    document = read_yaml(source)
    try:
        return convert(document, options)
    except YahtmlError as exc:
        raise SystemExit(f"{source}: {exc}") from exc


def render_page(page_set: PageSet, page: PageSpec, ctx: BuildContext) -> str:
    """Convert a page and wrap it in its layout template, if any."""

    source = ctx.base_dir / page.source
    html = convert_file(source, page_set.options_for(page))

    template_name = page_set.template_for(page)
    if template_name:
        variables = page_set.context_for(page)
        variables.update(
            content=Markup(html),
            title=page.title or page.key,
            page=page,
        )
        try:
            html = ctx.jinja_env().get_template(template_name).render(**variables)
        except TemplateError as exc:
            raise SystemExit(f"Failed to render {template_name} for page '{page.key}': {exc}") from exc

    if page_set.pretty_for(page):
        html = prettify(html)
    return html


def build_pages(page_set: PageSet, ctx: BuildContext) -> List[Path]:
    """Write every page plus a manifest; return the written HTML paths."""

    if not page_set.pages:
        warn(f"No pages defined in {ctx.pages_file}")

    written: List[Path] = []
    entries: List[dict] = []
    for page in page_set.pages:
        html = render_page(page_set, page, ctx)
        target = write_text(ctx.out_root / page.output_path, html)
        written.append(target)
        entries.append(
            {
                "key": page.key,
                "source": page.source,
                "output": page.output_path,
                "sha256": hashlib.sha256(html.encode("utf-8")).hexdigest(),
            }
        )

    write_json_stable(ctx.manifest_path, {"pages": entries})
    return written


__all__ = [
    "BuildContext",
    "MANIFEST_FILENAME",
    "build_pages",
    "convert_file",
    "load_page_set",
    "prettify",
    "render_page",
]
