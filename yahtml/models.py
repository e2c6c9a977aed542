"""Pydantic models for conversion options and page sets."""

from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConvertOptions(BaseModel):
    """Switches that change how a tree is interpreted."""

    allow_multi_key: bool = Field(
        False,
        alias="allowMultiKey",
        description=(
            "Accept element mappings with more than one key and use only the "
            "first one. Rejected as malformed when false."
        ),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PageDefaults(BaseModel):
    """Values applied to every page that does not set them itself."""

    template: Optional[str] = Field(
        None, description="Jinja layout, relative to the page set file."
    )
    pretty: bool = Field(False, description="Pretty-print the HTML with BeautifulSoup.")
    allow_multi_key: bool = Field(False, alias="allowMultiKey")
    context: Dict[str, Any] = Field(
        default_factory=dict, description="Template variables shared by all pages."
    )

    model_config = ConfigDict(populate_by_name=True)


class PageSpec(BaseModel):
    """Entry in a pages.yaml file."""

    key: str = Field(..., description="Identifier for the page (slug-friendly).")
    source: str = Field(..., description="YAHTML document, relative to the page set file.")
    output: Optional[str] = Field(
        None, description="Output path relative to the build directory (default: <key>.html)."
    )
    title: Optional[str] = Field(None, description="Title exposed to the layout template.")
    template: Optional[str] = Field(
        None, description="Jinja layout overriding the default one."
    )
    pretty: Optional[bool] = Field(None, description="Override the default pretty setting.")
    allow_multi_key: Optional[bool] = Field(None, alias="allowMultiKey")
    context: Dict[str, Any] = Field(
        default_factory=dict, description="Extra template variables for this page."
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("key")
    @classmethod
    def check_key_is_slug(cls, value: str) -> str:
        if not value or "/" in value or value.strip() != value:
            raise ValueError("key must be a non-empty slug without '/' or surrounding spaces")
        return value

    @field_validator("output")
    @classmethod
    def check_output_stays_in_build_dir(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        path = PurePosixPath(value.replace("\\", "/"))
        if path.is_absolute() or ".." in path.parts or value[1:2] == ":":
            raise ValueError("output must be a relative path inside the build directory")
        return value

    @property
    def output_path(self) -> str:
        return self.output or f"{self.key}.html"


class PageSet(BaseModel):
    """Top-level pages.yaml document."""

    defaults: PageDefaults = Field(default_factory=PageDefaults)
    pages: List[PageSpec] = Field(default_factory=list)

    @field_validator("pages")
    @classmethod
    def check_unique_keys(cls, pages: List[PageSpec]) -> List[PageSpec]:
        seen: set[str] = set()
        for page in pages:
            if page.key in seen:
                raise ValueError(f"duplicate page key: {page.key}")
            seen.add(page.key)
        return pages

    def options_for(self, page: PageSpec) -> ConvertOptions:
        allow = page.allow_multi_key
        if allow is None:
            allow = self.defaults.allow_multi_key
        return ConvertOptions(allow_multi_key=allow)

    def template_for(self, page: PageSpec) -> Optional[str]:
        return page.template or self.defaults.template

    def pretty_for(self, page: PageSpec) -> bool:
        return self.defaults.pretty if page.pretty is None else page.pretty

    def context_for(self, page: PageSpec) -> Dict[str, Any]:
        return {**self.defaults.context, **page.context}


__all__ = ["ConvertOptions", "PageDefaults", "PageSet", "PageSpec"]
