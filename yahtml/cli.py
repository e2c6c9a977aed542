"""Command-line interface for yahtml."""

import argparse
import hashlib
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Iterable, Optional

from .build import BuildContext, build_pages, convert_file, load_page_set, prettify
from .io_utils import write_text
from .models import ConvertOptions
from .tags import SELF_CLOSING_TAGS


def _hash_dir(root: Path) -> dict[str, str]:
    hashes: dict[str, str] = {}
    for path in sorted(root.rglob("*")):
        if path.is_file():
            rel = path.relative_to(root)
            hashes[str(rel)] = hashlib.sha256(path.read_bytes()).hexdigest()
    return hashes


def _copy_output(src: Path, dest: Path) -> None:
    if dest.exists():
        shutil.rmtree(dest)
    shutil.copytree(src, dest)


def _handle_convert(args: argparse.Namespace) -> None:
    options = ConvertOptions(allow_multi_key=args.allow_multi_key)
    html = convert_file(Path(args.input), options)
    if args.pretty:
        html = prettify(html)

    if args.output is None:
        sys.stdout.write(html)
        if not html.endswith("\n"):
            sys.stdout.write("\n")
        return

    write_text(Path(args.output), html)
    print(f"Wrote {args.output}")


def _build_once(pages_file: Path, out_root: Path) -> list[Path]:
    page_set = load_page_set(pages_file)
    ctx = BuildContext(pages_file=pages_file, out_root=out_root)
    return build_pages(page_set, ctx)


def _handle_build(args: argparse.Namespace) -> None:
    pages_file = Path(args.pages)
    out_root = Path(args.out)

    if args.check:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_dir = Path(tmp)
            run1 = tmp_dir / "run1"
            run2 = tmp_dir / "run2"
            _build_once(pages_file, run1)
            _build_once(pages_file, run2)
            if _hash_dir(run1) != _hash_dir(run2):
                raise SystemExit("Determinism check failed: outputs differ between runs")
            _copy_output(run1, out_root)
        print(f"Determinism check passed. Output copied to {out_root}")
        return

    written = _build_once(pages_file, out_root)
    print(f"Built {len(written)} page(s) into {out_root}")


def _handle_tags(args: argparse.Namespace) -> None:
    for tag in sorted(SELF_CLOSING_TAGS):
        print(tag)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yahtml",
        description="Convert YAHTML documents (YAML element trees) to HTML.",
    )
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a single YAHTML file.",
        description="Load a YAHTML document and write the resulting HTML.",
    )
    convert_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the YAHTML (YAML) document.",
    )
    convert_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the HTML (default: stdout).",
    )
    convert_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the HTML output.",
    )
    convert_parser.add_argument(
        "--allow-multi-key",
        dest="allow_multi_key",
        action="store_true",
        help="Use the first key of element mappings that have several keys.",
    )
    convert_parser.set_defaults(func=_handle_convert)

    build_parser_ = subparsers.add_parser(
        "build",
        help="Build every page listed in a pages.yaml file.",
        description="Convert a page set, apply layouts and write a manifest.",
    )
    build_parser_.add_argument(
        "--pages",
        default="pages.yaml",
        help="Path to pages.yaml.",
    )
    build_parser_.add_argument(
        "--out",
        default="build",
        help="Directory to write rendered pages.",
    )
    build_parser_.add_argument(
        "--check",
        action="store_true",
        help="Build twice into temporary directories and fail if outputs differ.",
    )
    build_parser_.set_defaults(func=_handle_build)

    tags_parser = subparsers.add_parser(
        "tags",
        help="List self-closing (void) tags.",
        description="Print the tags that never get a body or closing tag.",
    )
    tags_parser.set_defaults(func=_handle_tags)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
