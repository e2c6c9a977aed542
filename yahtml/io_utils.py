"""Helpers for YAML/JSON IO, file writing and warnings."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def read_yaml(path: Path) -> Any:
    """Load a YAML document; a missing file or invalid YAML ends the program."""

    if not path.exists():
        raise SystemExit(f"File not found: {path}")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def write_json_stable(path: Path, data: Any) -> None:
    write_text(path, stable_json_dumps(data))


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = [
    "read_yaml",
    "stable_json_dumps",
    "warn",
    "write_json_stable",
    "write_text",
]
