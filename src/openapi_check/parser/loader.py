"""Reads an OpenAPI document from disk into a plain parsed tree.

YAML is parsed with ``yaml.safe_load``; JSON with ``json.loads``.
"""

import json
from pathlib import Path

import yaml


class DocumentLoadError(Exception):
    """The document could not be read or is not an OpenAPI-shaped mapping."""


def read_text(file_path: Path) -> str:
    """Read a document as UTF-8 text."""
    if not file_path.exists():
        raise DocumentLoadError(f"OpenAPI specification file not found at: {file_path}")
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentLoadError(f"{file_path} is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise DocumentLoadError(f"Could not read {file_path}: {e}") from e


def detect_format(file_path: Path, text: str | None = None) -> str:
    """Detect whether a document is JSON or YAML.

    The suffix decides when it is recognised; otherwise the content does.
    Pass ``text`` to avoid reading the file again.

    Returns: 'json' or 'yaml'.
    """
    if file_path.suffix.lower() == ".json":
        return "json"
    if file_path.suffix.lower() in (".yaml", ".yml"):
        return "yaml"

    if text is None:
        text = read_text(file_path)
    try:
        json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return "yaml"
    return "json"


def load_document(file_path: Path, fmt: str = "auto") -> dict:
    """Load an OpenAPI document file into a dict tree."""
    text = read_text(file_path)

    if fmt == "auto":
        fmt = detect_format(file_path, text)

    try:
        if fmt == "json":
            doc = json.loads(text)
        else:
            doc = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Could not parse {file_path} as {fmt.upper()}: {e}") from e

    if not isinstance(doc, dict):
        raise DocumentLoadError(f"{file_path} does not contain a mapping at the top level")

    return doc
