"""Top-level document structure checks."""

import re

from openapi_check.parser.base import Findings

OPENAPI_VERSION_PATTERN = re.compile(r"3\.\d+\.\d+")


def is_missing(value) -> bool:
    """True for absent or empty scalar values. Empty mappings and lists count as present."""
    return not value and not isinstance(value, (dict, list))


def check_root(document: dict, findings: Findings) -> None:
    """Check the required root fields: openapi, info and paths."""
    version = document.get("openapi")
    if not version:
        findings.error("Missing required field: openapi", "openapi")
    elif not OPENAPI_VERSION_PATTERN.fullmatch(str(version)):
        findings.error("Invalid OpenAPI version format. Expected 3.x.x format", "openapi")

    info = document.get("info")
    if is_missing(info):
        findings.error("Missing required field: info", "info")
    else:
        if not isinstance(info, dict) or not info.get("title"):
            findings.error("Missing required field: info.title", "info.title")
        if not isinstance(info, dict) or not info.get("version"):
            findings.error("Missing required field: info.version", "info.version")

    paths = document.get("paths")
    if is_missing(paths):
        findings.error("Missing required field: paths", "paths")
    elif isinstance(paths, (dict, list)) and not paths:
        findings.warning("No paths defined in the specification", "paths")
