"""Cross-reference declared tags against tags used by operations."""

from openapi_check.checks.operations import iter_operations
from openapi_check.parser.base import Findings


def declared_tags(document: dict) -> dict[str, None]:
    """Names from the root ``tags`` section, in declaration order."""
    tags = document.get("tags")
    if not isinstance(tags, list):
        return {}
    return {tag["name"]: None for tag in tags if isinstance(tag, dict) and isinstance(tag.get("name"), str)}


def used_tags(document: dict) -> dict[str, None]:
    """Tag names referenced by operations, in first-use order."""
    used: dict[str, None] = {}
    for _, _, operation in iter_operations(document):
        tags = operation.get("tags")
        if isinstance(tags, list):
            used.update(dict.fromkeys(tag for tag in tags if isinstance(tag, str)))
    return used


def check_tags(document: dict, findings: Findings) -> None:
    """Warn about declared-but-unused and used-but-undeclared tags."""
    declared = declared_tags(document)
    used = used_tags(document)

    for tag in declared:
        if tag not in used:
            findings.warning(f'Tag "{tag}" is defined but never used', "tags")

    for tag in used:
        if tag not in declared:
            findings.warning(f'Tag "{tag}" is used but not defined in tags section', "tags")
