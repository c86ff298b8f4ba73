"""Recursive schema checks: type keywords and nested schemas."""

from typing import Any

from openapi_check.parser.base import Findings, SchemaNode

VALID_TYPES = ("array", "boolean", "integer", "number", "object", "string")


def check_type(value: Any, path: str, findings: Findings) -> bool:
    """Check a schema ``type`` value. Returns whether it was accepted.

    Only string values are inspected; anything else (e.g. a list of types)
    passes through untouched.
    """
    if not isinstance(value, str):
        return True

    if value == "null":
        findings.error(f'Invalid type "null" at {path}. Use "nullable: true" instead.', path)
        return False

    if value not in VALID_TYPES:
        findings.error(
            f'Invalid type "{value}" at {path}. Must be one of: {", ".join(VALID_TYPES)}',
            path,
        )
        return False

    return True


def walk_schema(schema: Any, path: str, findings: Findings) -> None:
    """Validate ``schema`` and every schema nested below it."""
    _walk(schema, path, findings, ancestors=set())


def _walk(schema: Any, path: str, findings: Findings, ancestors: set[int]) -> None:
    node = SchemaNode.from_raw(schema)
    if node is None:
        return

    # Only reachable through YAML aliases or hand-built trees.
    if id(schema) in ancestors:
        findings.warning(f"Circular schema at {path}; nested schema not walked", path)
        return
    ancestors = ancestors | {id(schema)}

    if node.has_type:
        check_type(node.type, f"{path}.type", findings)

    if node.properties is not None:
        for prop_name, prop_schema in node.properties.items():
            _walk(prop_schema, f"{path}.properties.{prop_name}", findings, ancestors)

    if node.items is not None:
        _walk(node.items, f"{path}.items", findings, ancestors)

    for keyword, members in node.compositions():
        for index, sub_schema in enumerate(members):
            _walk(sub_schema, f"{path}.{keyword}[{index}]", findings, ancestors)


def check_component_schemas(document: dict, findings: Findings) -> None:
    """Walk every ``components.schemas`` entry and flag untyped ones."""
    components = document.get("components") or {}
    schemas = components.get("schemas") if isinstance(components, dict) else None
    if not isinstance(schemas, dict):
        return

    for schema_name, schema in schemas.items():
        path = f"components.schemas.{schema_name}"
        walk_schema(schema, path, findings)

        node = SchemaNode.from_raw(schema)
        if node is None:
            continue
        if not (node.type or node.ref) and not node.compositions():
            findings.warning(f'Schema "{schema_name}" has no type definition', path)
