"""Aggregate statistics over a document."""

from openapi_check.checks.operations import iter_operations
from openapi_check.parser.base import SpecStats


def collect_stats(document: dict) -> SpecStats:
    """Count operations, methods, response codes, tags and schemas."""
    endpoint_count = 0
    method_counts: dict[str, int] = {}
    response_codes: set[str] = set()

    for _, method, operation in iter_operations(document):
        endpoint_count += 1
        method_counts[method] = method_counts.get(method, 0) + 1

        responses = operation.get("responses")
        if isinstance(responses, dict):
            response_codes.update(str(code) for code in responses)

    tags = document.get("tags")
    components = document.get("components")
    schemas = components.get("schemas") if isinstance(components, dict) else None

    return SpecStats(
        endpoint_count=endpoint_count,
        method_counts=method_counts,
        tag_count=len(tags) if isinstance(tags, list) else 0,
        schema_count=len(schemas) if isinstance(schemas, dict) else 0,
        response_codes=sorted(response_codes),
    )
