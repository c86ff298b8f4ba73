"""Per-path and per-operation checks."""

from collections.abc import Iterator

from openapi_check.checks.root import is_missing
from openapi_check.checks.schema import walk_schema
from openapi_check.parser.base import Findings

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options", "trace")
SUCCESS_CODES = ("200", "201")


def iter_operations(document: dict) -> Iterator[tuple[str, str, dict]]:
    """Yield ``(path, method, operation)`` for every HTTP operation.

    ``method`` is the key as written in the document. Path item keys that are
    not HTTP methods (``parameters``, ``$ref``, ``servers``...) are skipped.
    """
    paths = document.get("paths")
    if not isinstance(paths, dict):
        return

    for path, path_item in paths.items():
        for method, operation in _path_operations(path_item):
            yield str(path), method, operation


def _path_operations(path_item) -> Iterator[tuple[str, dict]]:
    if not isinstance(path_item, dict):
        return
    for method, operation in path_item.items():
        if str(method).lower() not in HTTP_METHODS:
            continue
        yield str(method), operation if isinstance(operation, dict) else {}


def check_paths(document: dict, findings: Findings) -> None:
    """Check path keys and every operation below them, in document order."""
    paths = document.get("paths")
    if not isinstance(paths, dict):
        return

    for path, path_item in paths.items():
        path = str(path)
        if not path.startswith("/"):
            findings.error(f'Path "{path}" must start with "/"', f"paths.{path}")

        for method, operation in _path_operations(path_item):
            check_operation(path, method, operation, findings)


def check_operation(path: str, method: str, operation: dict, findings: Findings) -> None:
    label = f"{method.upper()} {path}"
    location = f"paths.{path}.{method}"

    responses = operation.get("responses")
    if is_missing(responses):
        findings.error(f"Missing responses for {label}", f"{location}.responses")
    else:
        codes: set[str] = set()
        if isinstance(responses, dict):
            _check_response_schemas(responses, f"{location}.responses", findings)
            codes = {str(code) for code in responses}

        if not codes.intersection(SUCCESS_CODES):
            findings.warning(f"No success response defined for {label}", f"{location}.responses")

    if not operation.get("summary") and not operation.get("description"):
        findings.warning(f"No summary or description for {label}", location)

    if not operation.get("tags"):
        findings.warning(f"No tags defined for {label}", f"{location}.tags")


def _check_response_schemas(responses: dict, location: str, findings: Findings) -> None:
    for status_code, response in responses.items():
        content = response.get("content") if isinstance(response, dict) else None
        if not isinstance(content, dict):
            continue
        for media_type, media_type_object in content.items():
            if not isinstance(media_type_object, dict):
                continue
            schema = media_type_object.get("schema")
            if schema:
                walk_schema(
                    schema,
                    f"{location}.{status_code}.content.{media_type}.schema",
                    findings,
                )
