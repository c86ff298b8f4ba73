"""Runs every check over a parsed OpenAPI document and assembles the report."""

from openapi_check.checks.operations import check_paths
from openapi_check.checks.root import check_root
from openapi_check.checks.schema import check_component_schemas
from openapi_check.checks.stats import collect_stats
from openapi_check.checks.tags import check_tags
from openapi_check.parser.base import UNKNOWN, DocumentInfo, Findings, ValidationReport


def validate_document(document: dict) -> ValidationReport:
    """Validate ``document`` and collect its statistics.

    The document is only read. Findings are returned in discovery order:
    root fields, component schemas, paths and operations, then tags.
    """
    findings = Findings()
    check_root(document, findings)
    check_component_schemas(document, findings)
    check_paths(document, findings)
    check_tags(document, findings)

    return ValidationReport(
        errors=findings.errors,
        warnings=findings.warnings,
        stats=collect_stats(document),
        info=document_info(document),
    )


def document_info(document: dict) -> DocumentInfo:
    info = document.get("info")
    if not isinstance(info, dict):
        info = {}
    return DocumentInfo(
        title=str(info.get("title") or UNKNOWN),
        version=str(info.get("version") or UNKNOWN),
        openapi_version=str(document.get("openapi") or UNKNOWN),
    )
