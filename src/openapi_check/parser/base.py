"""Data models shared by the loader, the checks and the reporters.

The document itself stays a plain parsed tree (dicts, lists, scalars).
These models describe what the checks read from it and what they produce.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

UNKNOWN = "Unknown"


class SchemaNode(BaseModel):
    """Typed view over one raw schema mapping.

    Each shape-bearing keyword is an independent optional field; a node may
    carry several of them at once, or none (e.g. a bare ``$ref``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: Any = None
    has_type: bool = False
    properties: dict[Any, Any] | None = None
    items: Any = None
    one_of: list[Any] | None = Field(default=None, alias="oneOf")
    all_of: list[Any] | None = Field(default=None, alias="allOf")
    any_of: list[Any] | None = Field(default=None, alias="anyOf")
    ref: str | None = Field(default=None, alias="$ref")

    @classmethod
    def from_raw(cls, node: Any) -> "SchemaNode | None":
        """Build a view over ``node``; returns None if it is not a mapping."""
        if not isinstance(node, dict):
            return None
        return cls(
            type=node.get("type"),
            has_type="type" in node,
            properties=_mapping_or_none(node.get("properties")),
            items=node.get("items"),
            oneOf=_sequence_or_none(node.get("oneOf")),
            allOf=_sequence_or_none(node.get("allOf")),
            anyOf=_sequence_or_none(node.get("anyOf")),
            **{"$ref": node["$ref"] if isinstance(node.get("$ref"), str) else None},
        )

    def compositions(self) -> list[tuple[str, list[Any]]]:
        """Present composition keywords with their members, in keyword order."""
        pairs = [("oneOf", self.one_of), ("allOf", self.all_of), ("anyOf", self.any_of)]
        return [(keyword, members) for keyword, members in pairs if members is not None]


class Diagnostic(BaseModel):
    """One finding, located by a dotted document path."""

    message: str
    path: str = ""


class Findings(BaseModel):
    """Accumulator threaded through every check of a single run."""

    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []

    def error(self, message: str, path: str = "") -> None:
        self.errors.append(Diagnostic(message=message, path=path))

    def warning(self, message: str, path: str = "") -> None:
        self.warnings.append(Diagnostic(message=message, path=path))


class SpecStats(BaseModel):
    """Aggregate counts for reporting. Never affects validity."""

    endpoint_count: int = 0
    method_counts: dict[str, int] = {}
    tag_count: int = 0
    schema_count: int = 0
    response_codes: list[str] = []  # sorted ascending


class DocumentInfo(BaseModel):
    """Header fields shown by the reporters."""

    title: str = UNKNOWN
    version: str = UNKNOWN
    openapi_version: str = UNKNOWN


class ValidationReport(BaseModel):
    """Result of validating one document."""

    errors: list[Diagnostic]
    warnings: list[Diagnostic]
    stats: SpecStats
    info: DocumentInfo = Field(default_factory=DocumentInfo)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_messages(self) -> list[str]:
        return [d.message for d in self.errors]

    @property
    def warning_messages(self) -> list[str]:
        return [d.message for d in self.warnings]


def _mapping_or_none(value: Any) -> dict[Any, Any] | None:
    return value if isinstance(value, dict) else None


def _sequence_or_none(value: Any) -> list[Any] | None:
    return value if isinstance(value, list) else None
