"""CLI entry point for openapi-check."""

import sys
from pathlib import Path

import click

from openapi_check.parser.loader import DocumentLoadError, load_document
from openapi_check.report import BaseReporter, create_reporter
from openapi_check.validator import validate_document

DEFAULT_SPEC_PATH = "openapi.yaml"
SPEC_PATH_ENVVAR = "OPENAPI_SPEC_PATH"


def _load(spec_path: Path, fmt: str, reporter: BaseReporter) -> dict:
    """Load the document or exit with status 1."""
    try:
        return load_document(spec_path, fmt)
    except DocumentLoadError as e:
        reporter.log_error(f"Error validating OpenAPI specification: {e}")
        sys.exit(1)


spec_path_argument = click.argument(
    "spec_path",
    required=False,
    default=DEFAULT_SPEC_PATH,
    envvar=SPEC_PATH_ENVVAR,
    type=click.Path(dir_okay=False, path_type=Path),
)
format_option = click.option(
    "--format", "fmt", default="auto", type=click.Choice(["auto", "yaml", "json"]), help="Document format."
)
output_option = click.option(
    "--output", "output_type", default="colorful", type=click.Choice(["colorful", "plain", "json"]), help="Report style."
)


@click.group()
def main():
    """openapi-check — validate OpenAPI 3.x documents and report statistics."""
    pass


@main.command()
@spec_path_argument
@format_option
@output_option
@click.option("--strict", is_flag=True, default=False, help="Treat warnings as failures.")
def validate(spec_path: Path, fmt: str, output_type: str, strict: bool):
    """Validate an OpenAPI document. Exits 1 if it is invalid."""
    reporter = create_reporter(output_type)
    if output_type != "json":
        click.echo(f"Validating {spec_path}...")

    document = _load(spec_path, fmt, reporter)
    report = validate_document(document)
    reporter.render(report)

    if not report.is_valid or (strict and report.warnings):
        sys.exit(1)


@main.command()
@spec_path_argument
@format_option
@output_option
def stats(spec_path: Path, fmt: str, output_type: str):
    """Print endpoint, method, tag, schema and response code statistics."""
    reporter = create_reporter(output_type)
    document = _load(spec_path, fmt, reporter)
    reporter.render_stats(validate_document(document))
