"""Reporters that render a ValidationReport for the command line."""

import json
import sys
from abc import ABC, abstractmethod
from typing import Type

import click

from openapi_check.parser.base import SpecStats, ValidationReport


class BaseReporter(ABC):
    """Abstract base class for report renderers."""

    @abstractmethod
    def render(self, report: ValidationReport) -> None:
        """Render the full validation report."""
        pass

    @abstractmethod
    def render_stats(self, report: ValidationReport) -> None:
        """Render only the header and statistics."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Report a failure outside the validation itself."""
        pass


def format_methods(stats: SpecStats) -> str:
    return ", ".join(f"{method.upper()}({count})" for method, count in stats.method_counts.items())


def _stats_lines(report: ValidationReport) -> list[str]:
    stats = report.stats
    return [
        f"   Title: {report.info.title}",
        f"   Version: {report.info.version}",
        f"   OpenAPI Version: {report.info.openapi_version}",
        f"   Endpoints: {stats.endpoint_count}",
        f"   HTTP Methods: {format_methods(stats)}",
        f"   Tags: {stats.tag_count}",
        f"   Schemas: {stats.schema_count}",
        f"   Response Codes: {', '.join(stats.response_codes)}",
    ]


def verdict(report: ValidationReport) -> str:
    if not report.is_valid:
        return "OpenAPI specification is invalid"
    if report.warnings:
        return "OpenAPI specification is valid (with warnings)"
    return "OpenAPI specification is valid with no warnings!"


class ColorfulReporter(BaseReporter):
    """Styled output for interactive terminals."""

    def render(self, report: ValidationReport) -> None:
        self.render_stats(report)
        click.echo(click.style("\nValidation Results:", fg="cyan", bold=True))

        if report.errors:
            click.echo(click.style("Errors:", fg="red", bold=True))
            for error in report.errors:
                click.echo(click.style(f"   • {error.message}", fg="red"))

        if report.warnings:
            click.echo(click.style("Warnings:", fg="yellow", bold=True))
            for warning in report.warnings:
                click.echo(click.style(f"   • {warning.message}", fg="yellow"))

        color = "green" if report.is_valid else "red"
        click.echo(click.style(verdict(report), fg=color, bold=True))

    def render_stats(self, report: ValidationReport) -> None:
        click.echo(click.style("\nOpenAPI Specification Stats:", fg="cyan", bold=True))
        for line in _stats_lines(report):
            click.echo(line)

    def log_error(self, message: str) -> None:
        click.echo(click.style(message, fg="red", bold=True), err=True)


class PlainReporter(BaseReporter):
    """Plain text, suitable for CI logs and files."""

    def render(self, report: ValidationReport) -> None:
        self.render_stats(report)
        print("\nValidation Results:")

        if report.errors:
            print("Errors:")
            for error in report.errors:
                print(f"   • {error.message}")

        if report.warnings:
            print("Warnings:")
            for warning in report.warnings:
                print(f"   • {warning.message}")

        print(verdict(report))

    def render_stats(self, report: ValidationReport) -> None:
        print("\nOpenAPI Specification Stats:")
        for line in _stats_lines(report):
            print(line)

    def log_error(self, message: str) -> None:
        print(message, file=sys.stderr)


class JsonReporter(BaseReporter):
    """A single JSON object per run, for machine parsing."""

    def render(self, report: ValidationReport) -> None:
        print(report.model_dump_json(indent=2))

    def render_stats(self, report: ValidationReport) -> None:
        print(json.dumps({
            "info": report.info.model_dump(),
            "stats": report.stats.model_dump(),
        }, indent=2))

    def log_error(self, message: str) -> None:
        print(json.dumps({
            "type": "error",
            "message": message
        }), file=sys.stderr)


def create_reporter(output_type: str) -> BaseReporter:
    """Factory function to create the appropriate reporter."""
    reporters: dict[str, Type[BaseReporter]] = {
        "colorful": ColorfulReporter,
        "plain": PlainReporter,
        "json": JsonReporter
    }

    if output_type.lower() not in reporters:
        raise ValueError(f"Invalid output type: {output_type}. Must be one of: {', '.join(reporters.keys())}")

    return reporters[output_type.lower()]()
