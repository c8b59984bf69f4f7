"""
Command-line interface for the creative science engine.

Scores ad creatives described as JSON documents and inspects the engine's
configuration.

Usage:
    creative-science analyze creative.json              # Composite score as JSON
    creative-science analyze creative.json -o context   # Bounded text context
    creative-science analyze - --domain color_psychology --domain neuromarketing
    creative-science recommendations creative.json      # Ranked recommendations
    creative-science weights --objective conversion     # Selected weight table
    creative-science domains                            # Registered domains
"""

import json
import sys
from typing import Any, TextIO

import click

from creative_science.config.settings import get_settings
from creative_science.knowledge import (
    AnalysisInput,
    ContextFormatter,
    InsufficientAnalysisError,
    KnowledgeBaseService,
)
from creative_science.knowledge.data.display import display_name
from creative_science.observability.logging import get_logger, setup_logging

# Exit code used when too few domains could be analyzed
EXIT_INSUFFICIENT = 2

PRIORITY_COLORS = {"critical": "red", "high": "yellow", "medium": "cyan", "low": "white"}

logger = get_logger(__name__)


def _load_input(source: TextIO) -> AnalysisInput:
    try:
        payload: Any = json.load(source)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Input is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise click.ClickException("Input must be a JSON object")
    try:
        analysis_input = AnalysisInput.from_dict(payload)
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid analysis input: {e}") from e
    logger.debug("Loaded analysis input", source=getattr(source, "name", "-"))
    return analysis_input


def _insufficient(e: InsufficientAnalysisError) -> None:
    click.echo(click.style(f"Not enough signal to score this creative: {e}", fg="red"), err=True)
    sys.exit(EXIT_INSUFFICIENT)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--metrics-port", type=int, default=None, help="Expose Prometheus metrics on this port")
def main(debug: bool, metrics_port: int | None) -> None:
    """Creative Science - multi-domain ad creative scoring."""
    setup_logging(level="DEBUG" if debug else None)

    settings = get_settings()
    if settings.tracing_enabled:
        from creative_science.observability.tracing import setup_tracing

        setup_tracing(settings)

    if metrics_port:
        from creative_science.observability.metrics import get_metrics

        get_metrics().start_server(port=metrics_port)


@main.command()
@click.argument("input_file", type=click.File("r"))
@click.option(
    "--domain",
    "domains",
    multiple=True,
    help="Analyze only this domain (repeatable). Unknown domains are ignored.",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["json", "context"]),
    default="json",
    show_default=True,
    help="Composite score as JSON, or the bounded text context",
)
def analyze(input_file: TextIO, domains: tuple[str, ...], output: str) -> None:
    """Score the creative described in INPUT_FILE ("-" for stdin)."""
    analysis_input = _load_input(input_file)
    service = KnowledgeBaseService()

    try:
        if domains:
            composite = service.analyze_specific(analysis_input, domains)
        else:
            composite = service.analyze_all(analysis_input)
    except InsufficientAnalysisError as e:
        _insufficient(e)
        return

    if output == "context":
        click.echo(ContextFormatter(config=service.config).format(composite))
    else:
        click.echo(json.dumps(composite.to_dict(), indent=2, ensure_ascii=False))


@main.command()
@click.argument("input_file", type=click.File("r"))
@click.option("--json", "as_json", is_flag=True, help="Print recommendations as JSON")
def recommendations(input_file: TextIO, as_json: bool) -> None:
    """List every recommendation for INPUT_FILE, most urgent first."""
    analysis_input = _load_input(input_file)
    service = KnowledgeBaseService()

    try:
        ranked = service.get_recommendations(analysis_input)
    except InsufficientAnalysisError as e:
        _insufficient(e)
        return

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in ranked], indent=2, ensure_ascii=False))
        return

    if not ranked:
        click.echo("No recommendations - every factor is above the threshold.")
        return
    for i, rec in enumerate(ranked, start=1):
        tag = click.style(f"[{rec.priority.upper()}]", fg=PRIORITY_COLORS[rec.priority])
        click.echo(f"{i}. {tag} {display_name(rec.domain)}: {rec.recommendation}")
        click.echo(f"   Why: {rec.scientific_basis}")
        click.echo(f"   Impact: {rec.expected_impact}")


@main.command()
@click.option(
    "--objective",
    type=click.Choice(["awareness", "consideration", "conversion"]),
    default=None,
    help="Campaign objective (default table when omitted)",
)
def weights(objective: str | None) -> None:
    """Show the domain weight table selected for an objective."""
    service = KnowledgeBaseService()
    table = service.get_weights(objective)
    click.echo(f"Weights ({objective or 'default'}):")
    for domain in service.domains:
        click.echo(f"  {domain}: {table.get(domain, 0.0):.2f}")


@main.command()
def domains() -> None:
    """List the registered analysis domains."""
    service = KnowledgeBaseService()
    for domain in service.domains:
        click.echo(f"{domain}\t{display_name(domain)}")


if __name__ == "__main__":
    main()
