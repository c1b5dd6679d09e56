"""CLI command: stylefold analyze -- structural, geometric, or compression report."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from stylefold.engine import AnalysisKind, CompressionEngine
from stylefold.validation import ValidationError


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option(
    "--kind",
    type=click.Choice([k.value for k in AnalysisKind]),
    default=AnalysisKind.STRUCTURAL.value,
    show_default=True,
    help="Report to produce",
)
def analyze(cssfile: str, kind: str) -> None:
    """Analyze a stylesheet and print the report as JSON."""
    source = Path(cssfile).read_text(encoding="utf-8")
    try:
        report = CompressionEngine().analyze_patterns(source, kind)
    except ValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(json.dumps(report, indent=2))
