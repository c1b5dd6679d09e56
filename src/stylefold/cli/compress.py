"""CLI command: stylefold compress -- compress, geometrize, and score a stylesheet."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from stylefold.config import DEFAULT_CONFIG, StylefoldConfig
from stylefold.engine import CompressionEngine, CompressionMethod, OutputFormat
from stylefold.model.fold import Fold
from stylefold.validation import ValidationError


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option(
    "--fold",
    type=click.Choice([f.value for f in Fold], case_sensitive=False),
    default=Fold.UI_FOLD.value,
    show_default=True,
    help="Fold applied to the compressed stylesheet's graph",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.ALL.value,
    show_default=True,
    help="Which outputs to include",
)
@click.option(
    "--method",
    type=click.Choice([m.value for m in CompressionMethod]),
    default=CompressionMethod.MINIFY.value,
    show_default=True,
    help="Text compression applied before geometrizing",
)
@click.option(
    "--target",
    default=DEFAULT_CONFIG.target_efficiency,
    type=float,
    show_default=True,
    help="Target efficiency",
)
@click.option(
    "--epsilon",
    default=DEFAULT_CONFIG.epsilon,
    type=float,
    show_default=True,
    help="Collapse angular tolerance, in radians",
)
def compress(
    cssfile: str,
    fold: str,
    output_format: str,
    method: str,
    target: float,
    epsilon: float,
) -> None:
    """Compress a stylesheet and report efficiency and structural similarity."""
    source = Path(cssfile).read_text(encoding="utf-8")
    engine = CompressionEngine(StylefoldConfig(epsilon=epsilon, target_efficiency=target))
    try:
        outputs = engine.compress_and_geometrize(
            source, fold=fold, output_format=output_format, method=method
        )
    except ValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(json.dumps(outputs, indent=2))
