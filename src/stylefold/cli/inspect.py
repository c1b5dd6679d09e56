"""CLI command: stylefold inspect -- display the folded graph of a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylefold.model.fold import Fold
from stylefold.stylesheet import parse_stylesheet
from stylefold.transform import transform_fold_to_graph
from stylefold.validation import ValidationError

FOLD_CHOICES = [f.value for f in Fold]


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option(
    "--fold",
    type=click.Choice(FOLD_CHOICES, case_sensitive=False),
    default=Fold.UI_FOLD.value,
    show_default=True,
    help="Fold applied to the embedded nodes",
)
def inspect(cssfile: str, fold: str) -> None:
    """Parse a stylesheet and display its selectors and folded graph."""
    source = Path(cssfile).read_text(encoding="utf-8")
    stylesheet = parse_stylesheet(source)
    try:
        graph = transform_fold_to_graph(fold, source)
    except ValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Selectors:    {len(stylesheet.selectors)}")
    click.echo(f"Declarations: {len(stylesheet.declarations)}")
    click.echo(f"Fold:         {fold.upper()}")
    click.echo(f"Nodes: {graph.node_count}")
    click.echo(f"Edges: {graph.edge_count}")
    click.echo()

    click.echo("Selectors:")
    for selector in stylesheet.selectors:
        click.echo(f"  [{selector.index}] {selector.text}  specificity={selector.specificity}")
    click.echo()

    click.echo("Nodes:")
    for index, (x, y) in enumerate(graph.nodes):
        click.echo(f"  {index}  ({x:.4f}, {y:.4f})")
    click.echo()

    click.echo("Edges:")
    for frm, to in graph.edges:
        click.echo(f"  {frm} -> {to}")
