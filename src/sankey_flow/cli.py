"""CLI for sankey-flow."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from sankey_flow import __version__
from sankey_flow.layout.engine import compute_layout
from sankey_flow.layout.ordering import count_crossings
from sankey_flow.layout.validation import is_valid_edge
from sankey_flow.parser import parse_sankey_json, parse_sankey_mermaid
from sankey_flow.parser.model import ColorMode, Orientation, SankeyDiagram
from sankey_flow.render import render_diagram
from sankey_flow.themes import THEMES


def _load(input_file: Path) -> SankeyDiagram:
    text = input_file.read_text()
    if input_file.suffix.lower() == ".json":
        return parse_sankey_json(text)
    return parse_sankey_mermaid(text)


def _load_or_exit(input_file: Path) -> SankeyDiagram:
    try:
        return _load(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """sankey-flow: Lay out and render Sankey flow diagrams."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--width", type=float, default=800.0, help="SVG width in pixels")
@click.option("--height", type=float, default=500.0, help="SVG height in pixels")
@click.option("--orientation", type=click.Choice([o.value for o in Orientation]),
              default=None, help="Override the diagram orientation")
@click.option("--color-mode", type=click.Choice([m.value for m in ColorMode]),
              default=None, help="Override the flow color mode")
@click.option("--flow-labels/--no-flow-labels", default=None,
              help="Draw flow values on bands")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: float,
    height: float,
    orientation: str | None,
    color_mode: str | None,
    flow_labels: bool | None,
) -> None:
    """Render a Sankey definition (.mmd or .json) to SVG."""
    diagram = _load_or_exit(input_file)
    if orientation is not None:
        diagram.config.orientation = Orientation(orientation)
    if color_mode is not None:
        diagram.config.color_mode = ColorMode(color_mode)
    if flow_labels is not None:
        diagram.show_flow_labels = flow_labels

    svg = render_diagram(diagram, THEMES[theme], width=width, height=height)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(diagram.edges)} flows -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a Sankey definition.

    Flows without a usable value and pins on unknown nodes are reported
    as warnings; the layout skips them, so they do not fail validation.
    """
    diagram = _load_or_exit(input_file)

    warnings = []
    for i, edge in enumerate(diagram.edges, start=1):
        if not is_valid_edge(edge):
            warnings.append(f"Flow {i} ({edge.source} -> {edge.target}: "
                            f"{edge.weight}) carries no usable flow (skipped)")

    node_ids = {e.source for e in diagram.edges} | {e.target for e in diagram.edges}
    for nid in diagram.config.pins:
        if nid not in node_ids:
            warnings.append(f"Pin references unknown node '{nid}' (ignored)")

    if warnings:
        click.echo("Warnings:", err=True)
        for warning in warnings:
            click.echo(f"  - {warning}", err=True)

    click.echo(f"Valid: {len(diagram.edges)} flows, {len(node_ids)} nodes")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a Sankey definition."""
    diagram = _load_or_exit(input_file)
    layout = compute_layout(diagram.edges, diagram.config)

    click.echo(f"Title: {diagram.title or '(none)'}")
    click.echo(f"Orientation: {layout.orientation.value}")
    click.echo(f"Flows: {len(layout.edges)} valid of {len(diagram.edges)}")
    click.echo(f"Nodes: {len(layout.nodes)}")
    click.echo(f"Levels: {len(layout.clusters)}")
    for level, node_ids in layout.clusters.items():
        click.echo(f"  [{level}] {', '.join(node_ids)}")
    click.echo(f"Crossings: {count_crossings(layout.clusters, layout.edges)}")
