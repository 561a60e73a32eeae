"""Loader for JSON flow datasets.

Accepts either a bare list of flow records or an object carrying the
records under ``data`` alongside layout options, using the same option
names as chart dataset configuration (``colorMode``, ``nodeWidth``,
``nodes`` for column pins, and so on).
"""

from __future__ import annotations

import json
import logging

from sankey_flow.layout.validation import coerce_edge
from sankey_flow.parser.model import ColorMode, Orientation, SankeyDiagram

logger = logging.getLogger(__name__)


def parse_sankey_json(text: str) -> SankeyDiagram:
    """Parse a JSON flow dataset into a SankeyDiagram."""
    data = json.loads(text)
    options: dict = {}
    if isinstance(data, dict):
        options = data
        data = data.get("data", [])
    if not isinstance(data, list):
        raise ValueError("JSON input must be a list of flow records")

    diagram = SankeyDiagram(title=str(options.get("title", "")))
    skipped = 0
    for record in data:
        edge = coerce_edge(record)
        if edge is None:
            skipped += 1
            continue
        diagram.add_edge(edge)
    if skipped:
        logger.debug("Skipped %d non-object record(s)", skipped)

    _apply_options(diagram, options)
    return diagram


def _apply_options(diagram: SankeyDiagram, options: dict) -> None:
    config = diagram.config
    try:
        if "orientation" in options:
            config.orientation = Orientation(options["orientation"])
        if "colorMode" in options:
            config.color_mode = ColorMode(options["colorMode"])
    except ValueError as e:
        raise ValueError(f"Invalid dataset option: {e}") from None

    for key, attr in (("nodeWidth", "node_width"), ("nodePadding", "node_padding")):
        if key in options:
            value = options[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Invalid dataset option: {key} must be a number")
            setattr(config, attr, float(value))

    pins = options.get("nodes") or {}
    if not isinstance(pins, dict):
        raise ValueError("Invalid dataset option: nodes must be an object")
    config.pins.update(pins)

    node_colors = options.get("nodeColors") or {}
    if not isinstance(node_colors, dict):
        raise ValueError("Invalid dataset option: nodeColors must be an object")
    config.node_colors.update(node_colors)

    if isinstance(options.get("nodeColor"), str):
        config.node_color = options["nodeColor"]
    if isinstance(options.get("color"), str):
        config.flow_color = options["color"]
    if isinstance(options.get("hoverColor"), str):
        config.hover_color = options["hoverColor"]

    labels = options.get("labels")
    if isinstance(labels, dict):
        diagram.show_labels = labels.get("display", True) is not False
        diagram.label_position = labels.get("position", diagram.label_position)
    flow_labels = options.get("flowLabels")
    if isinstance(flow_labels, dict):
        diagram.show_flow_labels = bool(flow_labels.get("display", False))
