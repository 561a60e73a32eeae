"""Pixel geometry for nodes.

Columns are spread evenly along the level axis. Node extents along the
node axis share one global pixels-per-unit scale, chosen so the most
crowded column fits, so equal flow values render at equal thickness
everywhere in the diagram.
"""

from __future__ import annotations

__all__ = ["DrawRect", "compute_scale", "position_nodes"]

import math
from collections.abc import Mapping
from dataclasses import dataclass

from sankey_flow.layout.constants import MIN_NODE_HEIGHT, NODE_PADDING, NODE_WIDTH
from sankey_flow.parser.model import Node, NodeGeometry, Orientation


@dataclass(frozen=True)
class DrawRect:
    """Target drawing rectangle supplied by the host."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


def compute_scale(
    nodes: Mapping[str, Node],
    clusters: Mapping[int, list[str]],
    node_axis_length: float,
    node_padding: float,
) -> float:
    """Global value-to-pixel scale that fits the tightest column.

    Columns with no value or no space left after padding impose no
    constraint. Falls back to 1 when no column yields a finite positive
    scale.
    """
    scale = math.inf
    for node_ids in clusters.values():
        total = sum(nodes[nid].value for nid in node_ids)
        available = node_axis_length - max(0, len(node_ids) - 1) * node_padding
        if total > 0 and available > 0:
            scale = min(scale, available / total)
    if not math.isfinite(scale) or scale <= 0:
        return 1.0
    return scale


def position_nodes(
    nodes: Mapping[str, Node],
    levels: Mapping[str, int],
    clusters: Mapping[int, list[str]],
    orientation: Orientation | str,
    rect: DrawRect,
    node_width: float = NODE_WIDTH,
    node_padding: float = NODE_PADDING,
) -> dict[str, NodeGeometry]:
    """Compute a rectangle for every node in *clusters*.

    Horizontal orientation runs levels left-to-right with nodes stacked
    top-to-bottom; vertical runs levels top-to-bottom with nodes stacked
    left-to-right, and swaps the meaning of width/height (see
    NodeGeometry).

    Returns a dict mapping node_id -> NodeGeometry.
    """
    vertical = Orientation(orientation) is Orientation.VERTICAL

    level_axis_start = rect.top if vertical else rect.left
    level_axis_length = rect.height if vertical else rect.width
    node_axis_start = rect.left if vertical else rect.top
    node_axis_length = rect.width if vertical else rect.height

    level_count = max(levels.values(), default=0) + 1
    if level_count > 1:
        level_spacing = (level_axis_length - node_width) / (level_count - 1)
    else:
        level_spacing = 0.0

    scale = compute_scale(nodes, clusters, node_axis_length, node_padding)

    positions: dict[str, NodeGeometry] = {}
    for level, node_ids in clusters.items():
        extents = [max(MIN_NODE_HEIGHT, nodes[nid].value * scale) for nid in node_ids]
        total = sum(extents) + max(0, len(node_ids) - 1) * node_padding

        if level_count > 1:
            level_pos = level_axis_start + level * level_spacing
        else:
            level_pos = level_axis_start + (level_axis_length - node_width) / 2

        current = node_axis_start + (node_axis_length - total) / 2
        for nid, extent in zip(node_ids, extents):
            value = nodes[nid].value
            if vertical:
                positions[nid] = NodeGeometry(
                    x=current, y=level_pos, width=extent, height=node_width, value=value
                )
            else:
                positions[nid] = NodeGeometry(
                    x=level_pos, y=current, width=node_width, height=extent, value=value
                )
            current += extent + node_padding

    return positions
