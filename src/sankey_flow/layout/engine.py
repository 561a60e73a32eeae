"""Layout coordinator: validation, levels, ordering, positioning, routing.

Every call builds a fresh layout from its inputs; nothing is cached
between calls.
"""

from __future__ import annotations

__all__ = ["SankeyLayout", "compute_layout"]

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sankey_flow.layout.colors import resolve_node_colors
from sankey_flow.layout.constants import CANVAS_HEIGHT, CANVAS_WIDTH
from sankey_flow.layout.graph import build_nodes
from sankey_flow.layout.layers import assign_levels, group_by_level
from sankey_flow.layout.ordering import reorder_nodes
from sankey_flow.layout.positioning import DrawRect, position_nodes
from sankey_flow.layout.routing import route_flows
from sankey_flow.layout.validation import valid_edges
from sankey_flow.parser.model import (
    ColorMode,
    FlowBand,
    FlowEdge,
    LayoutConfig,
    Node,
    NodeGeometry,
    Orientation,
)

logger = logging.getLogger(__name__)


@dataclass
class SankeyLayout:
    """Result of one layout pass."""

    edges: list[FlowEdge] = field(default_factory=list)
    nodes: dict[str, Node] = field(default_factory=dict)
    levels: dict[str, int] = field(default_factory=dict)
    clusters: dict[int, list[str]] = field(default_factory=dict)
    node_geometry: dict[str, NodeGeometry] = field(default_factory=dict)
    # Aligned with the input record list; None where a record was dropped
    flow_bands: list[FlowBand | None] = field(default_factory=list)
    node_colors: dict[str, str] = field(default_factory=dict)
    orientation: Orientation = Orientation.HORIZONTAL
    color_mode: ColorMode = ColorMode.FROM

    @property
    def max_level(self) -> int:
        return max(self.levels.values(), default=0)

    @property
    def is_empty(self) -> bool:
        return not self.nodes


def compute_layout(
    edges: Sequence[object],
    config: LayoutConfig | None = None,
    rect: DrawRect | None = None,
) -> SankeyLayout:
    """Compute node and band geometry for a list of flow records.

    Args:
        edges: FlowEdge instances or raw mapping records. Invalid records
            are skipped.
        config: Layout options; defaults to LayoutConfig().
        rect: Drawing rectangle; defaults to a CANVAS_WIDTH x CANVAS_HEIGHT
            rectangle at the origin.

    An input with no valid records yields an empty layout.
    """
    config = config or LayoutConfig()
    rect = rect or DrawRect(0.0, 0.0, CANVAS_WIDTH, CANVAS_HEIGHT)
    orientation = Orientation(config.orientation)
    color_mode = ColorMode(config.color_mode)
    records = list(edges)

    valid = valid_edges(records)
    if not valid:
        logger.debug("No valid flows in %d record(s); empty layout", len(records))
        return SankeyLayout(
            flow_bands=[None] * len(records),
            orientation=orientation,
            color_mode=color_mode,
        )

    nodes = build_nodes(valid)
    levels = assign_levels(valid, nodes, config.pins)
    clusters = group_by_level(levels)
    reorder_nodes(clusters, valid)

    node_colors = resolve_node_colors(nodes, config.node_colors, config.node_color)
    geometry = position_nodes(
        nodes,
        levels,
        clusters,
        orientation,
        rect,
        node_width=config.node_width,
        node_padding=config.node_padding,
    )
    bands = route_flows(
        records,
        geometry,
        orientation,
        color_mode,
        node_colors=node_colors,
        flow_color=config.flow_color,
        hover_color=config.hover_color,
        use_node_colors=bool(config.node_colors),
    )

    logger.debug(
        "Laid out %d node(s) in %d level(s), %d flow(s)",
        len(nodes),
        len(clusters),
        len(valid),
    )
    return SankeyLayout(
        edges=valid,
        nodes=nodes,
        levels=levels,
        clusters=clusters,
        node_geometry=geometry,
        flow_bands=bands,
        node_colors=node_colors,
        orientation=orientation,
        color_mode=color_mode,
    )
