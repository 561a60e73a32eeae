"""Flow band routing: attachment points, stacking offsets, and colors.

Bands leaving (or entering) the same node are stacked along the node
axis in input edge order, each advancing a per-node running offset by its
own thickness so bands sharing a node never overlap.
"""

from __future__ import annotations

__all__ = ["resolve_flow_colors", "route_flows"]

import logging
from collections.abc import Mapping, Sequence

from sankey_flow.layout.colors import adjust_alpha
from sankey_flow.layout.constants import DEFAULT_COLORS, GRADIENT_FADE_ALPHA
from sankey_flow.layout.validation import coerce_edge, is_valid_edge
from sankey_flow.parser.model import (
    ColorMode,
    FlowBand,
    FlowEdge,
    NodeGeometry,
    Orientation,
)

logger = logging.getLogger(__name__)


def resolve_flow_colors(
    edge: FlowEdge,
    index: int,
    color_mode: ColorMode,
    node_colors: Mapping[str, str] | None = None,
    flow_color: str | None = None,
    use_node_colors: bool = False,
) -> tuple[str, str, str]:
    """Return ``(color, color_from, color_to)`` for one edge.

    An explicit edge color always wins. Otherwise *flow_color*, then the
    default palette by edge index; under ``from``/``to`` mode the
    endpoint's node color replaces it when *use_node_colors* is set.
    """
    base = edge.color or flow_color or DEFAULT_COLORS[index % len(DEFAULT_COLORS)]
    node_colors = node_colors or {}

    if not edge.color and use_node_colors:
        if color_mode is ColorMode.FROM and node_colors.get(edge.source):
            base = node_colors[edge.source]
        elif color_mode is ColorMode.TO and node_colors.get(edge.target):
            base = node_colors[edge.target]

    color_from = edge.color_from or base
    color_to = edge.color_to or base
    if color_mode is ColorMode.GRADIENT and not edge.color_from and not edge.color_to:
        src_color = node_colors.get(edge.source)
        tgt_color = node_colors.get(edge.target)
        if use_node_colors and src_color and tgt_color:
            color_from, color_to = src_color, tgt_color
        else:
            color_from, color_to = base, adjust_alpha(base, GRADIENT_FADE_ALPHA)

    return base, color_from, color_to


def route_flows(
    edges: Sequence[object],
    geometry: Mapping[str, NodeGeometry],
    orientation: Orientation | str = Orientation.HORIZONTAL,
    color_mode: ColorMode | str = ColorMode.FROM,
    node_colors: Mapping[str, str] | None = None,
    flow_color: str | None = None,
    hover_color: str | None = None,
    use_node_colors: bool = False,
) -> list[FlowBand | None]:
    """Route one band per input record.

    Args:
        edges: The full, unfiltered record list. Invalid records, and
            edges whose endpoints have no geometry, route to None so the
            result stays index-aligned with the input.
        geometry: Node rectangles from position_nodes().
        orientation: Horizontal bands leave a node's right edge and enter
            the left edge; vertical bands leave the bottom and enter the top.
        color_mode: See resolve_flow_colors().
        node_colors: Resolved node colors.
        flow_color: Default band color.
        hover_color: Default band hover color.
        use_node_colors: Whether node colors were explicitly configured.

    Returns a list of FlowBand (or None) aligned with *edges*.
    """
    orientation = Orientation(orientation)
    color_mode = ColorMode(color_mode)
    vertical = orientation is Orientation.VERTICAL

    out_offsets = {nid: 0.0 for nid in geometry}
    in_offsets = {nid: 0.0 for nid in geometry}

    bands: list[FlowBand | None] = [None] * len(edges)
    for i, record in enumerate(edges):
        edge = coerce_edge(record)
        if not is_valid_edge(edge):
            continue
        src = geometry.get(edge.source)
        tgt = geometry.get(edge.target)
        if src is None or tgt is None:
            logger.debug("No geometry for flow %s -> %s", edge.source, edge.target)
            continue

        src_extent = src.width if vertical else src.height
        tgt_extent = tgt.width if vertical else tgt.height
        h1 = edge.weight / src.value * src_extent if src.value > 0 else 0.0
        h2 = edge.weight / tgt.value * tgt_extent if tgt.value > 0 else 0.0

        out_off = out_offsets[edge.source]
        in_off = in_offsets[edge.target]
        if vertical:
            x, y = src.x + out_off + h1 / 2, src.y + src.height
            x2, y2 = tgt.x + in_off + h2 / 2, tgt.y
        else:
            x, y = src.x + src.width, src.y + out_off + h1 / 2
            x2, y2 = tgt.x, tgt.y + in_off + h2 / 2
        out_offsets[edge.source] = out_off + h1
        in_offsets[edge.target] = in_off + h2

        color, color_from, color_to = resolve_flow_colors(
            edge,
            i,
            color_mode,
            node_colors=node_colors,
            flow_color=flow_color,
            use_node_colors=use_node_colors,
        )

        bands[i] = FlowBand(
            x=x,
            y=y,
            x2=x2,
            y2=y2,
            height=h1,
            height2=h2,
            color=color,
            color_from=color_from,
            color_to=color_to,
            hover_color=edge.hover_color or hover_color,
            source=edge.source,
            target=edge.target,
            value=edge.weight,
            orientation=orientation,
        )

    return bands
