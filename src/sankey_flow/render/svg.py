"""SVG generation for Sankey diagrams using drawsvg."""

from __future__ import annotations

from collections.abc import Callable

import drawsvg as draw

from sankey_flow.layout.constants import (
    CANVAS_HEIGHT,
    CANVAS_PADDING,
    CANVAS_WIDTH,
    DEFAULT_COLORS,
    DEFAULT_NODE_COLOR,
    FLOW_LABEL_MIN_RATIO,
)
from sankey_flow.layout.engine import SankeyLayout, compute_layout
from sankey_flow.layout.hit_test import connected_nodes
from sankey_flow.layout.labels import place_labels
from sankey_flow.layout.positioning import DrawRect
from sankey_flow.parser.model import (
    ColorMode,
    FlowBand,
    Node,
    Orientation,
    SankeyDiagram,
)
from sankey_flow.render.constants import EMPTY_SVG, TITLE_BASELINE, TITLE_SPACE
from sankey_flow.render.hover import HoverState
from sankey_flow.render.style import Theme


def diagram_rect(
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    padding: float = CANVAS_PADDING,
    title: str = "",
) -> DrawRect:
    """Layout rectangle inside a canvas, leaving room for labels and title."""
    top = padding + (TITLE_SPACE if title else 0.0)
    return DrawRect(padding, top, width - padding, height - padding)


def render_diagram(
    diagram: SankeyDiagram,
    theme: Theme,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    padding: float = CANVAS_PADDING,
) -> str:
    """Lay out and render a parsed diagram in one step."""
    rect = diagram_rect(width, height, padding, diagram.title)
    layout = compute_layout(diagram.edges, diagram.config, rect)
    return render_svg(
        layout,
        theme,
        width=width,
        height=height,
        title=diagram.title,
        show_labels=diagram.show_labels,
        label_position=diagram.label_position,
        show_flow_labels=diagram.show_flow_labels,
        label_formatter=diagram.label_formatter,
        flow_label_formatter=diagram.flow_label_formatter,
    )


def render_svg(
    layout: SankeyLayout,
    theme: Theme,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    title: str = "",
    hover: HoverState | None = None,
    show_labels: bool = True,
    label_position: str = "auto",
    show_flow_labels: bool = False,
    layout_index: int = 0,
    label_formatter: Callable[[str, Node], str] | None = None,
    flow_label_formatter: Callable[[float, FlowBand], str] | None = None,
) -> str:
    """Render a computed layout to an SVG string.

    Flows are drawn first, then flow labels, then nodes on top.

    Args:
        layout_index: Position of *layout* among the layouts sharing
            *hover*; only active flows recorded for this index apply.
        label_formatter: Optional ``(node_id, node) -> text`` callback.
        flow_label_formatter: Optional ``(value, band) -> text`` callback.
    """
    if layout.is_empty:
        return EMPTY_SVG

    hover = hover or HoverState()
    d = draw.Drawing(width, height)
    d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            width / 2, TITLE_BASELINE,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
            text_anchor="middle",
        ))

    _render_flows(d, layout, theme, hover, layout_index)
    if show_flow_labels:
        _render_flow_labels(d, layout, theme, flow_label_formatter)
    _render_nodes(d, layout, theme, hover)
    if show_labels:
        _render_labels(d, layout, theme, label_position, label_formatter)

    return d.as_svg()


def format_value(value: float) -> str:
    """Exact text for a flow value; whole numbers drop the trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _band_path(band: FlowBand, **kwargs) -> draw.Path:
    """Bezier ribbon between a band's two ends."""
    h1 = band.height / 2
    h2 = band.height2 / 2
    path = draw.Path(**kwargs)
    if band.orientation is Orientation.VERTICAL:
        mid_y = (band.y + band.y2) / 2
        path.M(band.x - h1, band.y)
        path.C(band.x - h1, mid_y, band.x2 - h2, mid_y, band.x2 - h2, band.y2)
        path.L(band.x2 + h2, band.y2)
        path.C(band.x2 + h2, mid_y, band.x + h1, mid_y, band.x + h1, band.y)
    else:
        mid_x = (band.x + band.x2) / 2
        path.M(band.x, band.y - h1)
        path.C(mid_x, band.y - h1, mid_x, band.y2 - h2, band.x2, band.y2 - h2)
        path.L(band.x2, band.y2 + h2)
        path.C(mid_x, band.y2 + h2, mid_x, band.y + h1, band.x, band.y + h1)
    path.Z()
    return path


def _band_fill(band: FlowBand, color_mode: ColorMode, active: bool):
    if active and band.hover_color:
        return band.hover_color
    fallback = band.color or DEFAULT_COLORS[0]
    if color_mode is not ColorMode.GRADIENT:
        return fallback
    if band.orientation is Orientation.VERTICAL:
        if band.y == band.y2:
            return fallback
        gradient = draw.LinearGradient(0, band.y, 0, band.y2)
    else:
        if band.x == band.x2:
            return fallback
        gradient = draw.LinearGradient(band.x, 0, band.x2, 0)
    gradient.add_stop(0, band.color_from or fallback)
    gradient.add_stop(1, band.color_to or fallback)
    return gradient


def _render_flows(
    d: draw.Drawing,
    layout: SankeyLayout,
    theme: Theme,
    hover: HoverState,
    layout_index: int,
) -> None:
    """Render flow bands, dimming those unrelated to the hover state."""
    active_flows = hover.flows_for(layout_index)
    for i, band in enumerate(layout.flow_bands):
        if band is None or not band.height:
            continue

        opacity = 1.0
        if hover.hovered_node:
            if hover.hovered_node not in (band.source, band.target):
                opacity = theme.dim_unconnected_flow
        elif active_flows and i not in active_flows:
            opacity = theme.dim_inactive_flow

        active = i in active_flows
        d.append(_band_path(
            band,
            fill=_band_fill(band, layout.color_mode, active),
            opacity=opacity,
        ))


def _render_flow_labels(
    d: draw.Drawing,
    layout: SankeyLayout,
    theme: Theme,
    formatter: Callable[[float, FlowBand], str] | None = None,
) -> None:
    """Render flow values at band centers, skipping thin bands."""
    font_size = theme.flow_label_font_size
    for band in layout.flow_bands:
        if band is None:
            continue
        if (band.height + band.height2) / 2 < font_size * FLOW_LABEL_MIN_RATIO:
            continue
        cx, cy = band.geometry().center_point()
        text = formatter(band.value, band) if formatter else format_value(band.value)
        d.append(draw.Text(
            text,
            font_size,
            cx, cy,
            fill=theme.flow_label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))


def _render_nodes(
    d: draw.Drawing,
    layout: SankeyLayout,
    theme: Theme,
    hover: HoverState,
) -> None:
    """Render nodes as (optionally rounded) rectangles."""
    hovered = hover.hovered_node
    neighbours = connected_nodes(layout.edges, hovered) if hovered else set()
    radius = theme.node_border_radius

    for nid, pos in layout.node_geometry.items():
        opacity = 1.0
        if hovered and nid != hovered and nid not in neighbours:
            opacity = theme.dim_unconnected_node

        r = min(radius, pos.width / 2, pos.height / 2)
        d.append(draw.Rectangle(
            pos.x, pos.y,
            pos.width, pos.height,
            rx=r, ry=r,
            fill=layout.node_colors.get(nid, DEFAULT_NODE_COLOR),
            stroke=theme.node_border_color if theme.node_border_width > 0 else "none",
            stroke_width=theme.node_border_width,
            opacity=opacity,
        ))

        if nid == hovered:
            d.append(draw.Rectangle(
                pos.x - 1, pos.y - 1,
                pos.width + 2, pos.height + 2,
                rx=r + 1, ry=r + 1,
                fill="none",
                stroke=theme.hover_ring_color,
                stroke_width=theme.hover_ring_width,
            ))


def _render_labels(
    d: draw.Drawing,
    layout: SankeyLayout,
    theme: Theme,
    position: str,
    formatter: Callable[[str, Node], str] | None = None,
) -> None:
    """Render node name labels."""
    for label in place_labels(layout, position=position, formatter=formatter):
        d.append(draw.Text(
            label.text,
            theme.label_font_size,
            label.x, label.y,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor=label.text_anchor,
            dominant_baseline=label.dominant_baseline,
        ))
