"""Theme and style constants for Sankey diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a Sankey diagram."""

    name: str
    background_color: str
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    flow_label_color: str
    flow_label_font_size: float
    node_border_color: str = "none"
    node_border_width: float = 0.0
    node_border_radius: float = 0.0
    hover_ring_color: str = "rgba(0, 0, 0, 0.6)"
    hover_ring_width: float = 2.0
    # Dimming applied while a node or flow is hovered
    dim_unconnected_flow: float = 0.15
    dim_inactive_flow: float = 0.3
    dim_unconnected_node: float = 0.3
