"""SVG rendering for Sankey layouts."""

from sankey_flow.render.hover import HoverState
from sankey_flow.render.svg import diagram_rect, render_diagram, render_svg

__all__ = ["HoverState", "diagram_rect", "render_diagram", "render_svg"]
