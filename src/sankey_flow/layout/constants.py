"""Layout constants used across layout modules.

Centralizes the pixel defaults and fallback colors used by positioning,
routing, and label placement.
"""

# ---------------------------------------------------------------------------
# Node sizing
# ---------------------------------------------------------------------------
NODE_WIDTH: float = 20.0
"""Thickness of a node along the level axis."""

NODE_PADDING: float = 10.0
"""Gap between consecutive nodes stacked in the same column."""

MIN_NODE_HEIGHT: float = 4.0
"""Floor on a node's extent along the node axis."""

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------
DEFAULT_COLORS: tuple[str, ...] = (
    "rgba(54, 162, 235, 0.5)",
    "rgba(255, 99, 132, 0.5)",
    "rgba(255, 206, 86, 0.5)",
    "rgba(75, 192, 192, 0.5)",
    "rgba(153, 102, 255, 0.5)",
    "rgba(255, 159, 64, 0.5)",
)
"""Flow palette, cycled by edge index when no color is given."""

DEFAULT_NODE_COLOR: str = "rgba(0, 0, 0, 0.8)"
"""Node fill when no node color is configured."""

GRADIENT_FADE_ALPHA: float = 0.2
"""Alpha of the target end of a gradient band without node colors."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_PADDING: float = 5.0
"""Distance between a node's edge and its label."""

FLOW_LABEL_MIN_RATIO: float = 1.2
"""Flow labels are skipped on bands thinner than this times the font size."""

# ---------------------------------------------------------------------------
# Canvas defaults
# ---------------------------------------------------------------------------
CANVAS_WIDTH: float = 800.0
"""Default drawing width."""

CANVAS_HEIGHT: float = 500.0
"""Default drawing height."""

CANVAS_PADDING: float = 60.0
"""Margin between the drawing edge and the layout rectangle."""
