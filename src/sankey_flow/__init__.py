"""sankey-flow: layered, crossing-reduced layout for Sankey flow diagrams."""

from sankey_flow.layout.engine import SankeyLayout, compute_layout
from sankey_flow.parser.model import (
    ColorMode,
    FlowBand,
    FlowEdge,
    LayoutConfig,
    Node,
    NodeGeometry,
    NodePin,
    Orientation,
)

__version__ = "0.1.0"

__all__ = [
    "ColorMode",
    "FlowBand",
    "FlowEdge",
    "LayoutConfig",
    "Node",
    "NodeGeometry",
    "NodePin",
    "Orientation",
    "SankeyLayout",
    "__version__",
    "compute_layout",
]
