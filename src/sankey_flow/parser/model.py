"""Data model for Sankey flow diagrams."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from sankey_flow.layout.constants import NODE_PADDING, NODE_WIDTH

if TYPE_CHECKING:
    from sankey_flow.layout.band import BandGeometry


class Orientation(Enum):
    """Direction in which columns (levels) progress."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ColorMode(Enum):
    """Which endpoint a flow band takes its color from."""

    FROM = "from"
    TO = "to"
    GRADIENT = "gradient"


@dataclass(frozen=True)
class FlowEdge:
    """A weighted directed flow between two nodes."""

    source: str
    target: str
    weight: float
    color: str | None = None
    color_from: str | None = None
    color_to: str | None = None
    hover_color: str | None = None


@dataclass(frozen=True)
class Node:
    """A node with aggregated flow totals."""

    id: str
    incoming: float = 0.0
    outgoing: float = 0.0
    value: float = 0.0


@dataclass(frozen=True)
class NodePin:
    """Manual column override for a node."""

    column: int


@dataclass
class NodeGeometry:
    """Pixel rectangle of a node.

    In vertical orientation the axes swap: ``width`` holds the node's
    thickness along the stacking axis and ``height`` holds the fixed
    node width.
    """

    x: float
    y: float
    width: float
    height: float
    value: float


@dataclass
class FlowBand:
    """Routed geometry for one flow edge.

    ``(x, y)`` is the band's centerline on the source node boundary and
    ``(x2, y2)`` on the target's. ``height``/``height2`` are the band's
    thickness at each end.
    """

    x: float
    y: float
    x2: float
    y2: float
    height: float
    height2: float
    color: str
    color_from: str
    color_to: str
    hover_color: str | None
    source: str
    target: str
    value: float
    orientation: Orientation = Orientation.HORIZONTAL

    def geometry(self) -> BandGeometry:
        """Hit-testing geometry for this band."""
        from sankey_flow.layout.band import BandGeometry

        return BandGeometry(
            x=self.x,
            y=self.y,
            x2=self.x2,
            y2=self.y2,
            height=self.height,
            height2=self.height2,
            orientation=self.orientation,
        )


@dataclass
class LayoutConfig:
    """Options consumed by the layout pipeline."""

    orientation: Orientation | str = Orientation.HORIZONTAL
    color_mode: ColorMode | str = ColorMode.FROM
    node_width: float = NODE_WIDTH
    node_padding: float = NODE_PADDING
    pins: dict[str, NodePin | Mapping[str, int] | int | None] = field(
        default_factory=dict
    )
    # Explicit per-node colors; enables node colors in from/to/gradient modes
    node_colors: dict[str, str] = field(default_factory=dict)
    # Fallback node color: a string or a callable taking the node id
    node_color: str | Callable[[str], str] | None = None
    flow_color: str | None = None
    hover_color: str | None = None


@dataclass
class SankeyDiagram:
    """Complete Sankey diagram definition."""

    title: str = ""
    edges: list[FlowEdge] = field(default_factory=list)
    config: LayoutConfig = field(default_factory=LayoutConfig)
    label_position: str = "auto"
    show_labels: bool = True
    show_flow_labels: bool = False
    label_formatter: Callable[[str, Node], str] | None = None
    flow_label_formatter: Callable[[float, FlowBand], str] | None = None

    def add_edge(self, edge: FlowEdge) -> None:
        self.edges.append(edge)
