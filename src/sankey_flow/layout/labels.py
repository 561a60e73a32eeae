"""Label placement for node names.

In ``auto`` mode, labels on the first and last levels sit outside the
diagram (before the first column, after the last) and labels on middle
levels sit on the node's top side in horizontal layouts or its left side
in vertical ones.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sankey_flow.layout.constants import LABEL_PADDING
from sankey_flow.layout.engine import SankeyLayout
from sankey_flow.parser.model import Node, NodeGeometry, Orientation

LABEL_POSITIONS = ("auto", "left", "right", "top")


@dataclass
class LabelPlacement:
    """Placement information for a node label."""

    node_id: str
    text: str
    x: float
    y: float
    text_anchor: str = "middle"
    dominant_baseline: str = "central"


def _left(nid: str, text: str, pos: NodeGeometry, pad: float) -> LabelPlacement:
    return LabelPlacement(nid, text, pos.x - pad, pos.y + pos.height / 2, "end")


def _right(nid: str, text: str, pos: NodeGeometry, pad: float) -> LabelPlacement:
    return LabelPlacement(
        nid, text, pos.x + pos.width + pad, pos.y + pos.height / 2, "start"
    )


def _above(nid: str, text: str, pos: NodeGeometry, pad: float) -> LabelPlacement:
    return LabelPlacement(
        nid, text, pos.x + pos.width / 2, pos.y - pad, "middle", "auto"
    )


def _below(nid: str, text: str, pos: NodeGeometry, pad: float) -> LabelPlacement:
    return LabelPlacement(
        nid, text, pos.x + pos.width / 2, pos.y + pos.height + pad, "middle", "hanging"
    )


def place_labels(
    layout: SankeyLayout,
    position: str = "auto",
    padding: float = LABEL_PADDING,
    formatter: Callable[[str, Node], str] | None = None,
) -> list[LabelPlacement]:
    """Place one label per node of a SankeyLayout.

    Args:
        layout: A SankeyLayout from compute_layout().
        position: One of LABEL_POSITIONS. Unknown values behave like
            ``top``.
        padding: Gap between node edge and label.
        formatter: Optional ``(node_id, node) -> text`` callback.
    """
    vertical = layout.orientation is Orientation.VERTICAL
    max_level = layout.max_level

    placements: list[LabelPlacement] = []
    for nid, pos in layout.node_geometry.items():
        node = layout.nodes.get(nid) or Node(id=nid)
        text = formatter(nid, node) if formatter else nid
        level = layout.levels.get(nid, 0)

        if position == "auto" and max_level > 0:
            if level == 0:
                place = _above if vertical else _left
            elif level == max_level:
                place = _below if vertical else _right
            else:
                place = _left if vertical else _above
        elif position == "left":
            place = _left
        elif position == "right":
            place = _right
        else:
            place = _above

        placements.append(place(nid, text, pos, padding))
    return placements
