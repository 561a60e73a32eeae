"""Hover context shared by every diagram drawn on one surface."""

from __future__ import annotations

from dataclasses import dataclass, field

from sankey_flow.layout.engine import SankeyLayout
from sankey_flow.layout.hit_test import flow_at, node_at


@dataclass(frozen=True)
class HoverState:
    """Pointer state passed explicitly to each render call.

    ``hovered_node`` highlights one node and the flows touching it;
    ``active_flows`` holds ``(layout_index, flow_index)`` pairs of hovered
    flow bands, so each diagram only reacts to its own flows.
    """

    hovered_node: str | None = None
    active_flows: frozenset[tuple[int, int]] = field(default_factory=frozenset)

    def flows_for(self, layout_index: int) -> frozenset[int]:
        """Indices of the active flows belonging to one layout."""
        return frozenset(i for li, i in self.active_flows if li == layout_index)

    @classmethod
    def at_point(cls, layouts: list[SankeyLayout], x: float, y: float) -> HoverState:
        """Resolve the hover state for a pointer position.

        Nodes are checked across all layouts first; a flow is only
        active when the pointer is not over a node.
        """
        for layout in layouts:
            nid = node_at(layout.node_geometry, x, y)
            if nid is not None:
                return cls(hovered_node=nid)
        for li, layout in enumerate(layouts):
            idx = flow_at(layout.flow_bands, x, y)
            if idx is not None:
                return cls(active_flows=frozenset({(li, idx)}))
        return cls()
