"""Node discovery and the adjacency index shared by later stages."""

from __future__ import annotations

__all__ = ["build_nodes", "flow_digraph"]

from collections.abc import Iterable, Mapping

import networkx as nx

from sankey_flow.parser.model import FlowEdge, Node


def build_nodes(edges: Iterable[FlowEdge]) -> dict[str, Node]:
    """Collect unique nodes from valid edges with incoming/outgoing totals.

    Nodes are keyed in first-seen order (source before target within an
    edge); later stages rely on this order for deterministic tie-breaks.
    """
    incoming: dict[str, float] = {}
    outgoing: dict[str, float] = {}
    for edge in edges:
        for nid in (edge.source, edge.target):
            if nid not in incoming:
                incoming[nid] = 0
                outgoing[nid] = 0
        outgoing[edge.source] += edge.weight
        incoming[edge.target] += edge.weight

    return {
        nid: Node(
            id=nid,
            incoming=incoming[nid],
            outgoing=outgoing[nid],
            value=max(incoming[nid], outgoing[nid]),
        )
        for nid in incoming
    }


def flow_digraph(
    edges: Iterable[FlowEdge],
    nodes: Mapping[str, Node] | None = None,
) -> nx.MultiDiGraph:
    """Build the adjacency index for a set of valid edges.

    One graph edge is added per flow edge so parallel flows keep their
    multiplicity. Successor order follows first occurrence in *edges*.
    """
    G = nx.MultiDiGraph()
    if nodes is not None:
        G.add_nodes_from(nodes)
    for edge in edges:
        G.add_edge(edge.source, edge.target, weight=edge.weight)
    return G
