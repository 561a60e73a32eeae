"""Level (column) assignment for Sankey layout.

Uses breadth-first search from root nodes so each node lands at its
shortest distance from whichever root or pinned node discovers it first.
Unlike longest-path layering this tolerates cycles: visited nodes are
never re-queued, and anything the traversal cannot reach is placed after
its already-placed predecessors.
"""

from __future__ import annotations

__all__ = ["assign_levels", "group_by_level"]

import logging
from collections import deque
from collections.abc import Iterable, Mapping

from sankey_flow.layout.graph import flow_digraph
from sankey_flow.parser.model import FlowEdge, Node, NodePin

logger = logging.getLogger(__name__)


def _pin_column(pin: object) -> int | None:
    """Extract the pinned column from a pin override, or None if unpinned."""
    if pin is None:
        return None
    if isinstance(pin, NodePin):
        column = pin.column
    elif isinstance(pin, Mapping):
        column = pin.get("column")
    else:
        column = pin
    if column is None:
        return None
    if isinstance(column, bool) or not isinstance(column, int) or column < 0:
        logger.warning("Ignoring pin with invalid column %r", column)
        return None
    return column


def assign_levels(
    edges: Iterable[FlowEdge],
    nodes: Mapping[str, Node],
    pins: Mapping[str, object] | None = None,
) -> dict[str, int]:
    """Assign each node a level (integer column, 0-based).

    Args:
        edges: Valid flow edges.
        nodes: Node map from build_nodes(), in first-seen order.
        pins: Optional mapping of node_id -> ``{"column": n}`` overrides.
            Pins on unknown node IDs are ignored.

    Pinned nodes are placed first and seed the traversal with their
    successors. Roots (no incoming edge) start at level 0; a graph with
    no roots and no pins starts from its first node instead.

    Returns a dict mapping node_id -> level, in discovery order.
    """
    G = flow_digraph(edges, nodes)

    levels: dict[str, int] = {}
    visited: set[str] = set()
    queue: deque[tuple[str, int]] = deque()

    # Step 1: pins win over graph-derived placement
    for nid, pin in (pins or {}).items():
        if nid not in nodes:
            continue
        column = _pin_column(pin)
        if column is None:
            continue
        levels[nid] = column
        visited.add(nid)
        for succ in G.successors(nid):
            queue.append((succ, column + 1))

    # Step 2: root candidates
    roots = [nid for nid in nodes if nid not in visited and G.in_degree(nid) == 0]

    # Step 3: fully cyclic graph, pick a synthetic root
    if not roots and not queue:
        for nid in nodes:
            if nid not in visited:
                roots.append(nid)
                break

    queue.extend((nid, 0) for nid in roots)

    # Step 4: BFS, first enqueue wins
    while queue:
        nid, level = queue.popleft()
        if nid in visited:
            continue
        visited.add(nid)
        levels[nid] = level
        for succ in G.successors(nid):
            if succ not in visited:
                queue.append((succ, level + 1))

    # Step 5: single pass over unreached nodes, in first-seen order. Chains
    # of unreached nodes only see predecessors placed earlier in this pass.
    unreached = 0
    for nid in nodes:
        if nid in levels:
            continue
        unreached += 1
        placed = [levels[p] for p in G.predecessors(nid) if p in levels]
        levels[nid] = max(placed) + 1 if placed else 0

    if unreached:
        logger.debug("Placed %d node(s) unreachable from any root", unreached)

    return levels


def group_by_level(levels: Mapping[str, int]) -> dict[int, list[str]]:
    """Group node IDs by level, keys ascending.

    Within a level, node IDs keep the iteration order of *levels*.
    """
    groups: dict[int, list[str]] = {}
    for nid, level in levels.items():
        groups.setdefault(level, []).append(nid)
    return {level: groups[level] for level in sorted(groups)}
