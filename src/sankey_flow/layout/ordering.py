"""Within-column node ordering to reduce flow crossings.

A two-pass barycenter heuristic: a forward sweep orders each column by
the mean position of its predecessors in the previous column, then a
backward sweep orders by the mean position of successors in the next
column. Exactly two sweeps are run; the result is not iterated to
convergence.
"""

from __future__ import annotations

__all__ = ["count_crossings", "reorder_nodes"]

import math
from collections import defaultdict
from collections.abc import Iterable

from sankey_flow.parser.model import FlowEdge


def reorder_nodes(clusters: dict[int, list[str]], edges: Iterable[FlowEdge]) -> None:
    """Reorder node IDs within each level in place.

    Args:
        clusters: Level -> ordered node IDs, as from group_by_level().
        edges: Valid flow edges. Parallel edges count once per edge.

    Columns with at most one node, or without a populated neighbouring
    column, are left untouched. Nodes without neighbours in the adjacent
    column sort last; ties keep their previous relative order.
    """
    incoming: dict[str, list[str]] = defaultdict(list)
    outgoing: dict[str, list[str]] = defaultdict(list)
    for edge in edges:
        outgoing[edge.source].append(edge.target)
        incoming[edge.target].append(edge.source)

    sorted_levels = sorted(clusters)
    sweeps = (
        (sorted_levels, -1, incoming),
        (sorted_levels[::-1], 1, outgoing),
    )
    for order, step, neighbours in sweeps:
        for level in order:
            node_ids = clusters.get(level)
            if not node_ids or len(node_ids) <= 1:
                continue
            adjacent = clusters.get(level + step)
            if not adjacent:
                continue

            pos_index = {nid: i for i, nid in enumerate(adjacent)}
            bary = {
                nid: _barycenter(neighbours.get(nid, ()), pos_index)
                for nid in node_ids
            }
            # list.sort is stable, so ties (including all-inf) keep order
            node_ids.sort(key=lambda nid: bary[nid])


def _barycenter(neighbours: Iterable[str], pos_index: dict[str, int]) -> float:
    """Mean index of *neighbours* within the adjacent column, or +inf."""
    positions = [pos_index[n] for n in neighbours if n in pos_index]
    if not positions:
        return math.inf
    return sum(positions) / len(positions)


def count_crossings(
    clusters: dict[int, list[str]], edges: Iterable[FlowEdge]
) -> int:
    """Count pairwise crossings between edges joining adjacent columns.

    Only edges whose endpoints sit in consecutive levels (source level L,
    target level L + 1) are considered. Two such edges cross when their
    source and target orders disagree.
    """
    position: dict[str, tuple[int, int]] = {}
    for level, node_ids in clusters.items():
        for i, nid in enumerate(node_ids):
            position[nid] = (level, i)

    by_gap: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for edge in edges:
        src = position.get(edge.source)
        tgt = position.get(edge.target)
        if src is None or tgt is None or tgt[0] != src[0] + 1:
            continue
        by_gap[src[0]].append((src[1], tgt[1]))

    crossings = 0
    for pairs in by_gap.values():
        for i, (s1, t1) in enumerate(pairs):
            for s2, t2 in pairs[i + 1 :]:
                if (s1 - s2) * (t1 - t2) < 0:
                    crossings += 1
    return crossings
