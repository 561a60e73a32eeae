"""Tests for level assignment and grouping."""

import logging

from sankey_flow.layout.graph import build_nodes
from sankey_flow.layout.layers import assign_levels, group_by_level
from sankey_flow.parser.model import FlowEdge, NodePin


def _edges(*pairs):
    return [FlowEdge(s, t, 10) for s, t in pairs]


def _levels(edges, pins=None):
    return assign_levels(edges, build_nodes(edges), pins)


def test_single_edge():
    assert _levels(_edges(("A", "B"))) == {"A": 0, "B": 1}


def test_chain():
    levels = _levels(_edges(("A", "B"), ("B", "C"), ("C", "D")))
    assert [levels[n] for n in "ABCD"] == [0, 1, 2, 3]


def test_diamond():
    levels = _levels(_edges(("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")))
    assert levels["A"] == 0
    assert levels["B"] == levels["C"] == 1
    assert levels["D"] == 2


def test_shortest_distance_wins():
    """A node reachable by a short and a long path takes the short one."""
    levels = _levels(_edges(("A", "B"), ("B", "C"), ("A", "C")))
    assert levels["C"] == 1


def test_pure_cycle_uses_synthetic_root():
    levels = _levels(_edges(("A", "B"), ("B", "C"), ("C", "A")))
    assert levels == {"A": 0, "B": 1, "C": 2}


def test_self_loop_is_a_predecessor_edge():
    levels = _levels(_edges(("A", "A"), ("A", "B")))
    assert levels == {"A": 0, "B": 1}


def test_multiple_roots():
    levels = _levels(_edges(("A", "C"), ("B", "C")))
    assert levels == {"A": 0, "B": 0, "C": 1}


def test_disconnected_components():
    levels = _levels(_edges(("A", "B"), ("C", "D")))
    assert levels == {"A": 0, "B": 1, "C": 0, "D": 1}


def test_unreachable_cycle_placed_after_predecessors():
    """A cycle with no root-reachable entry falls back to predecessor levels."""
    levels = _levels(_edges(("A", "B"), ("C", "D"), ("D", "C")))
    assert levels["A"] == 0
    assert levels["B"] == 1
    # C is evaluated first: D is unplaced, so C -> 0; then D follows C
    assert levels["C"] == 0
    assert levels["D"] == 1


def test_pin_forces_column_and_successors():
    edges = _edges(("A", "B"), ("B", "C"))
    levels = _levels(edges, {"B": {"column": 5}})
    assert levels == {"B": 5, "A": 0, "C": 6}


def test_pin_root_to_later_column():
    levels = _levels(_edges(("A", "B"), ("B", "C")), {"A": {"column": 2}})
    assert levels == {"A": 2, "B": 3, "C": 4}


def test_multiple_pins():
    levels = _levels(
        _edges(("A", "B"), ("B", "C")),
        {"A": NodePin(column=0), "C": NodePin(column=10)},
    )
    assert levels["A"] == 0
    assert levels["B"] == 1
    assert levels["C"] == 10


def test_unknown_pin_ignored():
    levels = _levels(_edges(("A", "B")), {"Z": {"column": 5}})
    assert levels == {"A": 0, "B": 1}


def test_pin_without_column_ignored():
    levels = _levels(_edges(("A", "B")), {"B": {}, "A": None})
    assert levels == {"A": 0, "B": 1}


def test_invalid_pin_column_warns(caplog):
    with caplog.at_level(logging.WARNING):
        levels = _levels(_edges(("A", "B")), {"B": {"column": -1}})
    assert levels == {"A": 0, "B": 1}
    assert "invalid column" in caplog.text


def test_every_node_gets_a_level():
    edges = _edges(("A", "B"), ("B", "A"), ("C", "B"), ("D", "E"), ("E", "D"))
    nodes = build_nodes(edges)
    levels = assign_levels(edges, nodes)
    assert set(levels) == set(nodes)
    assert all(level >= 0 for level in levels.values())


def test_group_by_level():
    groups = group_by_level({"A": 0, "B": 1, "C": 1, "D": 2})
    assert groups == {0: ["A"], 1: ["B", "C"], 2: ["D"]}


def test_group_by_level_sorts_keys_and_keeps_order():
    groups = group_by_level({"X": 3, "B": 1, "A": 1, "C": 0})
    assert list(groups) == [0, 1, 3]
    assert groups[1] == ["B", "A"]


def test_group_by_level_empty():
    assert group_by_level({}) == {}
