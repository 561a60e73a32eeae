"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

from sankey_flow.layout.engine import compute_layout
from sankey_flow.parser.mermaid import parse_sankey_mermaid
from sankey_flow.layout.positioning import DrawRect
from sankey_flow.parser.model import ColorMode, FlowEdge, LayoutConfig
from sankey_flow.render import HoverState, diagram_rect, render_diagram, render_svg
from sankey_flow.render.constants import EMPTY_SVG
from sankey_flow.render.svg import format_value
from sankey_flow.themes import DARK_THEME, LIGHT_THEME

SIMPLE = (
    "%%sankey title: Test\n"
    "sankey-beta\n"
    "Input,Process,10\n"
    "Process,Output,6\n"
    "Process,Waste,4\n"
)


def _render_simple(theme=LIGHT_THEME):
    return render_diagram(parse_sankey_mermaid(SIMPLE), theme)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg")


def test_render_contains_title_and_labels():
    svg = _render_simple()
    assert "Test" in svg
    for name in ("Input", "Process", "Output", "Waste"):
        assert name in svg


def test_render_draws_one_path_per_flow():
    svg = _render_simple()
    root = ET.fromstring(svg)
    paths = [el for el in root.iter() if el.tag.endswith("path")]
    assert len(paths) == 3


def test_render_labels_can_be_hidden():
    diagram = parse_sankey_mermaid("%%sankey labels: none\n" + SIMPLE)
    svg = render_diagram(diagram, LIGHT_THEME)
    assert "Waste" not in svg


def test_render_dark_theme_background():
    svg = _render_simple(DARK_THEME)
    assert "#2b2b2b" in svg


def test_gradient_mode_uses_linear_gradient():
    edges = [FlowEdge("A", "B", 5)]
    gradient = compute_layout(edges, LayoutConfig(color_mode=ColorMode.GRADIENT))
    plain = compute_layout(edges, LayoutConfig(color_mode=ColorMode.FROM))
    assert "linearGradient" in render_svg(gradient, LIGHT_THEME)
    assert "linearGradient" not in render_svg(plain, LIGHT_THEME)


def test_empty_layout_renders_empty_svg():
    layout = compute_layout([FlowEdge("A", "B", 0)])
    assert render_svg(layout, LIGHT_THEME) == EMPTY_SVG


def test_flow_labels_show_values():
    layout = compute_layout([FlowEdge("A", "B", 42)])
    assert ">42<" in render_svg(layout, LIGHT_THEME, show_flow_labels=True)
    assert ">42<" not in render_svg(layout, LIGHT_THEME, show_flow_labels=False)


def test_hovered_node_dims_unrelated_flows_and_nodes():
    edges = [FlowEdge("A", "B", 5), FlowEdge("A", "C", 5), FlowEdge("D", "C", 5)]
    layout = compute_layout(edges)
    svg = render_svg(layout, LIGHT_THEME, hover=HoverState(hovered_node="B"))
    assert 'opacity="0.15"' in svg
    assert 'opacity="0.3"' in svg


def test_active_flow_uses_hover_color():
    edges = [
        FlowEdge("A", "B", 5, hover_color="#123456"),
        FlowEdge("A", "C", 5),
    ]
    layout = compute_layout(edges)
    idle = render_svg(layout, LIGHT_THEME)
    hovered = render_svg(
        layout, LIGHT_THEME, hover=HoverState(active_flows=frozenset({(0, 0)}))
    )
    assert "#123456" not in idle
    assert "#123456" in hovered
    assert 'opacity="0.3"' in hovered


def test_diagram_rect_reserves_title_space():
    plain = diagram_rect(800, 500, 60)
    titled = diagram_rect(800, 500, 60, title="T")
    assert plain.top == 60
    assert titled.top > plain.top
    assert titled.bottom == plain.bottom == 440


def test_flow_labels_keep_full_precision():
    layout = compute_layout([FlowEdge("A", "B", 1234567)])
    svg = render_svg(layout, LIGHT_THEME, show_flow_labels=True)
    assert ">1234567<" in svg
    assert "e+06" not in svg


def test_format_value():
    assert format_value(1234567) == "1234567"
    assert format_value(1234567.0) == "1234567"
    assert format_value(2.5) == "2.5"
    assert format_value(0.1) == "0.1"


def test_hovered_flow_only_affects_its_own_layout():
    """Hovering a flow in one diagram leaves the other diagrams untouched."""
    left = compute_layout(
        [FlowEdge("A", "B", 5), FlowEdge("A", "C", 5)],
        rect=DrawRect(0, 0, 200, 100),
    )
    right = compute_layout(
        [FlowEdge("X", "Y", 5), FlowEdge("X", "Z", 5)],
        rect=DrawRect(300, 0, 500, 100),
    )
    cx, cy = right.flow_bands[0].geometry().center_point()
    hover = HoverState.at_point([left, right], cx, cy)

    left_svg = render_svg(left, LIGHT_THEME, hover=hover, layout_index=0)
    right_svg = render_svg(right, LIGHT_THEME, hover=hover, layout_index=1)
    assert 'opacity="0.3"' not in left_svg
    assert 'opacity="0.3"' in right_svg


def test_label_formatter_is_applied():
    layout = compute_layout([FlowEdge("A", "B", 5)])
    svg = render_svg(
        layout,
        LIGHT_THEME,
        label_formatter=lambda nid, node: f"node {nid}: {node.value:g}",
    )
    assert "node A: 5" in svg
    assert "node B: 5" in svg


def test_flow_label_formatter_is_applied():
    layout = compute_layout([FlowEdge("A", "B", 42)])
    svg = render_svg(
        layout,
        LIGHT_THEME,
        show_flow_labels=True,
        flow_label_formatter=lambda value, band: f"{band.source}: {value:.1f} t",
    )
    assert "A: 42.0 t" in svg
    assert ">42<" not in svg


def test_render_diagram_passes_formatters():
    diagram = parse_sankey_mermaid(SIMPLE)
    diagram.show_flow_labels = True
    diagram.label_formatter = lambda nid, node: nid.upper()
    diagram.flow_label_formatter = lambda value, band: f"{value:g} units"
    svg = render_diagram(diagram, LIGHT_THEME)
    assert "PROCESS" in svg
    assert "10 units" in svg
