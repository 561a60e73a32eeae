"""Parser for Mermaid sankey-beta definitions with %%sankey directives.

Uses a simple line-by-line approach: the Mermaid sankey body is one CSV
row (``source,target,value``) per line, and layout options ride along as
``%%sankey`` comment directives that Mermaid itself ignores.
"""

from __future__ import annotations

import csv
import logging
import math

from sankey_flow.parser.model import (
    ColorMode,
    FlowEdge,
    NodePin,
    Orientation,
    SankeyDiagram,
)

logger = logging.getLogger(__name__)

_HEADER = "sankey-beta"
_LABEL_MODES = ("auto", "left", "right", "top", "none")
_TRUTHY = ("on", "true", "yes", "1")


def _check_unsupported_input(text: str) -> None:
    """Detect common unsupported input formats and raise helpful errors."""
    for line in text.strip().split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("%%"):
            continue
        if stripped.startswith(("graph ", "flowchart ")):
            raise ValueError(
                "Mermaid 'graph'/'flowchart' syntax is not a Sankey diagram. "
                "Start the definition with 'sankey-beta' and list flows as "
                "'source,target,value' rows."
            )
        return


def parse_sankey_mermaid(text: str) -> SankeyDiagram:
    """Parse a Mermaid sankey-beta definition with %%sankey directives."""
    _check_unsupported_input(text)

    diagram = SankeyDiagram()
    for lineno, line in enumerate(text.strip().split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("%%sankey"):
            _parse_directive(stripped, diagram, lineno)
            continue

        # Skip regular comments and the diagram declaration
        if stripped.startswith("%%") or stripped == _HEADER:
            continue

        diagram.add_edge(_parse_row(stripped, lineno))

    logger.debug("Parsed %d flow row(s)", len(diagram.edges))
    return diagram


def _parse_row(line: str, lineno: int) -> FlowEdge:
    """Parse one ``source,target,value`` CSV row."""
    fields = next(csv.reader([line], skipinitialspace=True))
    if len(fields) != 3:
        raise ValueError(
            f"Line {lineno}: expected 'source,target,value', got {line!r}"
        )
    source, target, raw_value = (f.strip() for f in fields)
    try:
        value = float(raw_value)
    except ValueError:
        raise ValueError(
            f"Line {lineno}: flow value {raw_value!r} is not a number"
        ) from None
    return FlowEdge(source=source, target=target, weight=value)


def _split_pair(content: str, lineno: int) -> tuple[str, str]:
    parts = content.split("|")
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise ValueError(
            f"Line {lineno}: expected '<node> | <value>', got {content!r}"
        )
    return parts[0].strip(), parts[1].strip()


def _parse_number(raw: str, name: str, lineno: int) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"Line {lineno}: {name} {raw!r} is not a number") from None
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Line {lineno}: {name} must be a non-negative number")
    return value


def _parse_directive(line: str, diagram: SankeyDiagram, lineno: int) -> None:
    """Parse a %%sankey directive line."""
    content = line[len("%%sankey") :].strip()
    key, sep, rest = content.partition(":")
    if not sep:
        logger.warning("Line %d: ignoring malformed directive %r", lineno, line)
        return
    key = key.strip().lower()
    rest = rest.strip()
    config = diagram.config

    if key == "title":
        diagram.title = rest
    elif key == "orientation":
        try:
            config.orientation = Orientation(rest.lower())
        except ValueError:
            raise ValueError(
                f"Line {lineno}: orientation must be 'horizontal' or 'vertical'"
            ) from None
    elif key == "color_mode":
        try:
            config.color_mode = ColorMode(rest.lower())
        except ValueError:
            raise ValueError(
                f"Line {lineno}: color_mode must be 'from', 'to' or 'gradient'"
            ) from None
    elif key == "node_width":
        config.node_width = _parse_number(rest, "node_width", lineno)
    elif key == "node_padding":
        config.node_padding = _parse_number(rest, "node_padding", lineno)
    elif key == "node":
        node_id, color = _split_pair(rest, lineno)
        config.node_colors[node_id] = color
    elif key == "pin":
        node_id, raw_column = _split_pair(rest, lineno)
        if not raw_column.isdigit():
            raise ValueError(
                f"Line {lineno}: pin column {raw_column!r} must be a "
                "non-negative integer"
            )
        config.pins[node_id] = NodePin(column=int(raw_column))
    elif key == "flow_color":
        config.flow_color = rest
    elif key == "hover_color":
        config.hover_color = rest
    elif key == "labels":
        mode = rest.lower()
        if mode not in _LABEL_MODES:
            raise ValueError(
                f"Line {lineno}: labels must be one of {', '.join(_LABEL_MODES)}"
            )
        diagram.show_labels = mode != "none"
        if diagram.show_labels:
            diagram.label_position = mode
    elif key == "flow_labels":
        diagram.show_flow_labels = rest.lower() in _TRUTHY
    else:
        logger.warning("Line %d: unknown directive %r", lineno, key)
