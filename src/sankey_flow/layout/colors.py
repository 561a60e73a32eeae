"""Color helpers: node color resolution and alpha adjustment."""

from __future__ import annotations

__all__ = ["adjust_alpha", "resolve_node_colors"]

import re
from collections.abc import Callable, Iterable, Mapping

from sankey_flow.layout.constants import DEFAULT_NODE_COLOR

_RGB_PATTERN = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")
_HEX_PATTERN = re.compile(r"^#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def adjust_alpha(color: str, alpha: float) -> str:
    """Return *color* as an ``rgba(...)`` string with the given alpha.

    Understands ``rgb(...)``, ``rgba(...)`` and 6-digit hex. Other color
    strings (named colors, 3-digit hex) are returned unchanged.
    """
    m = _RGB_PATTERN.search(color)
    if m:
        return f"rgba({m.group(1)}, {m.group(2)}, {m.group(3)}, {alpha})"
    m = _HEX_PATTERN.match(color)
    if m:
        r, g, b = (int(m.group(i), 16) for i in (1, 2, 3))
        return f"rgba({r}, {g}, {b}, {alpha})"
    return color


def resolve_node_colors(
    node_ids: Iterable[str],
    node_colors: Mapping[str, str] | None = None,
    node_color: str | Callable[[str], str] | None = None,
) -> dict[str, str]:
    """Resolve a display color for every node, once per layout.

    Priority: explicit *node_colors* entry, then *node_color* (called with
    the node ID when callable), then DEFAULT_NODE_COLOR.
    """
    resolved: dict[str, str] = {}
    for nid in node_ids:
        if node_colors and node_colors.get(nid):
            resolved[nid] = node_colors[nid]
        elif callable(node_color):
            resolved[nid] = node_color(nid)
        elif isinstance(node_color, str):
            resolved[nid] = node_color
        else:
            resolved[nid] = DEFAULT_NODE_COLOR
    return resolved
