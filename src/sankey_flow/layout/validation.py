"""Edge validation: filter raw flow records down to well-formed edges.

A zero, negative, or non-finite weight means "no flow" rather than bad
input, so invalid records are dropped silently instead of raising.
"""

from __future__ import annotations

__all__ = ["coerce_edge", "is_valid_edge", "valid_edges"]

import logging
import math
from collections.abc import Iterable, Mapping

from sankey_flow.parser.model import FlowEdge

logger = logging.getLogger(__name__)

# Accepted key spellings for raw mapping records, first match wins.
_SOURCE_KEYS = ("from", "source")
_TARGET_KEYS = ("to", "target")
_WEIGHT_KEYS = ("flow", "weight", "value")
_COLOR_KEYS = {
    "color": ("color",),
    "color_from": ("colorFrom", "color_from"),
    "color_to": ("colorTo", "color_to"),
    "hover_color": ("hoverColor", "hover_color"),
}


def _first(record: Mapping, keys: tuple[str, ...]):
    for key in keys:
        if key in record:
            return record[key]
    return None


def coerce_edge(record: object) -> FlowEdge | None:
    """Convert a raw record into a FlowEdge without checking its values.

    ``FlowEdge`` instances pass through unchanged. Mappings are read using
    either the ``from``/``to``/``flow`` or ``source``/``target``/``weight``
    spellings. Anything else yields None.
    """
    if isinstance(record, FlowEdge):
        return record
    if not isinstance(record, Mapping):
        return None
    colors = {name: _first(record, keys) for name, keys in _COLOR_KEYS.items()}
    return FlowEdge(
        source=_first(record, _SOURCE_KEYS),
        target=_first(record, _TARGET_KEYS),
        weight=_first(record, _WEIGHT_KEYS),
        **colors,
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_edge(edge: object) -> bool:
    """Return True if *edge* is a FlowEdge carrying a usable flow.

    Both endpoints must be non-empty strings and the weight a finite number
    strictly greater than zero.
    """
    if not isinstance(edge, FlowEdge):
        return False
    if not isinstance(edge.source, str) or not edge.source:
        return False
    if not isinstance(edge.target, str) or not edge.target:
        return False
    if not _is_number(edge.weight):
        return False
    return math.isfinite(edge.weight) and edge.weight > 0


def valid_edges(records: Iterable[object]) -> list[FlowEdge]:
    """Coerce and filter *records*, keeping input order."""
    result: list[FlowEdge] = []
    dropped = 0
    for record in records:
        edge = coerce_edge(record)
        if is_valid_edge(edge):
            result.append(edge)
        else:
            dropped += 1
    if dropped:
        logger.debug("Dropped %d invalid flow record(s)", dropped)
    return result
