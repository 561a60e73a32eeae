"""Input parsers for Sankey diagram definitions."""

from sankey_flow.parser.dataset import parse_sankey_json
from sankey_flow.parser.mermaid import parse_sankey_mermaid

__all__ = ["parse_sankey_json", "parse_sankey_mermaid"]
