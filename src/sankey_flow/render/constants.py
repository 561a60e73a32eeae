"""Rendering constants."""

TITLE_BASELINE: float = 30.0
"""Y position of the title baseline."""

TITLE_SPACE: float = 40.0
"""Extra top margin reserved when a title is drawn."""

EMPTY_SVG: str = '<svg xmlns="http://www.w3.org/2000/svg"></svg>'
"""Output for a diagram with nothing to draw."""
