"""Theme definitions for Sankey diagrams."""

from sankey_flow.themes.dark import DARK_THEME
from sankey_flow.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
