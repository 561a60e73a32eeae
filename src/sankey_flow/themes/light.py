"""Light theme (default)."""

from sankey_flow.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    label_color="rgba(0, 0, 0, 1)",
    label_font_family="sans-serif",
    label_font_size=12.0,
    title_color="#111111",
    title_font_size=20.0,
    flow_label_color="rgba(0, 0, 0, 0.8)",
    flow_label_font_size=10.0,
)
