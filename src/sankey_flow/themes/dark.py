"""Dark grey theme."""

from sankey_flow.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=24.0,
    flow_label_color="#ffffff",
    flow_label_font_size=10.0,
    node_border_color="rgba(255, 255, 255, 0.4)",
    node_border_width=1.0,
    node_border_radius=2.0,
    hover_ring_color="rgba(255, 255, 255, 0.8)",
)
