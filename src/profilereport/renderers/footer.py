"""Page number footer."""

from ..core.layout import LayoutConfig
from ..surfaces import DrawingSurface


def render_footer(
    surface: DrawingSurface,
    current_page: int,
    total_pages: int,
    layout: LayoutConfig = None,
) -> None:
    """Draw ``"Page {current} of {total}"`` centered near the bottom edge."""
    layout = layout or LayoutConfig()
    surface.draw_text(
        f"Page {current_page} of {total_pages}",
        0,
        surface.height - layout.footer_offset,
        size=layout.footer_size,
        width=surface.width,
        align="center",
        color=layout.text_color,
    )
