"""
Page masthead: two logo slots, a centered title and a separator line.

The header is identical on every page and keeps no state between calls.
"""

import logging

from .._utils import read_messages
from ..core.layout import LayoutConfig
from ..surfaces import DrawingSurface

logger = logging.getLogger(__name__)


def draw_logo(surface: DrawingSurface, x: float, y: float, layout: LayoutConfig) -> bool:
    """
    Try to draw the configured logo image at ``(x, y)``.

    Returns
    -------
    bool
        True if the image was drawn, False if no logo is configured or the
        image could not be loaded. Failures are logged, never raised.
    """
    if not layout.logo_path:
        return False
    try:
        surface.draw_image(layout.logo_path, x, y, layout.logo_width, layout.logo_height)
    except Exception as e:  # unreadable or undecodable image
        logger.warning(read_messages("warnings")["logo_fallback_f"].format(layout.logo_path, e))
        return False
    return True


def draw_logo_placeholder(
    surface: DrawingSurface, x: float, y: float, layout: LayoutConfig
) -> None:
    """Bordered box with a ``"LOGO"`` caption, same size as the logo slot."""
    surface.draw_rect(x, y, layout.logo_width, layout.logo_height)
    surface.draw_text(
        layout.logo_caption,
        x + layout.logo_caption_dx,
        y + layout.logo_caption_dy,
        size=layout.logo_caption_size,
        color=layout.text_color,
    )


def render_header(surface: DrawingSurface, layout: LayoutConfig = None) -> None:
    """
    Draw the masthead on the current page.

    Parameters
    ----------
    surface : DrawingSurface
        Target surface; the current page is drawn on.
    layout : LayoutConfig, optional
        Layout constants, defaults to ``LayoutConfig()``.
    """
    layout = layout or LayoutConfig()
    left_x = layout.margin
    right_x = surface.width - layout.logo_right_inset

    if not draw_logo(surface, left_x, layout.logo_y, layout):
        draw_logo_placeholder(surface, left_x, layout.logo_y, layout)

    surface.draw_text(
        layout.title,
        0,
        layout.title_y,
        size=layout.title_size,
        width=surface.width,
        align="center",
        color=layout.text_color,
    )

    if not draw_logo(surface, right_x, layout.logo_y, layout):
        draw_logo_placeholder(surface, right_x, layout.logo_y, layout)

    surface.draw_line(
        layout.margin,
        layout.header_rule_y,
        surface.width - layout.margin,
        layout.header_rule_y,
    )
