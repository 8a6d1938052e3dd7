"""Section dispatch: draws the section title and hands the data to its renderer."""

import logging

from ..core.layout import LayoutConfig
from ..surfaces import DrawingSurface
from ..types import Section
from .chart import render_chart
from .table import render_table

logger = logging.getLogger(__name__)

SECTION_RENDERERS = {
    "table": render_table,
    "chart": render_chart,
}


def render_section(
    surface: DrawingSurface,
    section: Section,
    cursor_y: float,
    layout: LayoutConfig = None,
) -> float:
    """
    Draw `section` at `cursor_y` and return the cursor below it.

    Sections of an unknown kind only get their title; the cursor is returned
    as it stands after the title.
    """
    layout = layout or LayoutConfig()
    surface.draw_text(
        section.title,
        layout.margin,
        cursor_y,
        size=layout.section_title_size,
        color=layout.text_color,
    )
    y = cursor_y + layout.section_title_gap

    renderer = SECTION_RENDERERS.get(section.kind)
    if renderer is None:
        logger.debug("Skipping section '%s' of unknown kind '%s'", section.title, section.kind)
        return y
    return renderer(surface, section.data, y, layout)
