"""
Person details block.

The first page shows four fields; every following page repeats them and
adds four more. Fields are laid out two per row, each as a label line with
the value directly beneath it.
"""

import logging

from ..core.layout import LayoutConfig
from ..surfaces import DrawingSurface
from ..types import Person

logger = logging.getLogger(__name__)

FIRST_PAGE_FIELDS = ("name", "email", "phone", "department")
EXTENDED_FIELDS = FIRST_PAGE_FIELDS + ("position", "id", "startDate", "manager")


def person_fields(is_first_page: bool) -> tuple[str, ...]:
    """Field names shown on the first page or on any later page."""
    return FIRST_PAGE_FIELDS if is_first_page else EXTENDED_FIELDS


def render_person(
    surface: DrawingSurface,
    person: Person,
    is_first_page: bool,
    cursor_y: float,
    layout: LayoutConfig = None,
) -> float:
    """
    Draw the person block starting at `cursor_y`.

    Parameters
    ----------
    surface : DrawingSurface
        Target surface.
    person : Person
        Profile to display. Absent fields are shown as ``"N/A"``.
    is_first_page : bool
        Selects the 4-field (first page) or 8-field layout.
    cursor_y : float
        Vertical position to start at.
    layout : LayoutConfig, optional
        Layout constants.

    Returns
    -------
    float
        Cursor position below the block, including the trailing gap.
    """
    layout = layout or LayoutConfig()
    surface.draw_text(
        layout.person_heading,
        layout.person_left_x,
        cursor_y,
        size=layout.person_heading_size,
        color=layout.text_color,
    )
    y = cursor_y + layout.person_heading_gap

    fields = person_fields(is_first_page)
    columns = (layout.person_left_x, layout.person_right_x)
    for row_start in range(0, len(fields), 2):
        for name, x in zip(fields[row_start : row_start + 2], columns):
            surface.draw_text(
                f"{name}:", x, y, size=layout.person_font_size, color=layout.text_color
            )
            surface.draw_text(
                person.display(name),
                x,
                y + layout.person_value_dy,
                size=layout.person_font_size,
                color=layout.text_color,
            )
        y += layout.person_row_step

    logger.debug("Person block drew %d fields", len(fields))
    return y + layout.person_trailing_gap
