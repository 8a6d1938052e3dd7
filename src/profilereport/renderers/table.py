"""
Key/value table rows with wrapped values.

Row height follows the measured height of the wrapped value. Once the
cursor passes ``LayoutConfig.table_overflow_y`` the remaining rows of the
section are not drawn; the table does not continue on a new page.
"""

import logging
from typing import Sequence

from .._utils import read_messages
from ..core.layout import LayoutConfig
from ..surfaces import DrawingSurface
from ..types import TableRow

logger = logging.getLogger(__name__)


def row_advance(measured_height: float, layout: LayoutConfig) -> float:
    """Vertical advance of a row whose value measures `measured_height`."""
    return max(layout.table_min_row_height, measured_height + layout.table_row_padding)


def render_table(
    surface: DrawingSurface,
    rows: Sequence[TableRow],
    cursor_y: float,
    layout: LayoutConfig = None,
) -> float:
    """
    Draw `rows` starting at `cursor_y`.

    Parameters
    ----------
    surface : DrawingSurface
        Target surface.
    rows : Sequence[TableRow]
        Rows in display order.
    cursor_y : float
        Vertical position of the first row.
    layout : LayoutConfig, optional
        Layout constants.

    Returns
    -------
    float
        Cursor position below the last drawn row, including the trailing gap.

    Notes
    -----
    The row that moves the cursor past the overflow threshold is still
    drawn; the rows after it are dropped and a warning is logged.
    """
    layout = layout or LayoutConfig()
    size = layout.table_font_size
    y = cursor_y
    for drawn, row in enumerate(rows, start=1):
        surface.draw_text(
            f"{row.key}:",
            layout.table_key_x,
            y,
            size=size,
            width=layout.table_key_width,
            color=layout.text_color,
        )
        value_height = surface.measure_text_height(
            row.value, layout.table_value_width, size=size
        )
        surface.draw_text(
            row.value,
            layout.table_value_x,
            y,
            size=size,
            width=layout.table_value_width,
            color=layout.text_color,
        )
        y += row_advance(value_height, layout)

        if y > layout.table_overflow_y:
            dropped = len(rows) - drawn
            if dropped:
                logger.warning(
                    read_messages("warnings")["table_overflow_f"].format(y, dropped)
                )
            break

    return y + layout.table_trailing_gap
