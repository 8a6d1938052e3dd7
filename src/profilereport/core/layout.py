"""
Layout constants.

All renderers receive a :class:`LayoutConfig` and read positions, sizes and
thresholds from it. Coordinates use a top-left origin in points (1/72 inch):
``x`` grows to the right, ``y`` grows downwards. The surface converts to the
output format's own coordinate system.

The defaults reproduce an A4 report with a 50pt margin.

Examples
--------
>>> from dataclasses import replace
>>> from profilereport.core.layout import LayoutConfig
>>> compact = replace(LayoutConfig(), chart_height=150, table_overflow_y=760)
"""

from dataclasses import dataclass
from typing import Optional

from reportlab.lib.pagesizes import A4


@dataclass(frozen=True)
class LayoutConfig:
    """
    Named layout constants of a report page.

    Attributes are grouped by the renderer that reads them. Every renderer
    returns the new cursor position, so nothing here is mutated during a
    render.
    """

    # page
    page_size: tuple[float, float] = A4
    margin: float = 50
    content_top: float = 120
    text_color: str = "black"

    # header
    title: str = "BrainWave Technologies"
    title_size: float = 16
    title_y: float = 45
    logo_path: Optional[str] = "LOGOBRAINWAVE.jpeg"
    logo_y: float = 30
    logo_width: float = 60
    logo_height: float = 40
    logo_right_inset: float = 110
    logo_caption: str = "LOGO"
    logo_caption_size: float = 8
    logo_caption_dx: float = 15
    logo_caption_dy: float = 18
    header_rule_y: float = 90

    # person block
    person_heading: str = "Person Details"
    person_heading_size: float = 12
    person_heading_gap: float = 25
    person_font_size: float = 10
    person_left_x: float = 50
    person_right_x: float = 300
    person_value_dy: float = 12
    person_row_step: float = 35
    person_trailing_gap: float = 20

    # section dispatcher
    section_title_size: float = 14
    section_title_gap: float = 25

    # table
    table_font_size: float = 10
    table_key_x: float = 50
    table_key_width: float = 150
    table_value_x: float = 220
    table_value_width: float = 350
    table_min_row_height: float = 20
    table_row_padding: float = 5
    table_overflow_y: float = 700
    table_trailing_gap: float = 20

    # chart
    chart_title_size: float = 12
    chart_title_gap: float = 30
    chart_x: float = 50
    chart_width: float = 400
    chart_height: float = 200
    chart_line_width: float = 2
    chart_point_radius: float = 2
    chart_label_size: float = 8
    chart_value_label_size: float = 7
    chart_axis_title_size: float = 10
    chart_tick_length: float = 5
    chart_tick_color: str = "#cccccc"
    chart_y_label_x: float = 5
    chart_x_label_width: float = 60
    chart_y_intervals: int = 6
    chart_x_target_labels: int = 8
    chart_date_target_labels: int = 6
    chart_legend_offset: float = 40
    chart_legend_swatch: float = 10
    chart_legend_stride: float = 15
    chart_legend_label_dx: float = 20
    chart_bottom_gap: float = 70

    # footer
    footer_offset: float = 30
    footer_size: float = 10

    @property
    def page_width(self) -> float:
        return self.page_size[0]

    @property
    def page_height(self) -> float:
        return self.page_size[1]
