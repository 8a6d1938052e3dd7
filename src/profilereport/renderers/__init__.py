"""
Renderers of profilereport.

Each renderer draws one part of a page through a
:class:`~profilereport.surfaces.DrawingSurface` and returns the new cursor
position where it has one.

Functions
---------
render_pdf(data, path=None, font="Helvetica", layout=None, fallback_to_sample=True, **kwargs)
    Render a payload into PDF bytes, optionally saving it.
compose(surface, document, layout=None)
    Lay out a whole document on a surface, footers included.
render_header(surface, layout=None)
    Logos, title and separator line.
render_person(surface, person, is_first_page, cursor_y, layout=None)
    Person details block.
render_section(surface, section, cursor_y, layout=None)
    Section title plus table or chart.
render_table(surface, rows, cursor_y, layout=None)
    Key/value rows with wrapped values.
render_chart(surface, chart, cursor_y, layout=None)
    Line chart with axes and legend.
render_footer(surface, current_page, total_pages, layout=None)
    ``"Page i of N"``.
"""

from .chart import render_chart
from .composer import compose
from .footer import render_footer
from .header import draw_logo, render_header
from .pdf import render_pdf
from .person import person_fields, render_person
from .sections import render_section
from .table import render_table

__all__ = [
    "compose",
    "draw_logo",
    "person_fields",
    "render_chart",
    "render_footer",
    "render_header",
    "render_pdf",
    "render_person",
    "render_section",
    "render_table",
]
