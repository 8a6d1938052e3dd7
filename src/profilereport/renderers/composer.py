"""
Page composition.

:func:`compose` lays a whole document out on a surface in two passes:

1. every page gets the header, the person block and its sections, with the
   cursor threaded from one renderer to the next;
2. once the page count is known, each page is selected again and stamped
   with its ``"Page i of N"`` footer.

Examples
--------
>>> from profilereport.core import get_sample_data
>>> from profilereport.surfaces import RecordingSurface
>>> surface = RecordingSurface()
>>> compose(surface, get_sample_data())
>>> surface.page_count
2
"""

import logging

from ..core.document import parse_document
from ..core.layout import LayoutConfig
from ..surfaces import DrawingSurface
from ..types import Document
from .footer import render_footer
from .header import render_header
from .person import render_person
from .sections import render_section

logger = logging.getLogger(__name__)


def compose(surface: DrawingSurface, document, layout: LayoutConfig = None) -> None:
    """
    Lay out `document` on `surface`.

    Parameters
    ----------
    surface : DrawingSurface
        Fresh surface; its first page receives the first document page.
    document : Document or Mapping
        Parsed document or raw payload (parsed with ``parse_document``).
    layout : LayoutConfig, optional
        Layout constants.

    Raises
    ------
    InvalidDocumentError
        If a raw payload has no page list or contains malformed sections.
    """
    layout = layout or LayoutConfig()
    if not isinstance(document, Document):
        document = parse_document(document)

    for index, page in enumerate(document.pages):
        if index > 0:
            surface.new_page()
        render_header(surface, layout)
        y = render_person(
            surface, document.person, index == 0, layout.content_top, layout
        )
        for section in page.sections:
            y = render_section(surface, section, y, layout)
        logger.debug("Page %d laid out, cursor at %.1f", index + 1, y)

    total = document.page_count
    for number in range(1, total + 1):
        surface.select_page(number)
        render_footer(surface, number, total, layout)
