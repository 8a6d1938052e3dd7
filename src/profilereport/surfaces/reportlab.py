"""
ReportLab-backed drawing surface.

:class:`ReportLabSurface` records primitives like
:class:`~profilereport.surfaces.base.RecordingSurface` and replays them onto a
``reportlab.pdfgen.canvas.Canvas`` when :meth:`ReportLabSurface.finalize` is
called. Recording first is what allows the footer pass to go back to an
already drawn page: a ReportLab canvas itself can only append pages.

Examples
--------
>>> from profilereport.surfaces import ReportLabSurface
>>> surface = ReportLabSurface(title="Report")
>>> surface.draw_text("Hello", 50, 50, size=12)
>>> pdf_bytes = surface.finalize()
>>> pdf_bytes[:5]
b'%PDF-'
"""

import logging
from io import BytesIO
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .._utils import read_messages
from .base import DrawCommand, RecordingSurface

logger = logging.getLogger(__name__)


class ReportLabSurface(RecordingSurface):
    """
    Surface producing PDF bytes through ReportLab.

    Parameters
    ----------
    page_size : tuple of float, default=A4
        Page width and height in points.
    font : str, default="Helvetica"
        Standard font name or path to a TTF file.
    title : str, optional
        PDF document title metadata.
    line_height : float, default=1.2
        Line height as a multiple of the font size.
    """

    def __init__(
        self,
        page_size=A4,
        font: str = "Helvetica",
        title: Optional[str] = None,
        line_height: float = 1.2,
    ):
        super().__init__(page_size=page_size, font=font, line_height=line_height)
        self.title = title
        self._unknown_colors = set()

    def finalize(self) -> bytes:
        """
        Render every recorded page and return the PDF document.

        Returns
        -------
        bytes
            The PDF document.

        Notes
        -----
        Color tokens ReportLab does not understand are drawn in black; each
        such token is reported once per surface with a warning.
        """
        buffer = BytesIO()
        try:
            c = canvas.Canvas(buffer, pagesize=(self.width, self.height))
            if self.title:
                c.setTitle(self.title)
            for number, commands in enumerate(self.pages, start=1):
                for command in commands:
                    self._replay(c, command)
                c.showPage()
                logger.debug("Page %d written with %d commands", number, len(commands))
            c.save()
            return buffer.getvalue()
        finally:
            buffer.close()

    def _flip(self, y: float) -> float:
        return self.height - y

    def _color(self, value):
        try:
            return colors.toColor(value)
        except ValueError:
            if value not in self._unknown_colors:
                self._unknown_colors.add(value)
                logger.warning(read_messages("warnings")["unknown_color_f"].format(value))
            return colors.black

    def _replay(self, c: canvas.Canvas, command: DrawCommand) -> None:
        p = command.params
        c.saveState()
        try:
            if command.op == "text":
                self._replay_text(c, p)
            elif command.op == "rect":
                if p["stroke"] is not None:
                    c.setStrokeColor(self._color(p["stroke"]))
                    c.setLineWidth(p["line_width"])
                if p["fill"] is not None:
                    c.setFillColor(self._color(p["fill"]))
                c.rect(
                    p["x"],
                    self._flip(p["y"] + p["h"]),
                    p["w"],
                    p["h"],
                    stroke=int(p["stroke"] is not None),
                    fill=int(p["fill"] is not None),
                )
            elif command.op == "line":
                c.setStrokeColor(self._color(p["color"]))
                c.setLineWidth(p["width"])
                c.line(p["x1"], self._flip(p["y1"]), p["x2"], self._flip(p["y2"]))
            elif command.op == "circle":
                if p["fill"] is not None:
                    c.setFillColor(self._color(p["fill"]))
                if p["stroke"] is not None:
                    c.setStrokeColor(self._color(p["stroke"]))
                c.circle(
                    p["x"],
                    self._flip(p["y"]),
                    p["r"],
                    stroke=int(p["stroke"] is not None),
                    fill=int(p["fill"] is not None),
                )
            elif command.op == "image":
                c.drawImage(
                    p["image"],
                    p["x"],
                    self._flip(p["y"] + p["h"]),
                    width=p["w"],
                    height=p["h"],
                    preserveAspectRatio=True,
                    mask="auto",
                )
            else:
                raise ValueError(f"Unsupported draw command '{command.op}'")
        finally:
            c.restoreState()

    def _replay_text(self, c: canvas.Canvas, p: dict) -> None:
        size = p["size"]
        c.setFont(self.font, size)
        c.setFillColor(self._color(p["color"]))
        ascent = pdfmetrics.getAscent(self.font, size)
        leading = size * self.line_height
        for i, line in enumerate(self.wrap_text(p["text"], p["width"], size)):
            baseline = self._flip(p["y"] + i * leading + ascent)
            if p["width"] is None or p["align"] == "left":
                c.drawString(p["x"], baseline, line)
            elif p["align"] == "center":
                c.drawCentredString(p["x"] + p["width"] / 2, baseline, line)
            else:
                c.drawRightString(p["x"] + p["width"], baseline, line)
