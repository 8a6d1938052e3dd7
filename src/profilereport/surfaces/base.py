"""
Drawing surface abstraction.

The layout engine draws exclusively through a :class:`DrawingSurface`: a
set of absolute-positioned primitives (text, rectangles, lines, circles,
images), a text measurement call and page management. Coordinates use a
top-left origin in points with ``y`` growing downwards.

Classes
-------
DrawingSurface
    Abstract interface the renderers depend on.
DrawCommand
    One recorded primitive call.
RecordingSurface
    In-memory surface that keeps every primitive per page. Any page can be
    selected again later and drawn on without losing its content.

Functions
---------
resolve_font(font)
    Validate a font name or register a TTF file with ReportLab.

Notes
-----
- A surface is owned by a single render call. Nothing in it is safe to
  share between concurrent renders.
- Text measurement uses ReportLab font metrics, so measured heights match
  what :class:`profilereport.surfaces.reportlab.ReportLabSurface` outputs.

Examples
--------
>>> from profilereport.surfaces import RecordingSurface
>>> surface = RecordingSurface()
>>> surface.draw_text("Hello", 50, 50)
>>> surface.new_page()
>>> surface.select_page(1)
>>> surface.texts(page=1)
['Hello']
"""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .._utils import read_messages

logger = logging.getLogger(__name__)

USER_FONT_NAME = "UserProvidedFont"


def resolve_font(font: str) -> str:
    """
    Return a ReportLab font name for `font`.

    Parameters
    ----------
    font : str
        One of ReportLab's standard fonts (e.g. ``"Helvetica"``), a font
        already registered with ``pdfmetrics``, or a path to a TTF file.
        A TTF file is registered as ``"UserProvidedFont"``.

    Returns
    -------
    str
        Font name usable with ReportLab.

    Raises
    ------
    ValueError
        If `font` is neither a known font name nor an existing file.
    """
    if font in pdfmetrics.standardFonts or font in pdfmetrics.getRegisteredFontNames():
        return font
    if not Path(font).is_file():
        raise ValueError(
            read_messages()["unsupported_font_f"].format(
                font, ", ".join(pdfmetrics.standardFonts)
            )
        )
    pdfmetrics.registerFont(TTFont(USER_FONT_NAME, font))
    logger.info("Using user-provided font from path: %s", font)
    return USER_FONT_NAME


class DrawingSurface(ABC):
    """
    Target of all drawing performed by the renderers.

    Page numbers passed to :meth:`select_page` are 1-based. The first page
    exists as soon as the surface is created.
    """

    @property
    @abstractmethod
    def width(self) -> float:
        """Page width in points."""

    @property
    @abstractmethod
    def height(self) -> float:
        """Page height in points."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages created so far."""

    @abstractmethod
    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float = 10,
        width: Optional[float] = None,
        align: str = "left",
        color: str = "black",
    ) -> None:
        """
        Draw `text` with its top-left corner at ``(x, y)``.

        With `width` the text wraps inside the box ``x .. x + width`` and
        `align` (``"left"``, ``"center"`` or ``"right"``) applies to that box.
        """

    @abstractmethod
    def draw_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        stroke: Optional[str] = "black",
        fill: Optional[str] = None,
        line_width: float = 1,
    ) -> None:
        """Draw a rectangle with its top-left corner at ``(x, y)``."""

    @abstractmethod
    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: str = "black",
        width: float = 1,
    ) -> None:
        """Stroke a straight line."""

    @abstractmethod
    def draw_circle(
        self,
        x: float,
        y: float,
        r: float,
        fill: Optional[str] = "black",
        stroke: Optional[str] = None,
    ) -> None:
        """Draw a circle centered at ``(x, y)``."""

    @abstractmethod
    def draw_image(self, source, x: float, y: float, w: float, h: float) -> None:
        """
        Draw an image resource into the box at ``(x, y)``.

        Raises whatever the image loader raises when `source` is missing or
        cannot be decoded.
        """

    @abstractmethod
    def measure_text_height(
        self, text: str, width: float, size: float = 10
    ) -> float:
        """Height of `text` wrapped at `width`."""

    @abstractmethod
    def new_page(self) -> None:
        """Append a page and make it the current page."""

    @abstractmethod
    def select_page(self, number: int) -> None:
        """Make the existing page `number` (1-based) the current page."""


@dataclass(frozen=True)
class DrawCommand:
    """A primitive call recorded by :class:`RecordingSurface`."""

    op: str
    params: dict = field(default_factory=dict)


class RecordingSurface(DrawingSurface):
    """
    Surface that records primitives per page.

    Parameters
    ----------
    page_size : tuple of float, default=A4
        Page width and height in points.
    font : str, default="Helvetica"
        Font used for measuring (and, in subclasses, drawing) text. See
        :func:`resolve_font`.
    line_height : float, default=1.2
        Line height as a multiple of the font size.

    Attributes
    ----------
    pages : list[list[DrawCommand]]
        Recorded commands, one list per page.
    """

    def __init__(self, page_size=A4, font: str = "Helvetica", line_height: float = 1.2):
        self._width, self._height = float(page_size[0]), float(page_size[1])
        self.font = resolve_font(font)
        self.line_height = line_height
        self.pages: list[list[DrawCommand]] = [[]]
        self._current = 0

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def current_page(self) -> int:
        """1-based number of the page being drawn on."""
        return self._current + 1

    def _record(self, op: str, **params) -> None:
        self.pages[self._current].append(DrawCommand(op, params))

    def wrap_text(self, text: str, width: Optional[float], size: float) -> list[str]:
        """Split `text` into the lines it occupies at `width`."""
        text = str(text)
        if width is None:
            return text.split("\n")
        return simpleSplit(text, self.font, size, width)

    def draw_text(self, text, x, y, size=10, width=None, align="left", color="black"):
        self._record(
            "text",
            text=str(text),
            x=float(x),
            y=float(y),
            size=size,
            width=width,
            align=align,
            color=color,
        )

    def draw_rect(self, x, y, w, h, stroke="black", fill=None, line_width=1):
        self._record(
            "rect",
            x=float(x),
            y=float(y),
            w=float(w),
            h=float(h),
            stroke=stroke,
            fill=fill,
            line_width=line_width,
        )

    def draw_line(self, x1, y1, x2, y2, color="black", width=1):
        self._record(
            "line",
            x1=float(x1),
            y1=float(y1),
            x2=float(x2),
            y2=float(y2),
            color=color,
            width=width,
        )

    def draw_circle(self, x, y, r, fill="black", stroke=None):
        self._record("circle", x=float(x), y=float(y), r=float(r), fill=fill, stroke=stroke)

    def draw_image(self, source, x, y, w, h):
        # decoded here, not at finalize
        if isinstance(source, os.PathLike):
            source = os.fspath(source)
        reader = ImageReader(source)
        self._record(
            "image", image=reader, source=str(source), x=float(x), y=float(y), w=float(w), h=float(h)
        )

    def measure_text_height(self, text, width, size=10):
        return len(self.wrap_text(text, width, size)) * size * self.line_height

    def new_page(self):
        self.pages.append([])
        self._current = len(self.pages) - 1
        logger.debug("Started page %d", self.current_page)

    def select_page(self, number):
        if not 1 <= number <= len(self.pages):
            raise IndexError(
                read_messages()["page_out_of_range_f"].format(number, len(self.pages))
            )
        self._current = number - 1

    def iter_commands(
        self, op: Optional[str] = None, page: Optional[int] = None
    ) -> Iterator[DrawCommand]:
        """
        Iterate over recorded commands.

        Parameters
        ----------
        op : str, optional
            Only commands of this kind (``"text"``, ``"rect"``, ``"line"``,
            ``"circle"``, ``"image"``).
        page : int, optional
            Only commands of this 1-based page.
        """
        pages = self.pages if page is None else [self.pages[page - 1]]
        for commands in pages:
            for command in commands:
                if op is None or command.op == op:
                    yield command

    def texts(self, page: Optional[int] = None) -> list[str]:
        """Text of every recorded ``text`` command, in drawing order."""
        return [c.params["text"] for c in self.iter_commands("text", page)]
