"""
Drawing surfaces for profilereport.

Classes
-------
DrawingSurface
    Abstract primitives the renderers draw through.
DrawCommand
    A recorded primitive call.
RecordingSurface
    In-memory surface keeping commands per page.
ReportLabSurface
    Recording surface that writes a PDF with ReportLab on ``finalize()``.
"""

from .base import DrawCommand, DrawingSurface, RecordingSurface, resolve_font
from .reportlab import ReportLabSurface

__all__ = [
    "DrawCommand",
    "DrawingSurface",
    "RecordingSurface",
    "ReportLabSurface",
    "resolve_font",
]
