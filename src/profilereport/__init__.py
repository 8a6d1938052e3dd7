"""
profilereport: a layout and charting engine for paginated profile reports.

Features include:
- Parsing of a person/pages/sections payload into an immutable document model
- Absolute-positioned layout of headers, person details, tables and charts
- Chart axis scaling for point-index, category and time/date datasets
- PDF output through ReportLab
- A small HTTP endpoint for on-demand report generation
"""
import logging

from .core import LayoutConfig, get_sample_data, parse_document
from .exceptions import InvalidDocumentError, MissingDirectoryWarning
from .renderers import compose, render_pdf

__version__ = "0.1.0"

__all__ = [
    "InvalidDocumentError",
    "LayoutConfig",
    "MissingDirectoryWarning",
    "compose",
    "get_sample_data",
    "parse_document",
    "render_pdf",
]

logger = logging.getLogger("profilereport")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
