"""
Core (low-level) module of profilereport.

Contains the layout constants, payload parsing, the built-in sample
document and the chart axis strategies. Nothing here draws; the renderers
in :mod:`profilereport.renderers` consume these objects.

Classes
-------
LayoutConfig
    Named layout constants (positions, sizes, thresholds).
AxisScale, IndexScale, NumericScale, TimeOfDayScale, DateScale
    Axis-mapping strategies.
ChartMapping
    Scales and normalized series resolved for one chart.

Functions
---------
parse_document(data)
    Turn a payload into a ``Document``.
parse_chart(data, section_title)
    Turn chart section data into a ``ChartSpec``.
is_valid_payload(data)
    Minimal shape check deciding between caller data and the sample.
build_chart_mapping(chart, ...)
    Resolve the axis strategies of a chart.
get_sample_data()
    The built-in two-page sample payload.
"""

from .layout import LayoutConfig
from .document import is_valid_payload, parse_document, parse_chart
from .samples import get_sample_data
from .axes import (
    AxisScale,
    ChartMapping,
    DateScale,
    IndexScale,
    NumericScale,
    Tick,
    TimeOfDayScale,
    build_chart_mapping,
    thinning_stride,
)

__all__ = [
    "LayoutConfig",
    "is_valid_payload",
    "parse_document",
    "parse_chart",
    "get_sample_data",
    "AxisScale",
    "ChartMapping",
    "DateScale",
    "IndexScale",
    "NumericScale",
    "Tick",
    "TimeOfDayScale",
    "build_chart_mapping",
    "thinning_stride",
]
