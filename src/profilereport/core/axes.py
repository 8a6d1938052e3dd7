"""
Axis-mapping strategies for charts.

A chart plots every dataset against one shared x domain and one shared
y domain. Each domain type is handled by an :class:`AxisScale`:

- :class:`IndexScale`: ordinal point position (``P1..Pn`` or caller
  supplied category labels),
- :class:`NumericScale`: plain numeric values,
- :class:`TimeOfDayScale`: clock times as minutes since midnight,
- :class:`DateScale`: calendar dates as proleptic Gregorian ordinals.

Every scale maps domain values to normalized positions in ``[0, 1]`` and
produces its own tick labels. :func:`build_chart_mapping` picks the pair of
scales for a chart's variant and pre-computes the normalized series, so the
chart renderer only has to scale by the chart area.

Functions
---------
build_chart_mapping(chart, x_target=8, date_target=6, y_intervals=6)
    Resolve the scales and normalized series of a ``ChartSpec``.

Notes
-----
- A domain of zero width (a single x position, or identical y values)
  maps every value to the midpoint ``0.5``.
- Normalized positions are clipped to ``[0, 1]``; values above an explicit
  ``y_max`` are drawn on the top edge of the chart area.

Examples
--------
>>> import numpy as np
>>> scale = IndexScale(12, target=8)
>>> [t.label for t in scale.ticks()]
['P1', 'P3', 'P5', 'P7', 'P9', 'P11']
>>> TimeOfDayScale(540, 600).normalize([540, 570, 600]).tolist()
[0.0, 0.5, 1.0]
"""

import datetime
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .._utils import format_number, minutes_to_time
from ..types import ChartSpec, ChartVariant


@dataclass(frozen=True)
class Tick:
    """A labeled position on an axis, ``position`` normalized to ``[0, 1]``."""

    position: float
    label: str


def _linear(values, lo: float, hi: float) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    span = hi - lo
    if span == 0:
        return np.full(values.shape, 0.5)
    return np.clip((values - lo) / span, 0.0, 1.0)


def thinning_stride(count: int, target: int) -> int:
    """
    Stride that keeps at most `target` labels out of `count` positions.

    Examples
    --------
    >>> thinning_stride(12, 8)
    2
    >>> thinning_stride(5, 8)
    1
    """
    if count <= 0 or target <= 0:
        return 1
    return max(1, math.ceil(count / target))


class AxisScale(ABC):
    """Maps domain values to ``[0, 1]`` and labels the axis."""

    kind: str = ""

    @abstractmethod
    def normalize(self, values) -> np.ndarray:
        """Map domain values to normalized positions."""

    @abstractmethod
    def ticks(self) -> list[Tick]:
        """Positions and labels to draw along the axis."""


class IndexScale(AxisScale):
    """
    Ordinal scale over point positions ``0..count-1``.

    Parameters
    ----------
    count : int
        Number of positions on the axis.
    labels : Sequence[str], optional
        Explicit category labels, one per position. Without them the axis
        is labeled ``P1..Pn``.
    target : int, default=8
        Upper bound of drawn labels; both explicit and generated labels
        are thinned with the same stride.
    """

    kind = "index"

    def __init__(self, count: int, labels: Sequence[str] = (), target: int = 8):
        self.count = count
        self.labels = tuple(labels)
        self.target = target

    def normalize(self, values) -> np.ndarray:
        return _linear(values, 0, max(self.count - 1, 0))

    def ticks(self) -> list[Tick]:
        if self.count <= 0:
            return []
        stride = thinning_stride(self.count, self.target)
        if self.labels:
            indices = range(0, min(self.count, len(self.labels)), stride)
            names = self.labels
        else:
            indices = range(0, self.count, stride)
            names = [f"P{i + 1}" for i in range(self.count)]
        positions = self.normalize(list(indices))
        return [Tick(float(p), names[i]) for p, i in zip(positions, indices)]


class NumericScale(AxisScale):
    """
    Linear scale over ``[lo, hi]`` with ``n_intervals + 1`` evenly spaced ticks.
    """

    kind = "numeric"

    def __init__(self, lo: float, hi: float, n_intervals: int = 6):
        self.lo = float(lo)
        self.hi = float(hi)
        self.n_intervals = n_intervals

    def normalize(self, values) -> np.ndarray:
        return _linear(values, self.lo, self.hi)

    def _format(self, value: float) -> str:
        return format_number(round(value, 2))

    def ticks(self) -> list[Tick]:
        if self.hi == self.lo:
            return [Tick(0.5, self._format(self.lo))]
        values = np.linspace(self.lo, self.hi, self.n_intervals + 1)
        return [
            Tick(float(p), self._format(v))
            for p, v in zip(self.normalize(values), values)
        ]


class TimeOfDayScale(NumericScale):
    """
    Scale over minutes since midnight.

    Ticks start at `lo` and advance by ``ceil((hi - lo) / n_intervals)``
    minutes, so labels stay on whole minutes; ticks past `hi` are dropped.
    """

    kind = "time"

    def _format(self, value: float) -> str:
        return minutes_to_time(value)

    def ticks(self) -> list[Tick]:
        if self.hi == self.lo:
            return [Tick(0.5, self._format(self.lo))]
        step = math.ceil((self.hi - self.lo) / self.n_intervals)
        values = [
            self.lo + i * step
            for i in range(self.n_intervals + 1)
            if self.lo + i * step <= self.hi
        ]
        return [
            Tick(float(p), self._format(v))
            for p, v in zip(self.normalize(values), values)
        ]


class DateScale(AxisScale):
    """
    Scale over calendar dates given as ``date.toordinal()`` numbers.

    Labels are placed on the distinct dates present in the data, thinned to
    at most `target` entries, and formatted as ISO dates.
    """

    kind = "date"

    def __init__(self, ordinals: Sequence[int], target: int = 6):
        self.ordinals = sorted({int(o) for o in ordinals})
        self.target = target
        self.lo = self.ordinals[0] if self.ordinals else 0
        self.hi = self.ordinals[-1] if self.ordinals else 0

    def normalize(self, values) -> np.ndarray:
        return _linear(values, self.lo, self.hi)

    def ticks(self) -> list[Tick]:
        if not self.ordinals:
            return []
        selected = self.ordinals[:: thinning_stride(len(self.ordinals), self.target)]
        return [
            Tick(float(p), datetime.date.fromordinal(o).isoformat())
            for p, o in zip(self.normalize(selected), selected)
        ]


@dataclass
class ChartMapping:
    """
    Resolved scales and normalized series of one chart.

    Attributes
    ----------
    x_scale, y_scale : AxisScale
        Scales of the horizontal and vertical axis.
    series : list[tuple[numpy.ndarray, numpy.ndarray]]
        Normalized ``(x, y)`` positions per dataset, in dataset order.
    value_labels : list[list[str]] or None
        Text drawn next to each point, per dataset; None when the variant
        does not annotate points.
    x_title, y_title : str
        Axis titles.
    """

    x_scale: AxisScale
    y_scale: AxisScale
    series: list = field(default_factory=list)
    value_labels: Optional[list] = None
    x_title: str = ""
    y_title: str = ""


def _value_scale(chart: ChartSpec, values: np.ndarray, y_intervals: int) -> NumericScale:
    if chart.y_max is not None:
        return NumericScale(0, chart.y_max, y_intervals)
    return NumericScale(values.min(), values.max(), y_intervals)


def build_chart_mapping(
    chart: ChartSpec,
    x_target: int = 8,
    date_target: int = 6,
    y_intervals: int = 6,
) -> Optional[ChartMapping]:
    """
    Select the axis strategies for `chart` and normalize its datasets.

    Parameters
    ----------
    chart : ChartSpec
        Parsed chart data.
    x_target : int, default=8
        Upper bound of labels on an index axis.
    date_target : int, default=6
        Upper bound of labels on a date axis.
    y_intervals : int, default=6
        Number of intervals between value/time axis labels.

    Returns
    -------
    ChartMapping or None
        None when no dataset has any point.

    Notes
    -----
    - ``TIME`` charts: x is the point index, y the time of day.
    - ``CATEGORY`` charts: x is the point index labeled with the chart's
      ``labels`` (or ``P1..Pn``), y the value; each point is annotated with
      its value.
    - ``DATE`` charts: x is the date, y the value.
    """
    if chart.point_count == 0:
        return None
    datasets = chart.datasets

    if chart.variant is ChartVariant.DATE:
        xs = [np.array([p.date.toordinal() for p in d.points], dtype=float) for d in datasets]
        ys = [np.array([p.value for p in d.points], dtype=float) for d in datasets]
        x_scale = DateScale(np.concatenate(xs), target=date_target)
        y_scale = _value_scale(chart, np.concatenate(ys), y_intervals)
        value_labels = None
        x_title, y_title = "Date", "Value"
    elif chart.variant is ChartVariant.TIME:
        xs = [np.arange(len(d.points), dtype=float) for d in datasets]
        ys = [np.array([p.minutes for p in d.points], dtype=float) for d in datasets]
        x_scale = IndexScale(chart.point_count, target=x_target)
        all_minutes = np.concatenate(ys)
        y_scale = TimeOfDayScale(all_minutes.min(), all_minutes.max(), y_intervals)
        value_labels = None
        x_title, y_title = "Data Points", "Time"
    else:
        xs = [np.arange(len(d.points), dtype=float) for d in datasets]
        ys = [np.array([p.value for p in d.points], dtype=float) for d in datasets]
        x_scale = IndexScale(chart.point_count, labels=chart.labels, target=x_target)
        y_scale = _value_scale(chart, np.concatenate(ys), y_intervals)
        value_labels = [[format_number(v) for v in y] for y in ys]
        x_title = "Category" if chart.labels else "Data Points"
        y_title = "Value"

    series = [(x_scale.normalize(x), y_scale.normalize(y)) for x, y in zip(xs, ys)]
    return ChartMapping(
        x_scale=x_scale,
        y_scale=y_scale,
        series=series,
        value_labels=value_labels,
        x_title=x_title,
        y_title=y_title,
    )
