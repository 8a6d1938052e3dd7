"""
Document model used throughout profilereport.

The layout engine never reads the raw request payload. Payloads are parsed
once into the frozen dataclasses below (see
:func:`profilereport.core.document.parse_document`) and the renderers only
read them.

Classes
-------
Person
    Read-only mapping of profile fields to display strings.
TableRow
    One key/value row of a table section.
ChartPoint
    A single plotted point; exactly one of three shapes is populated.
ChartVariant
    Tag telling which point shape (and therefore which axis strategy) a
    chart uses.
Dataset
    A labeled, colored series of chart points.
ChartSpec
    A chart section's data: title, datasets, optional category labels and
    an optional explicit y maximum.
Section
    A titled table or chart block on a page.
Page
    Ordered sections.
Document
    The person and the ordered pages.

Notes
-----
- Pages have no identity beyond their position in ``Document.pages``.
- ``Dataset.color`` is an opaque token handed to the drawing surface.

Examples
--------
>>> from profilereport.types import Document, Page, Section, TableRow, Person
>>> doc = Document(
...     person=Person({"name": "John Smith"}),
...     pages=(Page(sections=(Section("Info", "table", (TableRow("a", "b"),)),)),),
... )
>>> doc.person.display("email")
'N/A'
"""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

MISSING_VALUE = "N/A"


class Person:
    """
    Read-only view over the profile fields of a report.

    Parameters
    ----------
    fields : Mapping[str, Any], optional
        Field name to value. Values are converted to ``str`` on display.

    Examples
    --------
    >>> person = Person({"name": "John Smith", "email": ""})
    >>> person.display("name")
    'John Smith'
    >>> person.display("email")
    'N/A'
    """

    def __init__(self, fields: Optional[Mapping[str, Any]] = None):
        self._fields = MappingProxyType(dict(fields or {}))

    @property
    def fields(self) -> Mapping[str, Any]:
        return self._fields

    def display(self, name: str) -> str:
        """Return the display string for `name`, ``"N/A"`` if absent or empty."""
        value = self._fields.get(name)
        if value is None or value == "":
            return MISSING_VALUE
        return str(value)

    def __eq__(self, other):
        return isinstance(other, Person) and dict(self._fields) == dict(other._fields)

    def __repr__(self):
        return f"Person({dict(self._fields)!r})"


@dataclass(frozen=True)
class TableRow:
    key: str
    value: str


class ChartVariant(str, Enum):
    """Point shape of a chart."""

    TIME = "time"
    CATEGORY = "category"
    DATE = "date"


@dataclass(frozen=True)
class ChartPoint:
    """
    A single chart point.

    Exactly one shape is populated:

    - ``TIME``: ``minutes`` (minutes since midnight of a ``"HH:MM"`` value),
    - ``CATEGORY``: ``value``,
    - ``DATE``: ``date`` and ``value``.
    """

    minutes: Optional[int] = None
    date: Optional[datetime.date] = None
    value: Optional[float] = None

    @property
    def variant(self) -> ChartVariant:
        if self.minutes is not None:
            return ChartVariant.TIME
        if self.date is not None:
            return ChartVariant.DATE
        return ChartVariant.CATEGORY


@dataclass(frozen=True)
class Dataset:
    label: str
    color: str
    points: tuple[ChartPoint, ...] = ()


@dataclass(frozen=True)
class ChartSpec:
    """
    Data of a chart section.

    Attributes
    ----------
    title : str
        Chart title drawn above the chart area.
    datasets : tuple[Dataset, ...]
        Plotted series, in legend order.
    variant : ChartVariant
        Point shape shared by every dataset.
    labels : tuple[str, ...]
        Category labels for the x axis (``CATEGORY`` charts only).
    y_max : float or None
        Explicit maximum of the value axis. When set the value domain is
        ``[0, y_max]``.
    """

    title: str
    datasets: tuple[Dataset, ...] = ()
    variant: ChartVariant = ChartVariant.CATEGORY
    labels: tuple[str, ...] = ()
    y_max: Optional[float] = None

    @property
    def point_count(self) -> int:
        """Largest number of points of any dataset."""
        return max((len(d.points) for d in self.datasets), default=0)


@dataclass(frozen=True)
class Section:
    """
    A titled block on a page.

    ``kind`` is ``"table"`` or ``"chart"``; other kinds are kept so the
    dispatcher can skip them. ``data`` is a tuple of ``TableRow`` for tables,
    a ``ChartSpec`` for charts and the raw payload value otherwise.
    """

    title: str
    kind: str
    data: Union[tuple[TableRow, ...], ChartSpec, Any] = ()


@dataclass(frozen=True)
class Page:
    sections: tuple[Section, ...] = ()


@dataclass(frozen=True)
class Document:
    person: Person = field(default_factory=Person)
    pages: tuple[Page, ...] = ()

    @property
    def page_count(self) -> int:
        return len(self.pages)
