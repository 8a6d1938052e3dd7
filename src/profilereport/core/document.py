"""
Parsing of request payloads into the document model.

The payload is the JSON structure accepted by the report endpoint::

    {
        "person": {"name": "...", "email": "...", ...},
        "pages": [
            {"sections": [
                {"title": "...", "type": "table",
                 "data": [{"key": "...", "value": "..."}, ...]},
                {"title": "...", "type": "chart",
                 "data": {"title": "...", "labels": [...], "max": 10,
                          "datasets": [{"label": "...", "color": "#3498db",
                                        "data": [...]}]}}
            ]}
        ]
    }

Chart points come in three shapes, detected from the first point of the
chart: ``{"timeValue": "HH:MM"}`` (alias ``timeOfDay``), a bare number (or
``{"value": n}``), and ``{"date": "YYYY-MM-DD", "value": n}``.

Functions
---------
parse_document(data)
    Convert a payload (or an already parsed ``Document``) into a ``Document``.
parse_chart(data, section_title)
    Convert the ``data`` of a chart section into a ``ChartSpec``.
is_valid_payload(data)
    True if a payload has a page list (re-exported from ``_utils``).
"""

import logging
from collections.abc import Mapping

from .._utils import (
    convert_date,
    convert_number,
    is_valid_payload,
    read_messages,
    time_to_minutes,
    validate_list,
    validate_mapping,
    validate_payload,
)
from ..exceptions import InvalidDocumentError
from ..types import (
    ChartPoint,
    ChartSpec,
    ChartVariant,
    Dataset,
    Document,
    Page,
    Person,
    Section,
    TableRow,
)

logger = logging.getLogger(__name__)

TIME_KEYS = ("timeValue", "timeOfDay")


def parse_document(data) -> Document:
    """
    Build a ``Document`` from a payload.

    Parameters
    ----------
    data : Mapping or Document
        Raw payload with ``person`` and ``pages``. A ``Document`` is returned
        unchanged.

    Returns
    -------
    Document

    Raises
    ------
    InvalidDocumentError
        If ``pages`` is missing or not a list, or if any page, section,
        table row or chart point is malformed.

    Examples
    --------
    >>> doc = parse_document({"person": {"name": "Ann"}, "pages": [{"sections": []}]})
    >>> doc.page_count
    1
    """
    if isinstance(data, Document):
        return data
    validate_payload(data)
    messages = read_messages()

    person_data = data.get("person") or {}
    if not isinstance(person_data, Mapping):
        person_data = {}
    person = Person(person_data)

    pages = []
    for page_index, page_data in enumerate(data["pages"]):
        # a page without sections is still a page (header, person block, footer)
        if page_data is None:
            pages.append(Page())
            continue
        page_data = validate_mapping(
            page_data, messages["invalid_page_f"].format(page_index)
        )
        sections_data = page_data.get("sections") or []
        validate_list(sections_data, messages["invalid_page_f"].format(page_index))
        sections = tuple(
            _parse_section(section_data, section_index, page_index)
            for section_index, section_data in enumerate(sections_data)
        )
        pages.append(Page(sections=sections))

    document = Document(person=person, pages=tuple(pages))
    logger.debug("Parsed document with %d page(s)", document.page_count)
    return document


def _parse_section(section_data, section_index: int, page_index: int) -> Section:
    err_msg = read_messages()["invalid_section_f"].format(section_index, page_index)
    section_data = validate_mapping(section_data, err_msg)
    title = str(section_data.get("title") or "")
    kind = section_data.get("type", section_data.get("kind"))
    if not isinstance(kind, str):
        raise InvalidDocumentError(err_msg)
    raw = section_data.get("data")

    if kind == "table":
        return Section(title=title, kind=kind, data=_parse_table(raw, title))
    if kind == "chart":
        return Section(title=title, kind=kind, data=parse_chart(raw, title))
    return Section(title=title, kind=kind, data=raw)


def _parse_table(raw, section_title: str) -> tuple[TableRow, ...]:
    messages = read_messages()
    if raw is None:
        return ()
    validate_list(raw, messages["invalid_table_row_f"].format(0, section_title))
    rows = []
    for i, row in enumerate(raw):
        row = validate_mapping(
            row, messages["invalid_table_row_f"].format(i, section_title)
        )
        value = row.get("value")
        rows.append(
            TableRow(
                key=str(row.get("key", "")),
                value="" if value is None else str(value),
            )
        )
    return tuple(rows)


def parse_chart(raw, section_title: str = "") -> ChartSpec:
    """
    Build a ``ChartSpec`` from the ``data`` of a chart section.

    Parameters
    ----------
    raw : Mapping
        Mapping with ``title``, ``datasets`` and optionally ``labels`` and
        ``max``.
    section_title : str, default=""
        Used in error messages only.

    Returns
    -------
    ChartSpec

    Raises
    ------
    InvalidDocumentError
        If ``datasets`` is missing, a point cannot be converted, or points of
        different shapes are mixed.
    """
    messages = read_messages()
    err_msg = messages["invalid_chart_f"].format(section_title)
    raw = validate_mapping(raw, err_msg)
    title = str(raw.get("title") or "")
    datasets_data = validate_list(raw.get("datasets"), err_msg)

    variant = None
    datasets = []
    for dataset_data in datasets_data:
        dataset_data = validate_mapping(dataset_data, err_msg)
        points = []
        for point_data in validate_list(dataset_data.get("data") or [], err_msg):
            point = _parse_point(point_data)
            if variant is None:
                variant = point.variant
            elif point.variant is not variant:
                raise InvalidDocumentError(
                    messages["mixed_points_f"].format(title, variant.value)
                )
            points.append(point)
        datasets.append(
            Dataset(
                label=str(dataset_data.get("label") or ""),
                color=str(dataset_data.get("color") or "black"),
                points=tuple(points),
            )
        )

    labels = raw.get("labels") or ()
    validate_list(labels, err_msg)
    y_max = raw.get("max")
    return ChartSpec(
        title=title,
        datasets=tuple(datasets),
        variant=variant or ChartVariant.CATEGORY,
        labels=tuple(str(label) for label in labels),
        y_max=None if y_max is None else convert_number(y_max),
    )


def _parse_point(point_data) -> ChartPoint:
    if isinstance(point_data, Mapping):
        for key in TIME_KEYS:
            if key in point_data:
                return ChartPoint(minutes=time_to_minutes(point_data[key]))
        if "date" in point_data:
            return ChartPoint(
                date=convert_date(point_data["date"]),
                value=convert_number(point_data.get("value")),
            )
        if "value" in point_data:
            return ChartPoint(value=convert_number(point_data["value"]))
        raise InvalidDocumentError(
            read_messages()["unknown_point_f"].format(point_data)
        )
    return ChartPoint(value=convert_number(point_data))
