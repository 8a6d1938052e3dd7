"""
Conversion helpers for chart domain values.

Chart payloads carry clock times as ``"HH:MM"`` strings and calendar dates
as ISO ``"YYYY-MM-DD"`` strings. The axis strategies work on plain numbers,
so these helpers convert in both directions.

Methods
-------
time_to_minutes(value)
    Convert ``"HH:MM"`` into minutes since midnight.
minutes_to_time(minutes)
    Format minutes since midnight as ``"HH:MM"``.
convert_date(value)
    Convert an ISO date string (or a ``date``/``datetime``) into a ``date``.
convert_number(value)
    Convert a chart value into ``float``.
format_number(value)
    Short label for a plotted value.

Examples
--------
>>> time_to_minutes("09:15")
555
>>> minutes_to_time(555)
'09:15'
>>> convert_date("2024-03-01").toordinal()
738946
"""

import datetime
import math
from numbers import Number

from ..exceptions import InvalidDocumentError
from .readers import read_messages


def time_to_minutes(value: str) -> int:
    """
    Convert a clock time ``"HH:MM"`` into minutes since midnight.

    Raises
    ------
    InvalidDocumentError
        If `value` is not a ``HH:MM`` string with hours in 0–23 and
        minutes in 0–59.
    """
    err_msg = read_messages()["invalid_time_f"].format(value)
    if not isinstance(value, str):
        raise InvalidDocumentError(err_msg)
    parts = value.strip().split(":")
    if len(parts) != 2:
        raise InvalidDocumentError(err_msg)
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise InvalidDocumentError(err_msg) from e
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise InvalidDocumentError(err_msg)
    return hours * 60 + minutes


def minutes_to_time(minutes: float) -> str:
    """Format minutes since midnight as a zero-padded ``"HH:MM"`` label."""
    minutes = int(round(minutes))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def convert_date(value) -> datetime.date:
    """
    Convert `value` into a ``datetime.date``.

    Accepts ``date`` and ``datetime`` objects as well as ISO formatted
    strings; a time component in the string is ignored.

    Raises
    ------
    InvalidDocumentError
        If `value` cannot be parsed.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    err_msg = read_messages()["invalid_date_f"].format(value)
    if not isinstance(value, str):
        raise InvalidDocumentError(err_msg)
    try:
        return datetime.date.fromisoformat(value.strip()[:10])
    except ValueError as e:
        raise InvalidDocumentError(err_msg) from e


def convert_number(value) -> float:
    """
    Convert a chart value into ``float``.

    Numeric strings are accepted; booleans, NaN, infinities and everything else are
    rejected.

    Raises
    ------
    InvalidDocumentError
        If `value` is not numeric.
    """
    err_msg = read_messages()["invalid_value_f"].format(value)
    if isinstance(value, bool):
        raise InvalidDocumentError(err_msg)
    if isinstance(value, Number):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value)
        except ValueError as e:
            raise InvalidDocumentError(err_msg) from e
    else:
        raise InvalidDocumentError(err_msg)
    if not math.isfinite(result):
        raise InvalidDocumentError(err_msg)
    return result


def format_number(value: float) -> str:
    """Render integers without a decimal part and other values with up to 2 decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")
