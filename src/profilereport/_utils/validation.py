"""
Payload shape checks.

Methods
-------
is_valid_payload(data)
    Minimal shape check used to decide between caller data and the sample.
validate_payload(data)
    Same check, raising ``InvalidDocumentError`` on failure.
validate_mapping(value, err_msg)
    Ensure a payload node is a mapping.
"""

from collections.abc import Mapping, Sequence

from ..exceptions import InvalidDocumentError
from .readers import read_messages


def _is_list_like(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def is_valid_payload(data) -> bool:
    """
    Return True if `data` has a ``pages`` field holding a list of pages.

    Both raw mappings and objects exposing a ``pages`` attribute (a parsed
    ``Document``) are accepted.
    """
    if data is None:
        return False
    if isinstance(data, Mapping):
        pages = data.get("pages")
    else:
        pages = getattr(data, "pages", None)
    return _is_list_like(pages)


def validate_payload(data) -> None:
    """
    Raise ``InvalidDocumentError`` unless `data` passes `is_valid_payload`.
    """
    if not is_valid_payload(data):
        raise InvalidDocumentError(read_messages()["invalid_document"])


def validate_mapping(value, err_msg: str) -> Mapping:
    """Return `value` if it is a mapping, raise ``InvalidDocumentError`` otherwise."""
    if not isinstance(value, Mapping):
        raise InvalidDocumentError(err_msg)
    return value


def validate_list(value, err_msg: str) -> Sequence:
    """Return `value` if it is a non-string sequence, raise otherwise."""
    if not _is_list_like(value):
        raise InvalidDocumentError(err_msg)
    return value
