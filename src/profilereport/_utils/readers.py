"""
Configuration reading utilities.

This module provides the cached reader for the JSON configuration files
shipped with profilereport (currently only ``config/messages.json``).

Methods
-------
read_config
    Read and cache JSON configuration files from the package's config directory.
read_messages
    Shortcut returning a single section (``errors`` or ``warnings``) of the
    messages configuration.

Examples
--------
>>> from profilereport._utils import read_config

>>> read_config("messages")["errors"]["invalid_document"]
"Invalid data structure: 'pages' must be a list of pages."
"""

import json
import pathlib
from functools import lru_cache


@lru_cache(maxsize=2)
def read_config(name) -> dict:
    """
    Read and cache JSON configuration files.

    This function reads JSON files from the package's `config/` directory
    and caches the results to avoid repeated file system access.

    Parameters
    ----------
    name : str
        The name of the configuration file (without .json extension).
        File is located at `config/{name}.json` relative to the package root.

    Returns
    -------
    dict
        The parsed JSON content of the configuration file.

    Raises
    ------
    FileNotFoundError
        If the requested configuration file does not exist.

    Notes
    -----
    - The returned dictionary is shared between callers; treat it as
      read-only.
    """
    path = pathlib.Path(__file__).resolve().parent.parent / f"config/{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_messages(section: str = "errors") -> dict:
    """Return one section of ``config/messages.json``."""
    return read_config("messages")[section]
