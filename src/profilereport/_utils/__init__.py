"""
Internal utilities for profilereport.

Methods
-------
temp_log_level(logger, level)
    Run a block with a logger switched to another level.
log_context(logger, verbose, debug)
    Logging context for the ``verbose``/``debug`` flags of entry points.
read_config(name)
    Read and cache JSON configuration files.
read_messages(section)
    One section of the messages configuration.
convert_filepath(path, default_filename)
    Ensure a given path always points to a file.
validate_path(path, suffix=None, overwrite_check=True, dir_exists_check=True,
              have_permissions_check=True)
    Validate a filesystem path before writing.
enable_io_logs(logger)
    Decorator logging I/O errors and re-raising them.
time_to_minutes, minutes_to_time, convert_date, convert_number, format_number
    Chart domain conversions.
is_valid_payload, validate_payload, validate_mapping, validate_list
    Payload shape checks.

Notes
-----
- These utilities are internal and may change without notice.
"""

from .helpers import temp_log_level, log_context
from .readers import read_config, read_messages
from .io import enable_io_logs, validate_path, convert_filepath
from .conversion import (
    time_to_minutes,
    minutes_to_time,
    convert_date,
    convert_number,
    format_number,
)
from .validation import (
    is_valid_payload,
    validate_payload,
    validate_mapping,
    validate_list,
)

__all__ = [
    "temp_log_level",
    "log_context",
    "read_config",
    "read_messages",
    "enable_io_logs",
    "validate_path",
    "convert_filepath",
    "time_to_minutes",
    "minutes_to_time",
    "convert_date",
    "convert_number",
    "format_number",
    "is_valid_payload",
    "validate_payload",
    "validate_mapping",
    "validate_list",
]
