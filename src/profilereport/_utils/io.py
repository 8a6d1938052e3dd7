"""
Filesystem helpers used when a rendered report is saved to disk.

Functions
---------
convert_filepath(path, default_filename)
    Turn a directory path into a file path by appending a default file name.
validate_path(path, suffix=None, overwrite_check=True, dir_exists_check=True,
              have_permissions_check=True)
    Pre-flight checks before writing a report file.
enable_io_logs(logger)
    Decorator that logs I/O failures through the given logger and re-raises.

Notes
-----
- Only `enable_io_logs`-decorated callers touch the filesystem;
  `convert_filepath` and `validate_path` never create anything.

Examples
--------
>>> from profilereport._utils.io import convert_filepath, validate_path
>>> target = convert_filepath("out", "report.pdf")
>>> target
PosixPath('out/report.pdf')
>>> validate_path(target, suffix=".pdf", overwrite_check=False)
"""

import os
import logging
import warnings
from pathlib import Path
from typing import Callable, Optional
import functools

from ..exceptions import MissingDirectoryWarning
from .readers import read_messages

logger = logging.getLogger(__name__)

# checked in order, the first matching class names the failure
_IO_FAILURES = (
    (PermissionError, "Permission denied"),
    (FileExistsError, "File already exists"),
    (Exception, "Unexpected IO error"),
)


def convert_filepath(path: str | Path, default_filename: str) -> Path:
    """
    Return `path` as a file path.

    A path without a suffix is treated as a directory and `default_filename`
    is appended to it; a path with a suffix is returned unchanged.

    Parameters
    ----------
    path : str or Path
        Directory or file path.
    default_filename : str
        File name appended when `path` is a directory.

    Returns
    -------
    Path
    """
    path_pl = Path(path)
    if path_pl.suffix == "":
        return path_pl / default_filename
    return path_pl


def _closest_existing(path: Path) -> Optional[Path]:
    for candidate in (path, *path.parents):
        if candidate.exists():
            return candidate
    return None


def validate_path(
    path: str | Path,
    suffix: Optional[str] = None,
    overwrite_check: bool = True,
    dir_exists_check: bool = True,
    have_permissions_check: bool = True,
):
    """
    Validate the target file of a report before it is written.

    Parameters
    ----------
    path : str or Path
        File path; its parent directory is the one that gets created.
    suffix : str, optional
        Required file extension, e.g. ``".pdf"``. Not checked when None.
    overwrite_check : bool, default=True
        Raise ``FileExistsError`` if `path` already exists.
    dir_exists_check : bool, default=True
        Emit a :class:`~profilereport.exceptions.MissingDirectoryWarning` if
        the parent directory does not exist yet.
    have_permissions_check : bool, default=True
        Raise ``PermissionError`` if the closest existing ancestor of `path`
        is not writable.

    Raises
    ------
    ValueError
        `path` does not end with `suffix`, or no existing ancestor could be
        found to check permissions on.
    FileExistsError
        `overwrite_check` is set and the path exists.
    PermissionError
        The closest existing ancestor is not writable.

    Warns
    -----
    MissingDirectoryWarning
        The target directory does not exist.
    """
    errors = read_messages()
    path_pl = Path(path)

    if suffix is not None and path_pl.suffix != suffix:
        raise ValueError(errors["invalid_suffix_f"].format(suffix, path_pl))
    if overwrite_check and path_pl.exists():
        raise FileExistsError(errors["path_exists_f"].format(path_pl))
    if dir_exists_check and not path_pl.parent.exists():
        warnings.warn(
            read_messages("warnings")["missing_directory_f"].format(path_pl.parent),
            MissingDirectoryWarning,
            stacklevel=2,
        )
    if have_permissions_check:
        anchor = _closest_existing(path_pl)
        if anchor is None:
            raise ValueError(errors["unverifiable_path_f"].format(path))
        if not os.access(anchor, os.W_OK):
            raise PermissionError(errors["no_write_permission_f"].format(anchor))


def enable_io_logs(io_logger: logging.Logger = None) -> Callable:
    """
    Decorator factory that logs I/O errors with `io_logger` and re-raises them.

    Exceptions raised by the wrapped function are logged at ERROR level,
    labeled by kind (permission, existing file, anything else), and
    re-raised unchanged. A :class:`MissingDirectoryWarning` raised inside the
    function is mirrored into the log at WARNING level. Every warning is
    re-emitted afterwards so warning filters and tests still see it.

    Parameters
    ----------
    io_logger : logging.Logger, optional
        Logger to report through. Defaults to this module's logger.

    Examples
    --------
    >>> @enable_io_logs(logging.getLogger("profilereport.renderers.pdf"))
    ... def save(data, path):
    ...     Path(path).write_bytes(data)
    """
    io_logger = io_logger or logger

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            caught = []
            try:
                with warnings.catch_warnings(record=True) as caught:
                    warnings.simplefilter("always")
                    return fn(*args, **kwargs)
            except Exception as e:
                label = next(name for kind, name in _IO_FAILURES if isinstance(e, kind))
                io_logger.error("%s in %s: %s", label, fn.__name__, e)
                raise
            finally:
                for w in caught:
                    if issubclass(w.category, MissingDirectoryWarning):
                        io_logger.warning("Captured warning in %s: %s", fn.__name__, w.message)
                    warnings.warn(w.message, category=w.category, stacklevel=2)

        return wrapper

    return decorator
