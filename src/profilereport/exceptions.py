"""
Exceptions raised by profilereport.

Classes
-------
InvalidDocumentError
    Raised when a payload cannot be turned into a renderable document.
MissingDirectoryWarning
    Emitted before a report is saved into a directory that does not exist.
"""


class InvalidDocumentError(ValueError):
    """
    The payload does not describe a renderable document.

    Raised when ``pages`` is missing or is not a list, or when a page,
    section, table row or chart point has an unexpected shape. Subclasses
    ``ValueError`` so callers that only care about bad input can catch the
    builtin.
    """


class MissingDirectoryWarning(UserWarning):
    """The directory a report is saved to does not exist yet and will be created."""
