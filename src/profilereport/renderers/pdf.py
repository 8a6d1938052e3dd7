"""
PDF rendering entry point.

This module turns a report payload into PDF bytes: the payload is parsed,
laid out by :func:`profilereport.renderers.composer.compose` on a
:class:`~profilereport.surfaces.ReportLabSurface` and the recorded pages are
written with ReportLab. The result can optionally be saved to disk.

Functions
---------
render_pdf(data, path, font, layout, fallback_to_sample, **kwargs)
    Render a payload (or a parsed ``Document``) into a PDF byte stream,
    optionally saving it to disk.

See Also
--------
profilereport.core.document.parse_document
    Payload parsing and validation.
profilereport.core.samples.get_sample_data
    Document used when the payload has no page list.

Notes
-----
- Payloads without a ``pages`` list are replaced by the built-in sample
  document unless ``fallback_to_sample=False``. Payloads that do have a
  page list but contain malformed sections always raise.
- The whole document is rendered into memory before anything is written.

Examples
--------
>>> from profilereport.renderers import render_pdf
>>> pdf_bytes = render_pdf({"person": {"name": "Ann"}, "pages": [{"sections": []}]})
>>> pdf_bytes[:5]
b'%PDF-'

# Save to ./reports/report.pdf
>>> pdf_bytes = render_pdf({"pages": []}, path="./reports")

# Payload without pages: the sample document is rendered
>>> pdf_bytes = render_pdf({})
"""

from pathlib import Path
import logging

from .._utils import (
    convert_filepath,
    enable_io_logs,
    is_valid_payload,
    log_context,
    read_messages,
    validate_path,
)
from ..core.document import parse_document
from ..core.layout import LayoutConfig
from ..core.samples import get_sample_data
from ..surfaces import ReportLabSurface
from .composer import compose

logger = logging.getLogger(__name__)


def render_pdf(
    data,
    path: str = None,
    font: str = "Helvetica",
    layout: LayoutConfig = None,
    fallback_to_sample: bool = True,
    **kwargs,
) -> bytes:
    """
    Render a report payload into PDF format.

    Parameters
    ----------
    data : Mapping or Document
        Report payload with ``person`` and ``pages`` keys, or a parsed
        ``Document``.
    path : str, optional
        Directory path or full file path where the PDF should be saved.
        - If a directory is provided, the report is saved as
        ``f"{report_name}.pdf"`` inside that directory.
        - If a full file path ending with ``.pdf`` is provided, the report
        is saved to that exact location.
        If None, the rendered PDF is returned as bytes without saving.
    font : str, default="Helvetica"
        ReportLab standard font name or path to a TTF font file, which will
        be registered as ``UserProvidedFont``.
    layout : LayoutConfig, optional
        Layout constants. Its ``page_size`` sets the PDF page size.
    fallback_to_sample : bool, default=True
        Render the built-in sample document when `data` has no page list.
        If False, such payloads raise ``InvalidDocumentError``.

    Other parameters
    ----------------
    report_name : str, default="report"
        Base name used when saving the PDF if `path` is a directory, and
        the PDF title metadata.
    overwrite : bool, default=True
        If False, saving to an existing file raises ``FileExistsError``.
    verbose : bool, default=False
        Enables info-level logging during the function execution.
    debug : bool, default=False
        Enables debug-level logging during the function execution.
        Takes precedence over the 'verbose' parameter.

    Returns
    -------
    bytes
        PDF content as bytes.

    Raises
    ------
    InvalidDocumentError
        If the payload is malformed, or has no page list and
        `fallback_to_sample` is False.
    ValueError
        If `font` is neither a known font nor an existing file, or `path`
        has a suffix other than ``.pdf``.
    FileExistsError
        If `overwrite` is False and the target file exists.

    Notes
    -----
    - The function always returns the generated PDF content as bytes,
      even if `path` is provided for saving.
    - Tables that would run past the bottom threshold are truncated and a
      warning is logged; they do not continue on a new page.
    """
    params = {
        "report_name": kwargs.get("report_name", "report"),
        "overwrite": kwargs.get("overwrite", True),
        "verbose": kwargs.get("verbose", False),
        "debug": kwargs.get("debug", False),
    }
    layout = layout or LayoutConfig()
    with log_context(logger, verbose=params["verbose"], debug=params["debug"]):
        logger.info("Rendering '%s' in pdf", params["report_name"])
        if not is_valid_payload(data) and fallback_to_sample:
            logger.info(read_messages("warnings")["sample_fallback"])
            data = get_sample_data()
        document = parse_document(data)

        surface = ReportLabSurface(
            page_size=layout.page_size, font=font, title=params["report_name"]
        )
        compose(surface, document, layout)
        pdf_bytes = surface.finalize()
        logger.debug("Document has %d page(s)", surface.page_count)

        if path is not None:
            _save_pdf(
                pdf_bytes,
                path,
                overwrite=params["overwrite"],
                report_name=params["report_name"],
            )
        logger.info("'%s' was successfully rendered", params["report_name"])
        return pdf_bytes


@enable_io_logs(logger)
def _save_pdf(
    pdf_bytes: bytes,
    path: str | Path,
    overwrite: bool = True,
    report_name: str = "report",
):
    """
    Save PDF bytes to the specified path.

    Parameters
    ----------
    pdf_bytes : bytes
        PDF content to save.
    path : str or Path
        Directory or full path where the PDF will be saved. If a directory is
        provided, the PDF will be saved as ``f"{report_name}.pdf"``.
    overwrite : bool, default=True
        If False, a `FileExistsError` is raised when the target exists.
    report_name : str, default='report'
        Name to use for the PDF file if a directory is provided.

    Raises
    ------
    ValueError
        If `path` is a file path without the ``.pdf`` extension.
    """
    path = convert_filepath(path, f"{report_name}.pdf")
    validate_path(path, suffix=".pdf", overwrite_check=not overwrite)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "wb") as f:
        f.write(pdf_bytes)
