"""
HTTP transport for report generation.

Exposes a single endpoint::

    POST /generate-pdf

The request body is a report payload (see
:mod:`profilereport.core.document`). Bodies that are missing, not JSON, or
have no ``pages`` list are answered with the built-in sample report. The
PDF is rendered completely in memory before the response is sent, so a
failure always produces a clean ``500`` JSON error.

Run with ``profilereport-server`` or ``python -m profilereport.server``;
``PROFILEREPORT_HOST`` and ``PROFILEREPORT_PORT`` select the bind address.
"""

import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from . import __version__
from ._utils import read_messages
from .renderers import render_pdf

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
PDF_HEADERS = {"Content-Disposition": 'attachment; filename="report.pdf"'}


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title="profilereport",
        description="Paginated profile report generation",
        version=__version__,
    )

    @app.post("/generate-pdf")
    async def generate_pdf(request: Request):
        try:
            data = await request.json()
        except ValueError:
            logger.info("Request body is not valid JSON; using sample data")
            data = None

        try:
            pdf_bytes = await run_in_threadpool(render_pdf, data)
        except Exception:
            logger.exception("PDF generation failed")
            return JSONResponse(
                {"error": read_messages()["http_failure"]}, status_code=500
            )
        return Response(
            content=pdf_bytes, media_type="application/pdf", headers=PDF_HEADERS
        )

    return app


app = create_app()


def main():
    """Run the server with uvicorn."""
    host = os.environ.get("PROFILEREPORT_HOST", DEFAULT_HOST)
    port = int(os.environ.get("PROFILEREPORT_PORT", DEFAULT_PORT))
    logging.getLogger("profilereport").setLevel(logging.INFO)
    logger.info("Server running on http://%s:%d", host, port)
    logger.info("Generate PDF: POST http://%s:%d/generate-pdf", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
