"""Viewer page routes."""

from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from docx2sections.session import DocumentSession
from server.form_types import UploadForm
from server.page import render_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def viewer_page() -> HTMLResponse:
    """Render the empty viewer with the file picker."""
    return HTMLResponse(render_page())


@router.post("/", response_class=HTMLResponse)
async def viewer_upload(
    file: UploadForm,
    open_section: Annotated[list[str], Form()] = [],  # noqa: B006
) -> HTMLResponse:
    """Process the selected file and render its section tree.

    ``open_section`` carries the keys of sections that were expanded on the
    previous page. Sections of the new tree with the same key stay open.
    Errors are shown as notifications on the page; the picker stays usable
    so the user can choose another file.
    """
    session = DocumentSession()
    for key in open_section:
        if not session.is_open(key):
            session.toggle_section(key)
    await session.process_upload(file.filename, file.read)
    return HTMLResponse(render_page(session))
