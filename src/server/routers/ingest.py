"""Ingest endpoint for the API."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from server.form_types import UploadForm
from server.routers_utils import COMMON_INGEST_RESPONSES, _perform_ingestion

router = APIRouter()


@router.post("/api/ingest", responses=COMMON_INGEST_RESPONSES)
async def api_ingest(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    file: UploadForm,
) -> JSONResponse:
    """Group an uploaded .docx document into titled sections.

    **This endpoint converts the uploaded document to HTML,** then buckets the
    top-level elements under each bold list-item title. The response
    includes the section list, a plain-text tree and converter warnings.

    **Parameters**

    - **file** (`UploadFile`): the ``.docx`` document, sent as multipart form data

    **Returns**

    - **JSONResponse**: Success response with the sections or error response with appropriate HTTP status code

    """
    return await _perform_ingestion(file)
