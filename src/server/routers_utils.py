"""Shared helpers for the ingest routers."""

from __future__ import annotations

from typing import Any

from fastapi import UploadFile
from fastapi.responses import JSONResponse

from server.models import IngestErrorResponse, IngestSuccessResponse
from server.upload_processor import process_upload

COMMON_INGEST_RESPONSES: dict[int | str, dict[str, Any]] = {
    200: {"model": IngestSuccessResponse, "description": "Document grouped into sections"},
    400: {"model": IngestErrorResponse, "description": "File could not be read"},
    422: {"model": IngestErrorResponse, "description": "Conversion failed"},
    500: {"model": IngestErrorResponse, "description": "Unexpected error"},
}


async def _perform_ingestion(file: UploadFile) -> JSONResponse:
    """Read an upload, process it, and wrap the outcome in a JSON response."""
    data = await file.read()
    response, status_code = await process_upload(file.filename, data)
    return JSONResponse(status_code=status_code, content=response.model_dump())
