"""FastAPI application for the docx2sections viewer."""

from __future__ import annotations

from fastapi import FastAPI

from docx2sections.utils.logging_config import configure_logging
from server.routers import ingest, page

configure_logging()

app = FastAPI(title="docx2sections", version="0.1.0")
app.include_router(page.router)
app.include_router(ingest.router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
