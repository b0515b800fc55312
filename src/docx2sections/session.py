"""Per-viewer document state: current tree, processing flag and notifications."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable

from pydantic import BaseModel

from docx2sections.exceptions import ConversionError, FileReadError, UnexpectedError
from docx2sections.file_utils import check_upload_size, ensure_docx_filename
from docx2sections.ingestion import ingest_docx
from docx2sections.schemas import SectionNode
from docx2sections.sections import GroupingOptions

logger = logging.getLogger(__name__)

PROCESSING_FAILED_MESSAGE = (
    "Dosya işlenirken bir hata oluştur. Lütfen tekrar deneyin ya da dosyayı değiştirin."
)
READ_FAILED_MESSAGE = "Dosya okunamıyor. Lütfen başka dosya deneyin."
UNEXPECTED_ERROR_MESSAGE = "Beklenmeyen bir hata oluştu. Bunu bir konuşalım."

ReadBytes = Callable[[], Awaitable[bytes]]


class ProcessingStatus(str, Enum):
    """Processing state of a session."""

    IDLE = "idle"
    PROCESSING = "processing"


class Notification(BaseModel):
    """A user-visible toast message."""

    title: str = "Error"
    description: str
    variant: str = "destructive"


class DocumentSession:
    """State behind one document viewer.

    Every call to :meth:`process_upload` takes a new token. When an older
    call finishes after a newer one has started, its result (or error) is
    dropped, so the displayed tree always belongs to the latest upload.
    """

    def __init__(
        self,
        *,
        options: GroupingOptions | None = None,
        style_map: str | None = None,
    ) -> None:
        self.options = options
        self.style_map = style_map
        self.sections: list[SectionNode] = []
        self.filename: str | None = None
        self.messages: list[str] = []
        self.status = ProcessingStatus.IDLE
        self.open_keys: set[str] = set()
        self.notifications: list[Notification] = []
        self._latest_token = 0

    @property
    def is_processing(self) -> bool:
        return self.status is ProcessingStatus.PROCESSING

    def toggle_section(self, key: str) -> bool:
        """Flip the open state of a section and return the new state."""
        if key in self.open_keys:
            self.open_keys.discard(key)
            return False
        self.open_keys.add(key)
        return True

    def is_open(self, key: str) -> bool:
        return key in self.open_keys

    async def process_upload(self, filename: str | None, read: ReadBytes) -> bool:
        """Read, convert and group an uploaded file.

        Args:
            filename: Name of the selected file.
            read: Coroutine function returning the file's bytes.

        Returns:
            True if the tree was replaced by this upload's sections.
        """
        token = self._next_token()
        self.filename = filename
        self.status = ProcessingStatus.PROCESSING

        try:
            try:
                ensure_docx_filename(filename)
                data = await read()
                check_upload_size(len(data))
            except (FileReadError, OSError) as exc:
                self._fail(token, READ_FAILED_MESSAGE, "File read failed for %s: %s", filename, exc)
                return False

            try:
                result = await ingest_docx(
                    data,
                    filename=filename,
                    options=self.options,
                    style_map=self.style_map,
                )
            except ConversionError as exc:
                self._fail(token, PROCESSING_FAILED_MESSAGE, "Error processing file content of %s: %s", filename, exc)
                return False
            except UnexpectedError as exc:
                self._fail(token, UNEXPECTED_ERROR_MESSAGE, "Unexpected error while processing %s: %s", filename, exc)
                return False
        except Exception as exc:
            self._fail(token, UNEXPECTED_ERROR_MESSAGE, "Unexpected error while processing %s: %s", filename, exc, exc_info=True)
            return False

        if not self._is_current(token):
            logger.debug("Discarding stale result for %s (token %d)", filename, token)
            return False

        new_keys = {section.key for section in result.sections}
        self.sections = result.sections
        self.messages = result.messages
        self.open_keys &= new_keys
        self.status = ProcessingStatus.IDLE
        return True

    def _next_token(self) -> int:
        self._latest_token += 1
        return self._latest_token

    def _is_current(self, token: int) -> bool:
        return token == self._latest_token

    def _fail(self, token: int, description: str, msg: str, *args: object, exc_info: bool = False) -> None:
        if not self._is_current(token):
            logger.debug("Superseded upload (token %d): " + msg, token, *args)
            return
        logger.error(msg, *args, exc_info=exc_info)
        self.notifications.append(Notification(description=description))
        self.status = ProcessingStatus.IDLE
