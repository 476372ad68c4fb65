"""Document list for the signed-in user.

Fetches, caches and mutates ``/documents``. Uploads are tracked one handle
per call so overlapping uploads each keep their own status.
"""

import itertools
import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any

from pydantic import ValidationError

from docdesk.client.api import ApiClient
from docdesk.client.errors import ApiError, DocumentOperationError
from docdesk.models.schemas import (
    AnalysisRecord,
    AnalysisResult,
    AnalyzeRequest,
    Document,
    DocumentUpdate,
    DriveUploadRequest,
)
from docdesk.session.store import SessionStore
from docdesk.sync.base import ResourceSync

logger = logging.getLogger(__name__)


def sort_documents(documents: list[Document]) -> list[Document]:
    """Most recent first, by ``created_at``."""
    return sorted(documents, key=lambda d: d.created_at_dt, reverse=True)


def documents_per_user(documents: list[Document]) -> dict[str, int]:
    """Number of documents per ``user_id``, in first-seen order."""
    return dict(Counter(d.user_id for d in documents))


def recent_documents(documents: list[Document], limit: int = 5) -> list[Document]:
    return sort_documents(documents)[:limit]


class UploadStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"
    FAILED = "failed"


@dataclass
class UploadHandle:
    """Status of a single upload call."""

    id: int
    filename: str
    status: UploadStatus = UploadStatus.PENDING
    error: str | None = None


class DocumentSync(ResourceSync[Document]):
    """Documents for the current session.

    Every successful update, delete or upload is followed by a full
    ``fetch_all``; the cache is never patched locally.
    """

    path = "/documents"
    model = Document
    label = "documents"
    operation_error = DocumentOperationError

    def __init__(self, client: ApiClient, session: SessionStore) -> None:
        super().__init__(client, session)
        self._upload_ids = itertools.count(1)
        self._uploads: dict[int, UploadHandle] = {}

    @property
    def documents(self) -> list[Document]:
        return self.items

    @property
    def uploads(self) -> list[UploadHandle]:
        """Uploads still in flight."""
        return list(self._uploads.values())

    @property
    def uploading(self) -> bool:
        return bool(self._uploads)

    def order(self, items: list[Document]) -> list[Document]:
        return sort_documents(items)

    async def get(self, document_id: str) -> Document:
        """Fetch a single document without touching the cached list."""
        data = await self.client.get_json(
            f"{self.path}/{document_id}", action="fetching document"
        )
        try:
            return Document.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected document payload: {e}")
            raise DocumentOperationError("Unexpected response while fetching document") from e

    async def update(self, document_id: str, patch: DocumentUpdate | dict[str, Any]) -> None:
        """Send the changed fields, then re-fetch the list.

        Raises:
            DocumentOperationError: If the backend rejects the update.
            SessionExpiredError: On 401, after signing out and redirecting.
        """
        body = DocumentUpdate.model_validate(patch).model_dump(exclude_unset=True)
        await self._mutate(
            "PATCH", f"{self.path}/{document_id}", action="updating document", json=body
        )
        logger.info(f"Updated document {document_id}")
        await self.fetch_all()

    async def delete(self, document_id: str) -> None:
        """Delete a document, then re-fetch the list.

        Raises:
            DocumentOperationError: If the backend rejects the delete.
            SessionExpiredError: On 401, after signing out and redirecting.
        """
        await self._mutate("DELETE", f"{self.path}/{document_id}", action="deleting document")
        logger.info(f"Deleted document {document_id}")
        await self.fetch_all()

    async def upload(
        self,
        filename: str,
        content: bytes | IO[bytes],
        content_type: str = "application/octet-stream",
    ) -> UploadHandle:
        """Upload a file as multipart form data, then re-fetch the list.

        Args:
            filename: Name sent with the file part.
            content: File bytes or a binary file object.
            content_type: MIME type of the file part.

        Returns:
            The completed upload's handle.

        Raises:
            DocumentOperationError: If the backend rejects the file.
            SessionExpiredError: On 401, after signing out and redirecting.
        """
        handle = UploadHandle(id=next(self._upload_ids), filename=filename)
        self._uploads[handle.id] = handle
        self._notify()

        try:
            await self._mutate(
                "POST",
                f"{self.path}/upload",
                action="uploading file",
                files={"file": (filename, content, content_type)},
            )
            handle.status = UploadStatus.DONE
            logger.info(f"Uploaded {filename}")
            await self.fetch_all()
        except ApiError as e:
            handle.status = UploadStatus.FAILED
            handle.error = e.message
            raise
        finally:
            self._uploads.pop(handle.id, None)
            self._notify()

        return handle

    async def upload_from_drive(self, file_id: str, oauth_token: str) -> None:
        """Ask the backend to import a Google Drive file, then re-fetch the list.

        Args:
            file_id: Drive file identifier chosen in the picker.
            oauth_token: Google OAuth token authorizing the backend to read it.
        """
        payload = DriveUploadRequest(file_id=file_id, access_token=oauth_token)
        await self._mutate(
            "POST",
            f"{self.path}/upload-drive",
            action="importing from Drive",
            json=payload.model_dump(by_alias=True),
        )
        logger.info(f"Imported Drive file {file_id}")
        await self.fetch_all()

    async def analyze(self, document_id: str) -> AnalysisResult:
        """Ask the backend for a summary of one document.

        The document is fetched first so the request carries its current
        ``s3_url`` and ``filename``. The cached list is not touched.

        Raises:
            DocumentOperationError: If the backend rejects the analysis or
                answers with something other than a summary.
            SessionExpiredError: On 401, after signing out and redirecting.
        """
        document = await self.get(document_id)
        payload = AnalyzeRequest(
            record=AnalysisRecord(id=document.id, s3_url=document.s3_url, filename=document.filename)
        )
        response = await self._mutate(
            "POST",
            f"{self.path}/{document_id}/analyze",
            action="analyzing document",
            json=payload.model_dump(),
        )
        try:
            result = AnalysisResult.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Unexpected analysis payload for {document_id}: {e}")
            raise DocumentOperationError(
                "Unexpected response while analyzing document", response.status_code
            ) from e
        logger.info(f"Analyzed document {document_id}")
        return result
