"""Backend resource lists cached for the current session.

Each sync object fetches a list, keeps it as local state for the pages,
and re-fetches the whole list after every mutation instead of patching the
cache, so the local copy always matches what the server returned last.
"""

from docdesk.sync.documents import DocumentSync, UploadHandle, UploadStatus, sort_documents
from docdesk.sync.users import UserSync

__all__ = ["DocumentSync", "UploadHandle", "UploadStatus", "UserSync", "sort_documents"]
