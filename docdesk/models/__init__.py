"""Pydantic models for backend requests and responses.

Provides type safety and validation for everything exchanged with the
document backend and persisted in browser storage.

Models:
    - Identity / AuthResponse: Signed-in user and login result
    - Document / DocumentUpdate: Stored documents and their editable fields
    - LoginRequest / RegisterRequest: Public authentication payloads
    - UserCreate / UserUpdate: Admin user management payloads
    - DriveUploadRequest: Google Drive import payload
    - ChatRequest: Question about a document
    - AnalyzeRequest / AnalysisResult: Document summary request and reply
"""

from docdesk.models.schemas import (
    AnalysisRecord,
    AnalysisResult,
    AnalyzeRequest,
    AuthResponse,
    ChatRequest,
    Document,
    DocumentUpdate,
    DriveUploadRequest,
    Identity,
    LoginRequest,
    RegisterRequest,
    Role,
    UserCreate,
    UserUpdate,
)

__all__ = [
    "AnalysisRecord",
    "AnalysisResult",
    "AnalyzeRequest",
    "AuthResponse",
    "ChatRequest",
    "Document",
    "DocumentUpdate",
    "DriveUploadRequest",
    "Identity",
    "LoginRequest",
    "RegisterRequest",
    "Role",
    "UserCreate",
    "UserUpdate",
]
