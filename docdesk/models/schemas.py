from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Roles issued by the backend."""

    ADMIN = "admin"
    EMPLOYEE = "empleado"


class Identity(BaseModel):
    """The signed-in user's profile as cached in the browser.

    Attributes:
        id: Backend user identifier.
        username: Display name.
        email: Login email.
        role: Either admin or empleado.
    """

    id: str
    username: str
    email: str
    role: Role

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        """Accept numeric ids from the backend."""
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


class AuthResponse(BaseModel):
    """Successful login payload.

    Attributes:
        access_token: Bearer token for protected calls.
        user: Profile of the user who signed in.
    """

    access_token: str = Field(..., min_length=1)
    user: Identity


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserCreate(RegisterRequest):
    """Admin-side user creation, which also assigns a role."""

    role: Role = Role.EMPLOYEE


class UserUpdate(BaseModel):
    """Partial user update. Unset fields are not sent."""

    username: str | None = None
    email: str | None = None
    role: Role | None = None


_EPOCH = datetime.min.replace(tzinfo=UTC)


class Document(BaseModel):
    """A document record owned by the backend.

    Attributes:
        id: Backend document identifier.
        filename: Name shown to users.
        s3_url: Location of the stored file.
        user_id: Owner of the document.
        created_at: Creation timestamp as sent by the server.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    filename: str
    s3_url: str = ""
    user_id: str = ""
    created_at: str

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def coerce_ids(cls, v: object) -> object:
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def created_at_dt(self) -> datetime:
        """Parsed creation time; naive values are UTC, unparseable ones sort oldest."""
        try:
            parsed = datetime.fromisoformat(self.created_at)
        except ValueError:
            return _EPOCH
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed


class DocumentUpdate(BaseModel):
    """Editable document fields. Unset fields are not sent."""

    filename: str | None = Field(None, min_length=1)
    user_id: str | None = None


class DriveUploadRequest(BaseModel):
    """Import of a Google Drive file by the backend."""

    model_config = ConfigDict(populate_by_name=True)

    file_id: str = Field(..., alias="fileId", min_length=1)
    access_token: str = Field(..., alias="accessToken", min_length=1)


class ChatRequest(BaseModel):
    """Question about a single document.

    Attributes:
        question: User's question.
        document_id: Document the question refers to.
    """

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., min_length=1)
    document_id: str = Field(..., alias="documentId")

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class AnalysisRecord(BaseModel):
    """Document reference sent for analysis."""

    id: str
    s3_url: str
    filename: str


class AnalyzeRequest(BaseModel):
    record: AnalysisRecord


class AnalysisResult(BaseModel):
    """Summary returned by the backend for one document.

    Attributes:
        respuesta: Generated summary text.
        filename: Name of the analyzed document.
        id: Analyzed document identifier.
    """

    model_config = ConfigDict(extra="ignore")

    respuesta: str
    filename: str = ""
    id: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        if isinstance(v, int):
            return str(v)
        return v
