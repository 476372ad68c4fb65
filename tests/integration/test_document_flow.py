"""Integration tests for the document list against the fake backend."""

import pytest
import pytest_check as check

from docdesk.client.auth import AuthService
from docdesk.client.chat import ChatService
from docdesk.client.errors import ApiError, DocumentOperationError, SessionExpiredError
from docdesk.session.store import SessionStore
from docdesk.session.storage import StorageKeys
from docdesk.sync.documents import DocumentSync


@pytest.fixture
async def logged_in(backend, backend_client, session: SessionStore) -> SessionStore:
    backend.add_user("A", "a@b.com", password="x")
    await AuthService(backend_client, session).login("a@b.com", "x")
    return session


@pytest.fixture
def documents(backend_client, session: SessionStore) -> DocumentSync:
    return DocumentSync(backend_client, session)


class TestDocumentList:
    """Tests for listing documents."""

    async def test_no_session_no_request(self, backend, documents: DocumentSync) -> None:
        """Without a session nothing reaches the backend."""
        await documents.fetch_all()

        check.equal(backend.requests, [])
        check.equal(documents.documents, [])

    async def test_list_is_sorted_newest_first(self, backend, logged_in, documents: DocumentSync) -> None:
        """Backend order is replaced by newest first."""
        user_id = logged_in.user.id
        for created_at in ("2024-01-01", "2024-03-01", "2024-02-01"):
            backend.add_document(f"{created_at}.pdf", user_id, created_at=created_at)

        await documents.fetch_all()

        assert [d.created_at for d in documents.documents] == ["2024-03-01", "2024-02-01", "2024-01-01"]


class TestDocumentMutations:
    """Tests for mutations converging on the server's list."""

    async def test_upload_then_list(self, backend, logged_in, documents: DocumentSync) -> None:
        """Upload is followed by exactly one list fetch."""
        await documents.upload("contract.pdf", b"%PDF-1.4 contract", "application/pdf")

        check.equal([d.filename for d in documents.documents], ["contract.pdf"])
        check.equal(backend.count("POST", "/documents/upload"), 1)
        check.equal(backend.count("GET", "/documents"), 1)

    async def test_rename_matches_fresh_fetch(self, backend, logged_in, documents: DocumentSync) -> None:
        """Cache after rename equals a fresh fetch."""
        document = backend.add_document("draft.pdf", logged_in.user.id)
        await documents.fetch_all()

        await documents.update(document["id"], {"filename": "final.pdf"})
        after_update = [d.model_dump() for d in documents.documents]

        await documents.fetch_all()
        check.equal(after_update, [d.model_dump() for d in documents.documents])
        check.equal(documents.documents[0].filename, "final.pdf")

    async def test_delete(self, backend, logged_in, documents: DocumentSync) -> None:
        """Deleted document disappears from the list."""
        keep = backend.add_document("keep.pdf", logged_in.user.id)
        drop = backend.add_document("drop.pdf", logged_in.user.id)

        await documents.delete(drop["id"])

        assert [d.id for d in documents.documents] == [keep["id"]]

    async def test_delete_missing_document(self, logged_in, documents: DocumentSync) -> None:
        """Deleting an unknown id raises with the backend message."""
        with pytest.raises(DocumentOperationError, match="Document not found"):
            await documents.delete("nope")

    async def test_empty_upload_rejected(self, logged_in, documents: DocumentSync) -> None:
        """Backend rejection leaves no upload in flight."""
        with pytest.raises(DocumentOperationError, match="Empty file"):
            await documents.upload("empty.pdf", b"")

        check.is_false(documents.uploading)
        check.equal(documents.documents, [])

    async def test_drive_import(self, backend, logged_in, documents: DocumentSync) -> None:
        """Imported Drive file appears in the list."""
        await documents.upload_from_drive("abc", "oauth")

        assert [d.filename for d in documents.documents] == ["drive-abc.pdf"]


class TestSessionExpiry:
    """A revoked token signs the user out at every call site."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda docs, doc_id: docs.update(doc_id, {"filename": "x"}),
            lambda docs, doc_id: docs.delete(doc_id),
            lambda docs, doc_id: docs.upload("new.pdf", b"data"),
            lambda docs, doc_id: docs.upload_from_drive("f", "t"),
            lambda docs, doc_id: docs.get(doc_id),
            lambda docs, doc_id: docs.analyze(doc_id),
        ],
        ids=["update", "delete", "upload", "drive", "get", "analyze"],
    )
    async def test_mutation_after_revocation(
        self, call, backend, logged_in, documents: DocumentSync, storage, navigator, events
    ) -> None:
        """Every call site runs the same 401 sequence."""
        document = backend.add_document("original.pdf", logged_in.user.id)
        await documents.fetch_all()
        backend.revoke_all_tokens()

        with pytest.raises(SessionExpiredError):
            await call(documents, document["id"])

        check.equal(
            events,
            [
                ("remove", StorageKeys.ACCESS_TOKEN),
                ("remove", StorageKeys.USER),
                ("navigate", "/auth/login"),
            ],
        )
        check.equal(storage, {})
        check.equal([d.filename for d in documents.documents], ["original.pdf"])
        check.equal(backend.documents[0]["filename"], "original.pdf")

    async def test_fetch_after_revocation(self, backend, logged_in, documents: DocumentSync, navigator) -> None:
        """A revoked token during fetch signs out silently."""
        backend.revoke_all_tokens()

        await documents.fetch_all()

        check.is_false(logged_in.is_authenticated)
        check.is_none(documents.error)
        check.equal(navigator.paths, ["/auth/login"])

    async def test_next_call_after_expiry_sends_nothing(self, backend, logged_in, documents: DocumentSync) -> None:
        """After expiry, fetches send no requests."""
        backend.revoke_all_tokens()
        await documents.fetch_all()
        sent = len(backend.requests)

        await documents.fetch_all()

        assert len(backend.requests) == sent

    async def test_chat_after_revocation(self, backend, backend_client, logged_in, navigator) -> None:
        """Chat also signs out on 401."""
        document = backend.add_document("a.pdf", logged_in.user.id)
        backend.revoke_all_tokens()

        with pytest.raises(SessionExpiredError):
            await ChatService(backend_client).ask(document["id"], "hello?")

        check.is_false(logged_in.is_authenticated)
        check.equal(navigator.paths, ["/auth/login"])


class TestChat:
    """Tests for asking about a document."""

    async def test_answer(self, backend, backend_client, logged_in) -> None:
        """Answer is read from the default field."""
        document = backend.add_document("lease.pdf", logged_in.user.id)

        answer = await ChatService(backend_client).ask(document["id"], "When does it end?")

        assert answer == "About lease.pdf: When does it end?"

    async def test_answer_under_other_field(self, backend, backend_client, logged_in) -> None:
        """Answer is found under an alternative field."""
        backend.chat_answer_field = "respuesta"
        document = backend.add_document("lease.pdf", logged_in.user.id)

        answer = await ChatService(backend_client).ask(document["id"], "Hola")

        assert answer == "About lease.pdf: Hola"


class TestAnalyze:
    """Tests for document summaries."""

    async def test_summary(self, backend, logged_in, documents: DocumentSync) -> None:
        """The backend receives the stored record and the summary comes back."""
        document = backend.add_document("lease.pdf", logged_in.user.id)

        result = await documents.analyze(document["id"])

        check.equal(result.respuesta, "Summary of lease.pdf")
        check.equal(
            backend.analyzed,
            [{"id": document["id"], "s3_url": document["s3_url"], "filename": "lease.pdf"}],
        )
        check.equal(backend.count("GET", "/documents"), 0)

    async def test_missing_document(self, logged_in, documents: DocumentSync) -> None:
        """Analyzing an unknown id fails before anything is analyzed."""
        with pytest.raises(ApiError, match="Document not found"):
            await documents.analyze("nope")
