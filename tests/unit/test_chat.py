"""Unit tests for chat answer extraction and ChatService."""

import json

import httpx
import pytest
import pytest_check as check

from docdesk.client.chat import ChatService, ChatTranscript, extract_answer


class TestExtractAnswer:
    """Tests for reading the answer under its various field names."""

    @pytest.mark.parametrize("field", ["awnser", "answer", "respuesta", "response", "message"])
    def test_known_fields(self, field: str) -> None:
        """Each known answer field is recognized."""
        assert extract_answer({field: "42"}) == "42"

    def test_field_priority(self) -> None:
        """Earlier fields in the chain win."""
        assert extract_answer({"message": "ok", "answer": "real", "awnser": "typo"}) == "typo"

    def test_empty_values_are_skipped(self) -> None:
        """Empty answer fields fall through to the next one."""
        assert extract_answer({"awnser": "", "answer": "real"}) == "real"

    def test_unknown_shape_falls_back_to_json(self) -> None:
        """Unrecognized bodies are shown as raw JSON."""
        data = {"result": {"text": "¿hola?"}}

        assert json.loads(extract_answer(data)) == data

    def test_plain_string_body(self) -> None:
        """A bare JSON string is the answer."""
        assert extract_answer("just text") == "just text"


class TestChatService:
    """Tests for POST /chat."""

    async def test_sends_question_and_document(self, make_client, signed_in) -> None:
        """Request body uses the backend's field names."""
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"awnser": "It is a contract."})

        service = ChatService(make_client(httpx.MockTransport(handler)))
        answer = await service.ask("doc-1", "  What is this?  ")

        check.equal(answer, "It is a contract.")
        check.equal(bodies, [{"question": "What is this?", "documentId": "doc-1"}])

    async def test_non_json_answer(self, make_client, signed_in) -> None:
        """Non-JSON replies are returned as text."""
        service = ChatService(make_client(httpx.MockTransport(lambda r: httpx.Response(200, text="Plain answer"))))

        assert await service.ask("doc-1", "q") == "Plain answer"

    async def test_blank_question_rejected(self, make_client, signed_in) -> None:
        """Whitespace-only questions are not sent."""
        service = ChatService(make_client(httpx.MockTransport(lambda r: httpx.Response(200))))

        with pytest.raises(ValueError, match="empty"):
            await service.ask("doc-1", "   ")


class TestChatTranscript:
    def test_add_messages(self) -> None:
        """Messages keep their order, role and time."""
        transcript = ChatTranscript(document_id="d")

        transcript.add("user", "hi")
        transcript.add("assistant", "hello")

        check.equal([m.role for m in transcript.messages], ["user", "assistant"])
        check.is_true(transcript.messages[0].time)
