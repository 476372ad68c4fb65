"""Questions about a document, answered by the backend assistant."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from docdesk.client.api import ApiClient
from docdesk.models.schemas import ChatRequest

logger = logging.getLogger(__name__)

# The backend has answered under each of these names; "awnser" is its own spelling.
ANSWER_FIELDS = ("awnser", "answer", "respuesta", "response", "message")


def extract_answer(data: Any) -> str:
    """Pick the answer text out of a chat response body.

    Falls back to the raw JSON when none of the known fields is present.
    """
    if isinstance(data, dict):
        for key in ANSWER_FIELDS:
            value = data.get(key)
            if value:
                return str(value)
    elif isinstance(data, str) and data:
        return data
    return json.dumps(data, ensure_ascii=False)


@dataclass
class ChatMessage:
    role: str
    text: str
    time: str = field(default_factory=lambda: datetime.now().strftime("%I:%M %p"))


@dataclass
class ChatTranscript:
    """Messages exchanged on one chat page. Not persisted."""

    document_id: str
    messages: list[ChatMessage] = field(default_factory=list)
    sending: bool = False

    def add(self, role: str, text: str) -> ChatMessage:
        message = ChatMessage(role=role, text=text)
        self.messages.append(message)
        return message


class ChatService:
    """Sends questions to ``POST /chat``."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def ask(self, document_id: str, question: str) -> str:
        """Ask a question about a document.

        Returns:
            The assistant's answer text.

        Raises:
            ValueError: If the question is blank.
            ApiError: If the backend call fails.
        """
        if not question or not question.strip():
            raise ValueError("Question must not be empty")

        payload = ChatRequest(question=question, document_id=document_id)
        response = await self.client.request(
            "POST",
            "/chat",
            action="processing the question",
            json=payload.model_dump(by_alias=True),
        )
        try:
            data = response.json()
        except ValueError:
            data = response.text
        answer = extract_answer(data)
        logger.debug(f"Answer received for document {document_id}")
        return answer
