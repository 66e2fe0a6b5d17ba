"""Tests for the chat service around the diagram pipeline"""

from typing import Dict, List, Optional

import pytest

from app.chat import DiagramChatService, extract_transcript_diagrams
from app.errors import GenerationError
from app.inference.base import LLMClient
from app.ir.diagram import DiagramType
from app.prompts import CHAT_SYSTEM_PROMPT


class FakeLLMClient(LLMClient):
    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.model = "fake/model"
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, messages: List[Dict], system: Optional[str] = None) -> str:
        self.calls.append((messages, system))
        if self.error:
            raise self.error
        return self.reply


MERMAID_REPLY = "Here you go\n```mermaid\nflowchart TD\nA[Wake] --> B[Coffee]\n```"


def test_diagram_request_replaces_latest_user_message():
    client = FakeLLMClient(reply=MERMAID_REPLY)
    history = [
        {"role": "user", "content": "hello"},
        {"role": "assistant", "content": "hi, how can I help?"},
        {"role": "user", "content": "Create a flowchart for my morning routine"},
    ]

    reply = DiagramChatService(client).reply(history)

    sent, system = client.calls[0]
    assert system == CHAT_SYSTEM_PROMPT
    assert sent[0] == history[0]
    assert sent[1] == history[1]
    assert sent[2]["role"] == "user"
    assert sent[2]["content"].startswith("Create a Mermaid diagram for: a for my morning routine")
    assert "flowchart TD" in sent[2]["content"]

    # caller's history is left alone
    assert history[2]["content"] == "Create a flowchart for my morning routine"

    assert reply.is_diagram_request
    assert reply.diagram_request.type == DiagramType.FLOWCHART
    assert reply.mermaid == "flowchart TD\nA[Wake] --> B[Coffee]"
    assert reply.content == MERMAID_REPLY
    assert reply.model == "fake/model"


def test_plain_chat_is_forwarded_verbatim():
    client = FakeLLMClient(reply="It is sunny.")
    history = [{"role": "user", "content": "How is the weather?"}]

    reply = DiagramChatService(client).reply(history)

    assert client.calls[0][0] == history
    assert not reply.is_diagram_request
    assert reply.mermaid is None


def test_reply_is_scanned_even_without_diagram_request():
    client = FakeLLMClient(reply="```\ngraph LR\nA-->B\n```")
    reply = DiagramChatService(client).reply([{"role": "user", "content": "What next?"}])

    assert not reply.is_diagram_request
    assert reply.mermaid == "graph LR\nA-->B"


def test_diagram_request_without_diagram_in_reply():
    client = FakeLLMClient(reply="Sorry, I can't do that.")
    reply = DiagramChatService(client).reply([{"role": "user", "content": "draw a gantt"}])

    assert reply.diagram_request.type == DiagramType.GANTT
    assert reply.mermaid is None


def test_only_latest_user_message_is_inspected():
    client = FakeLLMClient(reply="ok")
    history = [
        {"role": "user", "content": "Draw a diagram of my house"},
        {"role": "assistant", "content": "Done"},
        {"role": "user", "content": "thanks!"},
    ]
    reply = DiagramChatService(client).reply(history)

    assert client.calls[0][0] == history
    assert reply.diagram_request is None


def test_generation_errors_propagate():
    client = FakeLLMClient(error=GenerationError("upstream down"))
    with pytest.raises(GenerationError):
        DiagramChatService(client).reply([{"role": "user", "content": "hi"}])


def test_extract_transcript_diagrams():
    messages = [
        {"role": "user", "content": "draw it"},
        {"role": "assistant", "content": MERMAID_REPLY},
        {"role": "assistant", "content": "```\nprint(1)\n```"},
    ]
    assert extract_transcript_diagrams(messages) == [
        None,
        "flowchart TD\nA[Wake] --> B[Coffee]",
        None,
    ]
