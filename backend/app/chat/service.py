# backend/app/chat/service.py
"""
Chat turn handling around the diagram pipeline.

Request side: the latest user message goes through intent detection and,
on a hit, is replaced by the synthesized diagram prompt before the model
call. Response side: every reply is scanned for Mermaid source, whatever
the request was.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from app.extraction.code_extractor import extract_code
from app.inference.base import LLMClient
from app.intent.detector import detect_diagram_request
from app.ir.diagram import DiagramRequest
from app.prompts.synthesizer import synthesize_prompt
from app.prompts.templates import CHAT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


@dataclass
class ChatReply:
    content: str
    model: str
    diagram_request: Optional[DiagramRequest] = None
    mermaid: Optional[str] = None

    @property
    def is_diagram_request(self) -> bool:
        return self.diagram_request is not None


def _latest_user_index(messages: List[Dict]) -> Optional[int]:
    for i in range(len(messages) - 1, -1, -1):
        if messages[i].get("role") == "user":
            return i
    return None


class DiagramChatService:
    def __init__(self, client: LLMClient, system_prompt: str = CHAT_SYSTEM_PROMPT):
        self.client = client
        self.system_prompt = system_prompt

    def prepare_messages(self, messages: List[Dict]):
        """
        Messages to send to the model, plus the diagram request if the
        latest user message asked for one.
        """
        outgoing = [dict(m) for m in messages]
        index = _latest_user_index(outgoing)
        if index is None:
            return outgoing, None

        request = detect_diagram_request(outgoing[index].get("content", ""))
        if request is not None:
            logger.info("[ChatService] Diagram request detected: %s", request.type.value)
            outgoing[index]["content"] = synthesize_prompt(request)

        return outgoing, request

    def reply(self, messages: List[Dict]) -> ChatReply:
        outgoing, request = self.prepare_messages(messages)

        # GenerationError propagates to the caller
        content = self.client.generate(outgoing, system=self.system_prompt)
        mermaid = extract_code(content)

        if request is not None and mermaid is None:
            logger.info("[ChatService] Diagram requested but none found in reply")

        return ChatReply(
            content=content,
            model=self.client.model,
            diagram_request=request,
            mermaid=mermaid,
        )


def extract_transcript_diagrams(messages: List[Dict]) -> List[Optional[str]]:
    """Mermaid source per message, for re-deriving diagrams from stored history."""
    return [extract_code(m.get("content") or "") for m in messages]
