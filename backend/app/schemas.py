from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Literal

from app.ir.diagram import DiagramRequest


class TextRequest(BaseModel):
    text: str


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(min_length=1)
    model: Optional[str] = None  # OpenRouter model id, falls back to DEFAULT_MODEL


class DetectResponse(BaseModel):
    is_diagram_request: bool
    triggers: List[str] = []  # vocabulary phrases found in the text
    request: Optional[DiagramRequest] = None
    prompt: Optional[str] = None


class ExtractResponse(BaseModel):
    mermaid: Optional[str] = None


class TranscriptExtractRequest(BaseModel):
    messages: List[ChatMessage]


class TranscriptExtractResponse(BaseModel):
    diagrams: List[Optional[str]]


class ChatResponse(BaseModel):
    status: str
    content: str
    model: str
    is_diagram_request: bool
    diagram_request: Optional[DiagramRequest] = None
    mermaid: Optional[str] = None


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: Dict[str, Any]
