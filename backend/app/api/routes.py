import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app import config
from app.chat.service import DiagramChatService, extract_transcript_diagrams
from app.errors import ConfigurationError, GenerationError
from app.extraction.code_extractor import extract_code
from app.gallery.loader import load_gallery
from app.inference.config import create_llm_client
from app.inference.models import AVAILABLE_MODELS
from app.intent.classifier import IntentClassifier
from app.intent.detector import detect_diagram_request
from app.prompts.synthesizer import synthesize_prompt
from app.schemas import (
    ChatRequest,
    ChatResponse,
    DetectResponse,
    ErrorResponse,
    ExtractResponse,
    HealthResponse,
    TextRequest,
    TranscriptExtractRequest,
    TranscriptExtractResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_classifier = IntentClassifier()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment={
            "has_api_key": bool(config.LLM_API_KEY),
            "default_model": config.DEFAULT_MODEL,
            "llm_base_url": config.LLM_BASE_URL,
        },
    )


@router.get("/models")
def list_models():
    return {
        "default": config.DEFAULT_MODEL,
        "models": [m.to_dict() for m in AVAILABLE_MODELS],
    }


@router.get("/examples")
def list_examples():
    return load_gallery().to_dict()


# ============================
# DIAGRAM PIPELINE
# ============================

@router.post("/diagram/detect", response_model=DetectResponse)
def detect_diagram(request: TextRequest):
    diagram_request = detect_diagram_request(request.text)
    if diagram_request is None:
        return DetectResponse(is_diagram_request=False)

    return DetectResponse(
        is_diagram_request=True,
        triggers=_classifier.matches(request.text),
        request=diagram_request,
        prompt=synthesize_prompt(diagram_request),
    )


@router.post("/diagram/extract", response_model=ExtractResponse)
def extract_diagram(request: TextRequest):
    return ExtractResponse(mermaid=extract_code(request.text))


@router.post("/diagram/extract/transcript", response_model=TranscriptExtractResponse)
def extract_transcript(request: TranscriptExtractRequest):
    messages = [m.model_dump() for m in request.messages]
    return TranscriptExtractResponse(diagrams=extract_transcript_diagrams(messages))


# ============================
# CHAT
# ============================

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def chat(request: ChatRequest):
    try:
        client = create_llm_client(request.model)
    except ConfigurationError as e:
        logger.error("[Chat] %s", e)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(message=str(e)).model_dump(),
        )

    service = DiagramChatService(client)
    messages = [m.model_dump() for m in request.messages]

    try:
        reply = service.reply(messages)
    except GenerationError as e:
        logger.error("[Chat] Generation failed: %s", e)
        return JSONResponse(
            status_code=502,
            content=ErrorResponse(message=str(e)).model_dump(),
        )

    return ChatResponse(
        status="success",
        content=reply.content,
        model=reply.model,
        is_diagram_request=reply.is_diagram_request,
        diagram_request=reply.diagram_request,
        mermaid=reply.mermaid,
    )
