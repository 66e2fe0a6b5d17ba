from app.inference.base import LLMClient
from app.inference.chat_completions_client import ChatCompletionsClient
from app.inference.config import create_llm_client
from app.inference.models import AVAILABLE_MODELS, ModelInfo

__all__ = [
    "LLMClient",
    "ChatCompletionsClient",
    "create_llm_client",
    "AVAILABLE_MODELS",
    "ModelInfo",
]
