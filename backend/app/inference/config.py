from typing import Optional

from app import config
from app.errors import ConfigurationError
from .chat_completions_client import ChatCompletionsClient


def create_llm_client(model_id: Optional[str] = None) -> ChatCompletionsClient:
    """Client for the requested model, or the configured default."""
    if not config.LLM_API_KEY:
        raise ConfigurationError("LLM API key not configured")

    return ChatCompletionsClient(
        base_url=config.LLM_BASE_URL,
        model=model_id or config.DEFAULT_MODEL,
        api_key=config.LLM_API_KEY,
        temperature=config.LLM_TEMPERATURE,
        timeout=config.LLM_TIMEOUT,
    )
