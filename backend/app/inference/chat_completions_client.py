import logging
from typing import Dict, List, Optional

import requests

from app.errors import GenerationError
from app.inference.base import LLMClient

logger = logging.getLogger(__name__)


class ChatCompletionsClient(LLMClient):
    """
    Client for OpenAI-compatible ``/chat/completions`` endpoints
    (OpenRouter by default).

    The reply is returned as-is: Mermaid fences must reach the extractor.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: Optional[str] = None,
        temperature: float = 0.7,
        timeout: int = 300,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.temperature = temperature
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def generate(self, messages: List[Dict], system: Optional[str] = None) -> str:
        url = f"{self.base_url}/chat/completions"

        payload_messages = list(messages)
        if system:
            payload_messages.insert(0, {"role": "system", "content": system})

        logger.info(
            "[ChatCompletionsClient] POST %s model=%s messages=%d",
            url, self.model, len(payload_messages),
        )

        try:
            response = requests.post(
                url,
                headers=self._headers(),
                json={
                    "model": self.model,
                    "messages": payload_messages,
                    "temperature": self.temperature,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error("[ChatCompletionsClient] Request failed: %s", e)
            raise GenerationError(f"Chat completion request failed: {e}") from e
        except ValueError as e:
            raise GenerationError("Chat completion response was not JSON") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise GenerationError("Chat completion response had no message content") from e

        if not isinstance(content, str):
            raise GenerationError("Chat completion message content was not text")

        return content
