from dataclasses import asdict, dataclass
from typing import List


@dataclass(frozen=True)
class ModelInfo:
    id: str
    name: str
    provider: str
    description: str

    def to_dict(self) -> dict:
        return asdict(self)


# Models selectable from the chat UI (OpenRouter ids)
AVAILABLE_MODELS: List[ModelInfo] = [
    ModelInfo(
        id="anthropic/claude-3-5-sonnet-20241022",
        name="Claude 3.5 Sonnet",
        provider="Anthropic",
        description="Best for conversational AI and complex reasoning",
    ),
    ModelInfo(
        id="openai/gpt-4-turbo",
        name="GPT-4 Turbo",
        provider="OpenAI",
        description="Excellent for general tasks and coding",
    ),
    ModelInfo(
        id="google/gemini-pro",
        name="Gemini Pro",
        provider="Google",
        description="Good for analysis and multimodal tasks",
    ),
    ModelInfo(
        id="meta-llama/llama-3.1-70b-instruct",
        name="Llama 3.1 70B",
        provider="Meta",
        description="Open-source model, cost-effective",
    ),
]
