from app.prompts.synthesizer import synthesize_prompt
from app.prompts.templates import (
    CHAT_SYSTEM_PROMPT,
    DIAGRAM_LANGUAGE,
    TYPE_TEMPLATES,
)

__all__ = [
    "synthesize_prompt",
    "CHAT_SYSTEM_PROMPT",
    "DIAGRAM_LANGUAGE",
    "TYPE_TEMPLATES",
]
