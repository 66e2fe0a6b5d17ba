from enum import Enum

from pydantic import BaseModel, ConfigDict


class DiagramType(str, Enum):
    """Diagram families the pipeline can ask the model for."""
    FLOWCHART = "flowchart"
    MINDMAP = "mindmap"
    SEQUENCE = "sequence"
    CLASS = "class"
    GANTT = "gantt"
    GENERIC = "generic"  # intent detected, no specific family matched


class DiagramRequest(BaseModel):
    """
    A recognised diagram request.

    Built from a single user message, consumed by the prompt synthesizer
    and then dropped. Never mutated.
    """
    model_config = ConfigDict(frozen=True)

    type: DiagramType
    description: str
    original_text: str
