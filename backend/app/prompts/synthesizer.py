from app.ir.diagram import DiagramRequest
from app.prompts.templates import BASE_PROMPT, TYPE_TEMPLATES


def synthesize_prompt(request: DiagramRequest) -> str:
    """Instruction prompt asking the model for a fenced Mermaid diagram."""
    base = BASE_PROMPT.format(description=request.description)
    return TYPE_TEMPLATES[request.type].format(base=base)
