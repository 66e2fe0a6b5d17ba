"""
Mermaid source extraction from free-form model replies.

Two passes, first hit wins:
1. a fenced block tagged ``mermaid`` (any case)
2. the first fenced block of any kind, kept only if it mentions one of
   the family keywords below

No grammar checking is done. Anything past keyword presence is the
renderer's problem.
"""

import logging
import re
from typing import Optional, Tuple

from app.prompts.templates import DIAGRAM_LANGUAGE

logger = logging.getLogger(__name__)

# Family-defining Mermaid keywords, matched case-sensitively
MERMAID_KEYWORDS: Tuple[str, ...] = (
    "graph",
    "flowchart",
    "sequenceDiagram",
    "classDiagram",
    "mindmap",
    "gantt",
)

_TAGGED_BLOCK = re.compile(
    r"```" + re.escape(DIAGRAM_LANGUAGE) + r"[ \t]*\r?\n(.*?)\r?\n[ \t]*```",
    re.IGNORECASE | re.DOTALL,
)
_ANY_BLOCK = re.compile(r"```(.*?)```", re.DOTALL)
_INFO_STRING = re.compile(r"[\w+.-]+")


def _strip_info_string(body: str) -> str:
    # "```python\n..." -> drop the tag line, but a lone "mindmap"/"gantt"
    # first line is diagram source, not a tag
    first_line, sep, rest = body.partition("\n")
    tag = first_line.strip()
    if sep and tag and _INFO_STRING.fullmatch(tag) and tag not in MERMAID_KEYWORDS:
        return rest
    return body


def looks_like_mermaid(code: str) -> bool:
    return any(keyword in code for keyword in MERMAID_KEYWORDS)


def extract_code(response_text: str) -> Optional[str]:
    """Mermaid source embedded in a model reply, or None."""
    if not response_text:
        return None

    match = _TAGGED_BLOCK.search(response_text)
    if match:
        code = match.group(1).strip()
        if code:
            return code

    match = _ANY_BLOCK.search(response_text)
    if match:
        code = _strip_info_string(match.group(1)).strip()
        if code and looks_like_mermaid(code):
            logger.debug("[CodeExtractor] Untagged block accepted by keyword")
            return code

    return None
