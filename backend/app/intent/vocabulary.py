# backend/app/intent/vocabulary.py
"""
Trigger vocabulary and diagram-family pattern table.

PATTERN_TABLE is an ordered tuple: when a message carries phrases for
several families, the group declared first wins.
"""

from dataclasses import dataclass
from typing import Tuple

from app.ir.diagram import DiagramType


@dataclass(frozen=True)
class PatternGroup:
    """Trigger phrases that identify one diagram family."""
    diagram_type: DiagramType
    phrases: Tuple[str, ...]


# Phrases that gate intent detection
TRIGGER_VOCABULARY: Tuple[str, ...] = (
    # General diagram terms
    "diagram", "chart", "graph", "visualization", "visual", "draw", "create",

    # Specific diagram types
    "flowchart", "flow chart", "flow diagram",
    "mindmap", "mind map", "concept map",
    "sequence diagram", "sequence chart",
    "class diagram", "uml",
    "gantt", "timeline", "schedule",
    "org chart", "organizational chart",
    "network diagram", "architecture",

    # Action words
    "show me", "illustrate", "map out", "visualize", "outline",
)


PATTERN_TABLE: Tuple[PatternGroup, ...] = (
    PatternGroup(
        DiagramType.FLOWCHART,
        ("flowchart", "flow chart", "flow diagram", "process flow", "workflow"),
    ),
    PatternGroup(
        DiagramType.MINDMAP,
        ("mindmap", "mind map", "concept map", "brain storm", "brainstorm"),
    ),
    PatternGroup(
        DiagramType.SEQUENCE,
        ("sequence diagram", "sequence chart", "interaction", "timeline", "steps"),
    ),
    PatternGroup(
        DiagramType.CLASS,
        ("class diagram", "uml", "object model", "relationship"),
    ),
    PatternGroup(
        DiagramType.GANTT,
        ("gantt", "project timeline", "schedule", "milestone"),
    ),
)


def family_order() -> Tuple[DiagramType, ...]:
    """Diagram families in tie-break order."""
    return tuple(group.diagram_type for group in PATTERN_TABLE)
