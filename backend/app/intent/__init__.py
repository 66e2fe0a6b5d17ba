"""
Diagram intent detection.

Decides whether a chat message asks for a diagram, which family it wants
and what it should be about.
"""

from app.intent.classifier import IntentClassifier, classify
from app.intent.description import extract_description
from app.intent.detector import DiagramRequestDetector, detect_diagram_request
from app.intent.resolver import TypeResolver, resolve_type
from app.intent.vocabulary import (
    PATTERN_TABLE,
    TRIGGER_VOCABULARY,
    PatternGroup,
    family_order,
)

__all__ = [
    "IntentClassifier",
    "TypeResolver",
    "DiagramRequestDetector",
    "PatternGroup",
    "PATTERN_TABLE",
    "TRIGGER_VOCABULARY",
    "classify",
    "resolve_type",
    "extract_description",
    "detect_diagram_request",
    "family_order",
]
