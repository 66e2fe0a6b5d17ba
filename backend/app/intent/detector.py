#backend\app\intent\detector.py

import logging
from typing import Optional

from app.intent.classifier import IntentClassifier
from app.intent.description import extract_description
from app.intent.resolver import TypeResolver
from app.ir.diagram import DiagramRequest

logger = logging.getLogger(__name__)


class DiagramRequestDetector:
    """
    Request-side entry point of the pipeline:
    1. Intent classification (any trigger phrase)
    2. Family resolution (ordered pattern table)
    3. Description extraction (trigger phrases stripped)
    """

    def __init__(
        self,
        classifier: Optional[IntentClassifier] = None,
        resolver: Optional[TypeResolver] = None,
    ):
        self.classifier = classifier or IntentClassifier()
        self.resolver = resolver or TypeResolver()

    def detect(self, text: str) -> Optional[DiagramRequest]:
        if not self.classifier.classify(text):
            return None

        request = DiagramRequest(
            type=self.resolver.resolve(text),
            description=extract_description(text),
            original_text=text,
        )
        logger.debug(
            "[DiagramRequestDetector] %s request: %r",
            request.type.value,
            request.description,
        )
        return request


_default_detector = DiagramRequestDetector()


def detect_diagram_request(text: str) -> Optional[DiagramRequest]:
    """DiagramRequest for the text, or None when no diagram is asked for."""
    return _default_detector.detect(text)
