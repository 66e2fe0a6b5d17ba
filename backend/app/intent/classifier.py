import logging
from typing import Iterable, Optional

from app.intent.vocabulary import TRIGGER_VOCABULARY

logger = logging.getLogger(__name__)


class IntentClassifier:
    """
    Decides whether a chat message asks for a diagram.

    Plain case-insensitive substring containment against the trigger
    vocabulary. Coarse on purpose: "created" or "graphics" also count.
    """

    def __init__(self, vocabulary: Optional[Iterable[str]] = None):
        phrases = TRIGGER_VOCABULARY if vocabulary is None else vocabulary
        self.vocabulary = tuple(p.lower() for p in phrases)

    def matches(self, text: str) -> list:
        """All vocabulary phrases contained in the text."""
        if not text:
            return []
        text_lower = text.lower()
        return [phrase for phrase in self.vocabulary if phrase in text_lower]

    def classify(self, text: str) -> bool:
        if not text:
            return False

        text_lower = text.lower()
        for phrase in self.vocabulary:
            if phrase in text_lower:
                logger.debug("[IntentClassifier] Matched trigger %r", phrase)
                return True
        return False


_default_classifier = IntentClassifier()


def classify(text: str) -> bool:
    """True if the text contains any trigger phrase."""
    return _default_classifier.classify(text)
