import re
from typing import Iterable, Optional

from app.intent.vocabulary import TRIGGER_VOCABULARY

_WHITESPACE = re.compile(r"\s+")


def _compile_phrase_patterns(phrases: Iterable[str]):
    return [
        re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE)
        for phrase in phrases
    ]


_DEFAULT_PATTERNS = _compile_phrase_patterns(TRIGGER_VOCABULARY)


def extract_description(text: str, vocabulary: Optional[Iterable[str]] = None) -> str:
    """
    Strip trigger vocabulary from a request, leaving what the diagram is about.

    Phrases are removed as whole words, in vocabulary order, and the
    leftover whitespace is collapsed. If nothing is left the original text
    comes back untouched.
    """
    if not text:
        return text

    patterns = (
        _DEFAULT_PATTERNS if vocabulary is None
        else _compile_phrase_patterns(vocabulary)
    )

    description = text
    for pattern in patterns:
        description = pattern.sub("", description)

    description = _WHITESPACE.sub(" ", description).strip()
    return description or text
