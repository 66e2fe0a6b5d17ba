import logging
from typing import Optional, Sequence

from app.intent.vocabulary import PATTERN_TABLE, PatternGroup
from app.ir.diagram import DiagramType

logger = logging.getLogger(__name__)


class TypeResolver:
    """
    Maps a diagram request to one family.

    Walks the pattern table in declared order and returns the first group
    with a substring hit. Where the phrase sits in the text plays no part.
    """

    def __init__(self, table: Optional[Sequence[PatternGroup]] = None):
        self.table = tuple(PATTERN_TABLE if table is None else table)

    def resolve(self, text: str) -> DiagramType:
        text_lower = (text or "").lower()

        for group in self.table:
            for phrase in group.phrases:
                if phrase.lower() in text_lower:
                    logger.debug(
                        "[TypeResolver] %r -> %s", phrase, group.diagram_type.value
                    )
                    return group.diagram_type

        return DiagramType.GENERIC


_default_resolver = TypeResolver()


def resolve_type(text: str) -> DiagramType:
    """Diagram family for text already classified as a diagram request."""
    return _default_resolver.resolve(text)
