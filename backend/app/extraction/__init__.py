from app.extraction.code_extractor import (
    MERMAID_KEYWORDS,
    extract_code,
    looks_like_mermaid,
)

__all__ = ["MERMAID_KEYWORDS", "extract_code", "looks_like_mermaid"]
