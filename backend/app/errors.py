"""
Service-level errors.

The intent/extraction core never raises; these only cover the outbound
model call and its configuration.
"""


class DiagramServiceError(Exception):
    """Base class for errors raised by the chat service layer."""


class ConfigurationError(DiagramServiceError):
    """Required configuration (e.g. the LLM API key) is missing."""


class GenerationError(DiagramServiceError):
    """The text-generation call failed or returned an unusable payload."""
