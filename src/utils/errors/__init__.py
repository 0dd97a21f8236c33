"""Exceções utilitárias compartilhadas."""

from .exceptions import ConfigurationError, InboundTranslationError

__all__ = [
    "ConfigurationError",
    "InboundTranslationError",
]
