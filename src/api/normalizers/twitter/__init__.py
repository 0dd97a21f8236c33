"""Normalizer Twitter — extração e normalização de DMs.

Responsabilidades:
- Extrair o primeiro evento de DM do webhook (Account Activity API)
- Filtrar eco de mensagens enviadas pela própria conta
- Normalizar para o modelo interno IncomingMessage
"""

from .extractor import (
    extract_first_event,
    has_direct_message_events,
    is_own_event,
    parse_timestamp_ms,
    unescape_text,
)
from .normalizer import format_update

__all__ = [
    "extract_first_event",
    "format_update",
    "has_direct_message_events",
    "is_own_event",
    "parse_timestamp_ms",
    "unescape_text",
]
