"""Normalizer Twitter — converte webhook de DM para IncomingMessage."""

from __future__ import annotations

from typing import Any

from api.normalizers.twitter.extractor import (
    extract_first_event,
    extract_text,
    parse_timestamp_ms,
)
from app.protocols.models import IncomingMessage, IncomingMessageContent, Participant


def format_update(raw_update: dict[str, Any]) -> IncomingMessage:
    """Normaliza o primeiro evento de DM do webhook.

    Args:
        raw_update: Corpo do webhook (for_user_id + direct_message_events)

    Returns:
        IncomingMessage com sender/recipient/mid verbatim; `text` só
        quando o texto original não é vazio.

    Raises:
        KeyError, IndexError, TypeError: Payload malformado.
    """
    event = extract_first_event(raw_update)
    return IncomingMessage(
        sender=Participant(id=event.sender_id),
        recipient=Participant(id=raw_update.get("for_user_id")),
        timestamp=parse_timestamp_ms(event.created_timestamp),
        message=IncomingMessageContent(
            mid=event.event_id,
            seq=None,
            text=extract_text(event),
        ),
        raw=raw_update,
    )
