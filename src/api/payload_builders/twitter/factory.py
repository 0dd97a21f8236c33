"""Montagem do payload de envio de DM e do resumo de resposta."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.twitter.models import DirectMessageEventPayload, MessageData
from api.payload_builders.twitter.quick_reply import QuickReplyPayloadBuilder
from api.payload_builders.twitter.text import TextPayloadBuilder
from app.protocols.models import SendSummary

if TYPE_CHECKING:
    from app.protocols.models import OutgoingMessage

_TEXT_BUILDER = TextPayloadBuilder()
_QUICK_REPLY_BUILDER = QuickReplyPayloadBuilder()


def build_full_payload(message: OutgoingMessage) -> dict[str, Any]:
    """Constrói o payload de direct_messages/events/new.

    Texto e quick_reply são preenchidos de forma independente; ambos
    podem coexistir no mesmo message_data.

    Args:
        message: Mensagem normalizada

    Returns:
        Payload {event: {type: message_create, message_create: {...}}}
    """
    message_data = MessageData(
        text=_TEXT_BUILDER.build(message),
        quick_reply=_QUICK_REPLY_BUILDER.build(message),
    )
    return DirectMessageEventPayload(
        recipient_id=message.recipient.id,
        message_data=message_data,
    ).to_dict()


def build_send_summary(
    sent_payload: dict[str, Any],
    raw_body: dict[str, Any],
) -> SendSummary:
    """Extrai {recipient_id, message_id} da resposta do Twitter.

    A resposta não é validada: campos ausentes levantam KeyError/TypeError.
    """
    event = raw_body["event"]
    return SendSummary(
        recipient_id=event["message_create"]["target"]["recipient_id"],
        message_id=event["id"],
    )
