"""Modelos do formato de DMs do Twitter (Account Activity API v1.1).

Inbound: WebhookUpdate / DirectMessageEvent (somente leitura do payload).
Outbound: DirectMessageEventPayload e partes (serializados com to_dict()).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MESSAGE_CREATE_EVENT_TYPE = "message_create"
QUICK_REPLY_OPTIONS_TYPE = "options"


@dataclass(frozen=True, slots=True)
class DirectMessageEvent:
    """Evento message_create recebido no webhook.

    Attributes:
        event_id: ID do evento (usado como mid)
        created_timestamp: Epoch em ms, como string (não validado)
        sender_id: Conta que enviou a DM
        text: Texto bruto, ainda com entidades HTML
        recipient_id: target.recipient_id, quando presente
        quick_reply_response: Resposta a quick reply, quando presente
    """

    event_id: str
    created_timestamp: str
    sender_id: str
    text: str = ""
    recipient_id: str | None = None
    quick_reply_response: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, event: dict[str, Any]) -> DirectMessageEvent:
        """Extrai campos do evento bruto.

        `message_data` é procurado em message_create e, na falta, no
        próprio evento. Texto ausente equivale a texto vazio.

        Raises:
            KeyError: Se message_create/sender_id estiverem ausentes.
        """
        message_create = event["message_create"]
        message_data = message_create.get("message_data") or event.get("message_data") or {}
        target = message_create.get("target") or {}
        return cls(
            event_id=event.get("id"),
            created_timestamp=event.get("created_timestamp"),
            sender_id=message_create["sender_id"],
            text=message_data.get("text") or "",
            recipient_id=target.get("recipient_id"),
            quick_reply_response=message_data.get("quick_reply_response"),
        )


@dataclass(frozen=True, slots=True)
class WebhookUpdate:
    """Corpo do webhook com eventos de DM."""

    for_user_id: str | None
    events: tuple[dict[str, Any], ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, body: dict[str, Any]) -> WebhookUpdate:
        return cls(
            for_user_id=body.get("for_user_id"),
            events=tuple(body.get("direct_message_events") or ()),
            raw=body,
        )

    @property
    def has_events(self) -> bool:
        return bool(self.events)

    def first_event(self) -> DirectMessageEvent:
        """Primeiro evento do lote (os demais são ignorados).

        Raises:
            IndexError: Se não houver eventos.
        """
        return DirectMessageEvent.from_dict(self.events[0])


@dataclass(frozen=True, slots=True)
class QuickReplyOption:
    """Opção de quick reply no formato Twitter."""

    label: str
    metadata: str

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "metadata": self.metadata}


@dataclass(frozen=True, slots=True)
class QuickReplyOptions:
    """Container fixo {type: "options", options: [...]}."""

    options: tuple[QuickReplyOption, ...]
    type: str = QUICK_REPLY_OPTIONS_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "options": [option.to_dict() for option in self.options],
        }


@dataclass(frozen=True, slots=True)
class MessageData:
    """message_data de envio; texto e quick_reply são independentes."""

    text: str | None = None
    quick_reply: QuickReplyOptions | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.text is not None:
            data["text"] = self.text
        if self.quick_reply is not None:
            data["quick_reply"] = self.quick_reply.to_dict()
        return data


@dataclass(frozen=True, slots=True)
class DirectMessageEventPayload:
    """Payload completo de direct_messages/events/new."""

    recipient_id: str
    message_data: MessageData

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": {
                "type": MESSAGE_CREATE_EVENT_TYPE,
                "message_create": {
                    "target": {"recipient_id": self.recipient_id},
                    "message_data": self.message_data.to_dict(),
                },
            }
        }
