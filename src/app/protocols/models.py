"""Modelos canônicos de mensagem trocados com o framework de bot.

Formato normalizado, independente de provedor:
- IncomingMessage: produzido a partir de eventos inbound
- OutgoingMessage: consumido para envio outbound
- SendSummary: confirmação mínima de envio

Campos opcionais ausentes não aparecem em `to_dict()`: o framework
decide pela presença da chave, não pelo valor.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Participant:
    """Remetente ou destinatário identificado pelo ID do provedor."""

    id: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id}


@dataclass(frozen=True, slots=True)
class IncomingMessageContent:
    """Conteúdo de mensagem recebida.

    Attributes:
        mid: ID da mensagem no provedor
        seq: Sempre None (provedor não numera mensagens)
        text: Texto já sem entidades HTML; None quando o texto era vazio
    """

    mid: str
    seq: None = None
    text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"mid": self.mid, "seq": self.seq}
        if self.text is not None:
            data["text"] = self.text
        return data


@dataclass(frozen=True, slots=True)
class IncomingMessage:
    """Mensagem recebida normalizada.

    `timestamp` é epoch em milissegundos; pode ser NaN (float) quando o
    provedor envia timestamp não numérico.
    """

    sender: Participant
    recipient: Participant
    timestamp: int | float
    message: IncomingMessageContent
    raw: Mapping[str, Any] | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw": self.raw,
            "sender": self.sender.to_dict(),
            "recipient": self.recipient.to_dict(),
            "timestamp": self.timestamp,
            "message": self.message.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class QuickReply:
    """Opção de resposta rápida no formato do framework."""

    title: str
    payload: str


@dataclass(frozen=True, slots=True)
class OutgoingMessageContent:
    """Conteúdo a enviar. Texto e quick replies podem coexistir."""

    text: str | None = None
    quick_replies: tuple[QuickReply, ...] | None = None


@dataclass(frozen=True, slots=True)
class OutgoingMessage:
    """Mensagem a enviar no formato normalizado."""

    recipient: Participant
    message: OutgoingMessageContent

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OutgoingMessage:
        """Constrói a partir do dict do framework.

        Raises:
            KeyError: Se recipient.id ou message estiverem ausentes.
        """
        message = data["message"]
        raw_quick_replies = message.get("quick_replies")
        quick_replies = None
        if raw_quick_replies is not None:
            quick_replies = tuple(
                QuickReply(title=item["title"], payload=item["payload"])
                for item in raw_quick_replies
            )
        return cls(
            recipient=Participant(id=data["recipient"]["id"]),
            message=OutgoingMessageContent(
                text=message.get("text"),
                quick_replies=quick_replies,
            ),
        )


@dataclass(frozen=True, slots=True)
class SendSummary:
    """Confirmação mínima de envio (IDs atribuídos pelo provedor)."""

    recipient_id: str
    message_id: str

    def to_dict(self) -> dict[str, str]:
        return {"recipient_id": self.recipient_id, "message_id": self.message_id}
