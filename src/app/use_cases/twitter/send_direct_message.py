"""Use case para envio outbound de DM no Twitter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import OutgoingMessage

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.message_adapter import MessageAdapterProtocol
    from app.protocols.models import SendSummary

logger = logging.getLogger(__name__)


class SendTwitterDirectMessageUseCase:
    """Orquestra formatação, envio e confirmação outbound.

    Não há retry nem tradução de erro: falhas do cliente chegam ao
    chamador como foram levantadas.
    """

    def __init__(self, adapter: MessageAdapterProtocol) -> None:
        self._adapter = adapter

    async def execute(self, message: OutgoingMessage | Mapping[str, Any]) -> SendSummary:
        """Envia a mensagem e retorna {recipient_id, message_id}."""
        if not isinstance(message, OutgoingMessage):
            message = OutgoingMessage.from_dict(message)

        payload = self._adapter.format_outgoing_message(message)
        raw_body = await self._adapter.send_message(payload)
        summary = self._adapter.create_send_summary(payload, raw_body)

        logger.info(
            "outbound_dm_sent",
            extra={
                "message_id": summary.message_id,
                "has_text": message.message.text is not None,
                "quick_reply_count": len(message.message.quick_replies or ()),
            },
        )
        return summary
