"""Adapters concretos para Twitter (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from api.connectors.twitter.webhook.verify import build_crc_response_token
from api.normalizers.twitter import format_update, is_own_event
from api.payload_builders.twitter import build_full_payload, build_send_summary
from app.protocols.message_adapter import MessageAdapterProtocol

if TYPE_CHECKING:
    from app.protocols.dm_client import TwitterDmClientProtocol
    from app.protocols.models import IncomingMessage, OutgoingMessage, SendSummary
    from config.settings import TwitterSettings

logger = logging.getLogger(__name__)

TWITTER_DM_RECEIVES = MappingProxyType(
    {
        "text": True,
        "attachment": MappingProxyType(
            {
                "audio": False,
                "file": False,
                "image": False,
                "video": False,
                "location": False,
                "fallback": False,
            }
        ),
        "echo": False,
        "read": False,
        "delivery": False,
        "postback": False,
        "quick_reply": False,
    }
)

TWITTER_DM_SENDS = MappingProxyType(
    {
        "text": True,
        "quick_reply": True,
        "location_quick_reply": False,
        "sender_action": MappingProxyType(
            {"typing_on": False, "typing_off": False, "mark_seen": False}
        ),
        "attachment": MappingProxyType(
            {"audio": False, "file": False, "image": False, "video": False}
        ),
    }
)


class TwitterDmAdapter(MessageAdapterProtocol):
    """Adapter de DMs do Twitter para o formato normalizado do framework.

    Configuração e cliente são fixos durante a vida do adapter.
    """

    type = "twitter-dm"
    requires_webhook = True
    required_credentials = (
        "consumer_key",
        "consumer_secret",
        "access_token",
        "access_token_secret",
        "owner_id",
    )
    receives = TWITTER_DM_RECEIVES
    sends = TWITTER_DM_SENDS
    retrieves_user_info = False

    def __init__(self, settings: TwitterSettings, client: TwitterDmClientProtocol) -> None:
        self._settings = settings
        self._client = client

    @property
    def bot_id(self) -> str:
        return self._settings.bot_id

    @property
    def owner_id(self) -> str:
        return self._settings.owner_id

    def crc_response_token(self, crc_token: str | None) -> str:
        return build_crc_response_token(crc_token, self._settings.consumer_secret)

    def is_own_update(self, raw_update: dict[str, Any]) -> bool:
        return is_own_event(raw_update, self._settings.owner_id)

    def format_update(self, raw_update: dict[str, Any]) -> IncomingMessage:
        return format_update(raw_update)

    def format_outgoing_message(self, message: OutgoingMessage) -> dict[str, Any]:
        return build_full_payload(message)

    async def send_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._client.create_direct_message_event(payload)

    def create_send_summary(
        self,
        sent_payload: dict[str, Any],
        raw_body: dict[str, Any],
    ) -> SendSummary:
        return build_send_summary(sent_payload, raw_body)


class LoggingMessageSink:
    """Sink padrão: registra a chegada da mensagem (sem texto).

    Hosts substituem por um sink que entrega ao roteador do framework.
    """

    async def emit(self, message: IncomingMessage) -> None:
        logger.info(
            "twitter_dm_update_emitted",
            extra={
                "mid": message.message.mid,
                "has_text": message.message.text is not None,
            },
        )


class LoggingErrorReporter:
    """Reporter padrão: loga o erro com traceback."""

    def report(self, error: Exception) -> None:
        logger.error(
            "twitter_dm_update_error",
            exc_info=error,
            extra={"error_type": type(error).__name__},
        )
