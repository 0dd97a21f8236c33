"""Contrato de adapter de canal consumido pelo framework de bot.

O framework conhece apenas esta interface: traduz eventos do provedor
para IncomingMessage e OutgoingMessage para chamadas do provedor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from .normalizer import MessageNormalizerProtocol
from .outbound_sender import OutboundSenderProtocol
from .payload_builder import PayloadBuilderProtocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class MessageAdapterProtocol(
    MessageNormalizerProtocol,
    PayloadBuilderProtocol,
    OutboundSenderProtocol,
    Protocol,
):
    """Adapter bidirecional entre provedor e formato normalizado."""

    type: str
    requires_webhook: bool
    required_credentials: tuple[str, ...]
    receives: Mapping[str, Any]
    sends: Mapping[str, Any]
    retrieves_user_info: bool

    @property
    def bot_id(self) -> str: ...

    def is_own_update(self, raw_update: dict[str, Any]) -> bool: ...

    def crc_response_token(self, crc_token: str | None) -> str: ...
