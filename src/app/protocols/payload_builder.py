"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import OutgoingMessage, SendSummary


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir payloads de envio."""

    def format_outgoing_message(self, message: OutgoingMessage) -> dict[str, Any]: ...

    def create_send_summary(
        self,
        sent_payload: dict[str, Any],
        raw_body: dict[str, Any],
    ) -> SendSummary: ...
