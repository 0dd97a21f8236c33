"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import Any, Protocol


class OutboundSenderProtocol(Protocol):
    """Contrato mínimo para enviar payload já formatado ao provedor.

    Falhas do provedor propagam sem tradução.
    """

    async def send_message(self, payload: dict[str, Any]) -> dict[str, Any]: ...
