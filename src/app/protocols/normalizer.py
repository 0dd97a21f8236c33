"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import IncomingMessage


class MessageNormalizerProtocol(Protocol):
    """Contrato mínimo para normalização de payload inbound."""

    def format_update(self, raw_update: dict[str, Any]) -> IncomingMessage: ...
