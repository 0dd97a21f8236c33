"""Protocolo de emissão de mensagens para o framework de bot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import IncomingMessage


class IncomingMessageSinkProtocol(Protocol):
    """Recebe mensagens normalizadas (roteamento é do framework)."""

    async def emit(self, message: IncomingMessage) -> None: ...
