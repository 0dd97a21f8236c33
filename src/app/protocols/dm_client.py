"""Protocolo do cliente de API de DMs.

Evita dependência direta da camada api (tweepy fica em api/connectors).
"""

from __future__ import annotations

from typing import Any, Protocol


class TwitterDmClientProtocol(Protocol):
    """Contrato mínimo para o primitivo de envio de DM.

    Retry, timeout e backoff são responsabilidade da implementação.
    """

    async def create_direct_message_event(
        self,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...
