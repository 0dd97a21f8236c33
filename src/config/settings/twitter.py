"""Settings específicas de Twitter/X.

Configurações do canal Twitter via Account Activity API (DMs).
Cada canal deve ter seu próprio arquivo de settings para isolamento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Endpoint v1.1 de envio de DM (suporta quick replies)
TWITTER_DM_EVENTS_ENDPOINT: str = "direct_messages/events/new"

WEBHOOK_PROCESSING_MODES = frozenset({"async", "inline"})


@dataclass(frozen=True)
class TwitterSettings:
    """Configurações do canal Twitter/X.

    Imutável durante o ciclo de vida do adapter.

    Attributes:
        consumer_key: API Key (Consumer Key)
        consumer_secret: API Secret (Consumer Secret), também usado no CRC
        access_token: Access Token da conta do bot
        access_token_secret: Access Token Secret da conta do bot
        owner_id: ID da conta do bot (eventos dela são descartados)
        verify_webhook_signature: Valida x-twitter-webhooks-signature no POST
        webhook_processing_mode: Modo de processamento do webhook (async|inline)
    """

    # Credenciais
    consumer_key: str = ""
    consumer_secret: str = ""
    access_token: str = ""
    access_token_secret: str = ""
    owner_id: str = ""

    # Webhook
    verify_webhook_signature: bool = False
    webhook_processing_mode: str = "async"

    @property
    def bot_id(self) -> str:
        """ID da conta derivado do prefixo do access token."""
        return self.access_token.split("-")[0]

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Twitter.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.consumer_key:
            errors.append("TWITTER_CONSUMER_KEY não configurado")

        if not self.consumer_secret:
            errors.append("TWITTER_CONSUMER_SECRET não configurado")

        if not self.access_token:
            errors.append("TWITTER_ACCESS_TOKEN não configurado")

        if not self.access_token_secret:
            errors.append("TWITTER_ACCESS_TOKEN_SECRET não configurado")

        if not self.owner_id:
            errors.append("TWITTER_OWNER_ID não configurado")

        if self.webhook_processing_mode not in WEBHOOK_PROCESSING_MODES:
            errors.append(
                "TWITTER_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'"
            )

        return errors


def _load_from_env() -> TwitterSettings:
    """Carrega TwitterSettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "").lower()
    default_processing_mode = (
        "inline" if environment in ("development", "dev", "test") else "async"
    )
    return TwitterSettings(
        consumer_key=os.getenv("TWITTER_CONSUMER_KEY", ""),
        consumer_secret=os.getenv("TWITTER_CONSUMER_SECRET", ""),
        access_token=os.getenv("TWITTER_ACCESS_TOKEN", ""),
        access_token_secret=os.getenv("TWITTER_ACCESS_TOKEN_SECRET", ""),
        owner_id=os.getenv("TWITTER_OWNER_ID", ""),
        verify_webhook_signature=os.getenv(
            "TWITTER_VERIFY_WEBHOOK_SIGNATURE", ""
        ).lower()
        in ("true", "1", "yes"),
        webhook_processing_mode=os.getenv(
            "TWITTER_WEBHOOK_PROCESSING_MODE", default_processing_mode
        ).lower(),
    )


@lru_cache(maxsize=1)
def get_twitter_settings() -> TwitterSettings:
    """Retorna instância cacheada de TwitterSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
