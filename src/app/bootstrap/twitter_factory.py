"""Factory de wiring para Twitter (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.twitter_adapters import (
    LoggingErrorReporter,
    LoggingMessageSink,
    TwitterDmAdapter,
)
from app.use_cases.twitter.send_direct_message import SendTwitterDirectMessageUseCase

if TYPE_CHECKING:
    from app.protocols.dm_client import TwitterDmClientProtocol
    from config.settings import TwitterSettings


def create_twitter_dm_adapter(
    settings: TwitterSettings | None = None,
    client: TwitterDmClientProtocol | None = None,
) -> TwitterDmAdapter:
    """Cria adapter com settings e cliente tweepy do ambiente."""
    # Import local para evitar dependência circular
    from api.connectors.twitter.dm_client import create_twitter_dm_client
    from config.settings import get_twitter_settings

    twitter = settings or get_twitter_settings()
    return TwitterDmAdapter(
        settings=twitter,
        client=client or create_twitter_dm_client(twitter),
    )


def create_send_direct_message_use_case(
    adapter: TwitterDmAdapter | None = None,
) -> SendTwitterDirectMessageUseCase:
    """Cria use case outbound com dependências injetadas."""
    return SendTwitterDirectMessageUseCase(adapter=adapter or create_twitter_dm_adapter())


def create_message_sink() -> LoggingMessageSink:
    """Cria sink padrão de mensagens inbound."""
    return LoggingMessageSink()


def create_error_reporter() -> LoggingErrorReporter:
    """Cria reporter padrão de erros inbound."""
    return LoggingErrorReporter()
