"""Cliente de envio de DMs via tweepy (OAuth 1.0a, API v1.1).

tweepy é síncrono (requests); a chamada roda em thread para não
bloquear o event loop. Exceções do tweepy propagam sem tradução.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import tweepy
from tweepy.parsers import JSONParser

from config.settings.twitter import TWITTER_DM_EVENTS_ENDPOINT

if TYPE_CHECKING:
    from config.settings import TwitterSettings

logger = logging.getLogger(__name__)


class TweepyDmClient:
    """Implementa TwitterDmClientProtocol sobre tweepy.API."""

    def __init__(self, api: tweepy.API) -> None:
        self._api = api

    async def create_direct_message_event(
        self,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Envia payload para direct_messages/events/new.

        Args:
            payload: DirectMessageEventPayload serializado

        Returns:
            Corpo JSON da resposta do Twitter

        Raises:
            tweepy.TweepyException: Erro HTTP ou de API, sem retry
        """
        try:
            response = await asyncio.to_thread(self._post_event, payload)
        except tweepy.TweepyException as exc:
            logger.warning(
                "twitter_dm_send_failed",
                extra={
                    "endpoint": TWITTER_DM_EVENTS_ENDPOINT,
                    "error_type": type(exc).__name__,
                    "status_code": _status_code(exc),
                },
            )
            raise

        logger.debug(
            "twitter_dm_send_succeeded",
            extra={"endpoint": TWITTER_DM_EVENTS_ENDPOINT},
        )
        return response

    def _post_event(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._api.request(
            "POST",
            TWITTER_DM_EVENTS_ENDPOINT,
            json_payload=payload,
        )


def _status_code(exc: tweepy.TweepyException) -> int | None:
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None)


def create_twitter_dm_client(settings: TwitterSettings | None = None) -> TweepyDmClient:
    """Factory para criar cliente de DMs com credenciais do ambiente.

    Args:
        settings: TwitterSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente configurado (sem retry; retry_count padrão do tweepy é 0).
    """
    # Import local para evitar dependência circular
    from config.settings import get_twitter_settings

    twitter = settings or get_twitter_settings()
    auth = tweepy.OAuth1UserHandler(
        twitter.consumer_key,
        twitter.consumer_secret,
        twitter.access_token,
        twitter.access_token_secret,
    )
    return TweepyDmClient(tweepy.API(auth, parser=JSONParser()))
