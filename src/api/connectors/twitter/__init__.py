"""Conector Twitter — adapter de borda para a Account Activity API.

Este módulo é o único ponto de IO para o canal Twitter.
Responsabilidades:
- Webhook (CRC, assinatura, parsing)
- Cliente de envio de DMs (tweepy)
- Modelos do formato de eventos de DM
"""

from .dm_client import TweepyDmClient, create_twitter_dm_client
from .models import (
    DirectMessageEvent,
    DirectMessageEventPayload,
    MessageData,
    QuickReplyOption,
    QuickReplyOptions,
    WebhookUpdate,
)
from .signature import SignatureResult, compute_signature, verify_twitter_signature

__all__ = [
    "DirectMessageEvent",
    "DirectMessageEventPayload",
    "MessageData",
    "QuickReplyOption",
    "QuickReplyOptions",
    "SignatureResult",
    "TweepyDmClient",
    "WebhookUpdate",
    "compute_signature",
    "create_twitter_dm_client",
    "verify_twitter_signature",
]
