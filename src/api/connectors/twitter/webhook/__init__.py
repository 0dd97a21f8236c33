"""Webhook Twitter: CRC, assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_twitter_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)
from .verify import WebhookChallengeError, build_crc_response_token

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookChallengeError",
    "WebhookRequestError",
    "build_crc_response_token",
    "parse_webhook_request",
    "verify_twitter_signature",
]
