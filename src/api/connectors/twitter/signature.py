"""Assinatura HMAC-SHA256 em base64 usada pelo Twitter.

O mesmo esquema serve ao CRC (GET com crc_token) e ao header
x-twitter-webhooks-signature dos POSTs: "sha256=" + base64(HMAC).
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_PREFIX = "sha256="
SIGNATURE_HEADER = "x-twitter-webhooks-signature"


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação de assinatura de POST."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def compute_signature(secret: str, message: bytes) -> str:
    """Calcula "sha256=" + base64(HMAC-SHA256(secret, message))."""
    digest = hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()
    return SIGNATURE_PREFIX + base64.b64encode(digest).decode("ascii")


def verify_twitter_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    enabled: bool = True,
) -> SignatureResult:
    """Valida x-twitter-webhooks-signature contra o corpo bruto.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        secret: Consumer secret
        enabled: Se False, validação é pulada

    Returns:
        SignatureResult (nunca levanta)
    """
    if not enabled:
        return SignatureResult(valid=True, skipped=True)

    if not secret:
        return SignatureResult(valid=False, error="missing_secret")

    received = headers.get(SIGNATURE_HEADER)
    if not received:
        return SignatureResult(valid=False, error="missing_signature")

    if not received.startswith(SIGNATURE_PREFIX):
        return SignatureResult(valid=False, error="invalid_signature_format")

    expected = compute_signature(secret, raw_body)
    if not hmac.compare_digest(expected, received):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
