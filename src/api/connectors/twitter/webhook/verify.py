"""Resposta ao CRC (challenge-response check) exigido pelo Twitter.

O Twitter chama o webhook com ?crc_token=... no registro e
periodicamente; a resposta deve ser o HMAC do token com o consumer secret.
"""

from __future__ import annotations

from ..signature import compute_signature


class WebhookChallengeError(ValueError):
    """Erro de verificação do desafio do webhook."""


def build_crc_response_token(crc_token: str | None, consumer_secret: str | None) -> str:
    """Calcula o response_token do CRC.

    Args:
        crc_token: Valor de crc_token (string vazia é válida)
        consumer_secret: Consumer secret configurado

    Raises:
        WebhookChallengeError: Se secret ou token estiverem ausentes

    Returns:
        "sha256=" + base64(HMAC-SHA256(consumer_secret, crc_token))
    """
    if not consumer_secret:
        raise WebhookChallengeError("missing_consumer_secret")

    if crc_token is None:
        raise WebhookChallengeError("missing_crc_token")

    return compute_signature(consumer_secret, crc_token.encode("utf-8"))
