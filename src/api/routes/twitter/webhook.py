"""Endpoints de webhook do Twitter (Account Activity API).

Endpoints:
- GET /webhook/twitter[/...]: CRC (registro e checagem periódica)
- POST /webhook/twitter[/...]: eventos de DM

Fluxo:
1. GET: Twitter envia crc_token, respondemos {"response_token": "sha256=..."}
2. POST: Twitter envia eventos, processamos e respondemos 200 vazio

Segurança:
- Validação de x-twitter-webhooks-signature opcional (TWITTER_VERIFY_WEBHOOK_SIGNATURE)
- POST sempre responde 200, independente do resultado do processamento
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.twitter.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from api.connectors.twitter.webhook.verify import (
    WebhookChallengeError,
    build_crc_response_token,
)
from api.routes.twitter.webhook_runtime import dispatch_inbound_processing
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_twitter_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
@router.get("/{path:path}")
async def verify_webhook(request: Request) -> Response:
    """CRC do webhook — responde ao challenge do Twitter.

    Query params esperados:
    - crc_token: nonce a assinar com o consumer secret

    Returns:
        JSON {"response_token": "sha256=<base64>"} ou erro 403.
    """
    settings = get_twitter_settings()
    crc_token = request.query_params.get("crc_token")

    try:
        response_token = build_crc_response_token(
            crc_token=crc_token,
            consumer_secret=settings.consumer_secret,
        )
    except WebhookChallengeError as exc:
        logger.warning(
            "webhook_verification_failed",
            extra={
                "channel": "twitter",
                "error": str(exc),
            },
        )
        return Response(
            content="Forbidden",
            media_type="text/plain",
            status_code=status.HTTP_403_FORBIDDEN,
        )

    logger.info("webhook_verified", extra={"channel": "twitter"})
    return JSONResponse(content={"response_token": response_token})


@router.post("")
@router.post("/{path:path}")
async def receive_webhook(request: Request) -> Response:
    """Recebimento de eventos de DM.

    Validações:
    1. Assinatura HMAC (quando habilitada)
    2. JSON válido e objeto

    Returns:
        200 com corpo vazio, sempre.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))

    try:
        settings = get_twitter_settings()
        raw_body = await request.body()

        try:
            payload, signature_result = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=settings.consumer_secret or None,
                verify_signature=settings.verify_webhook_signature,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={
                    "channel": "twitter",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _acknowledge()
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={
                    "channel": "twitter",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _acknowledge()

        logger.info(
            "webhook_received",
            extra={
                "channel": "twitter",
                "correlation_id": get_correlation_id(),
                "signature_valid": signature_result.valid,
                "signature_skipped": signature_result.skipped,
                "payload_size": len(raw_body),
            },
        )

        try:
            await dispatch_inbound_processing(
                payload=payload,
                correlation_id=get_correlation_id(),
                settings=settings,
            )
        except Exception:
            logger.exception(
                "webhook_dispatch_failed",
                extra={
                    "channel": "twitter",
                    "correlation_id": get_correlation_id(),
                },
            )

        return _acknowledge()

    finally:
        reset_correlation_id(token)


def _acknowledge() -> Response:
    return Response(status_code=status.HTTP_200_OK)
