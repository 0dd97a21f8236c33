"""Router principal do Twitter — agrega todos os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.twitter.webhook import router as webhook_router

# URL registrada no Twitter, com ou sem sufixo de ambiente
TWITTER_WEBHOOK_PREFIX = "/webhook/twitter"

router = APIRouter()

# Webhook endpoints (GET para CRC, POST para eventos)
router.include_router(webhook_router, prefix=TWITTER_WEBHOOK_PREFIX)
