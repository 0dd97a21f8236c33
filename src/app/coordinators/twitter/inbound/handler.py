"""Processamento inbound: filtra eco, normaliza e emite para o framework.

Fluxo por webhook: filtro de dono → tradução → emissão. Falhas de
tradução são reportadas e nunca chegam à resposta HTTP do provedor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from api.normalizers.twitter import has_direct_message_events
from utils.errors import InboundTranslationError

if TYPE_CHECKING:
    from app.protocols.error_reporter import ErrorReporterProtocol
    from app.protocols.message_adapter import MessageAdapterProtocol
    from app.protocols.message_sink import IncomingMessageSinkProtocol
    from app.protocols.models import IncomingMessage

logger = logging.getLogger(__name__)

InboundStatus = Literal["emitted", "no_events", "own_event", "translation_failed"]


@dataclass(frozen=True, slots=True)
class InboundProcessingResult:
    """Resultado do processamento de um webhook."""

    status: InboundStatus
    message: IncomingMessage | None = None


async def process_inbound_payload(
    payload: dict[str, Any],
    correlation_id: str,
    adapter: MessageAdapterProtocol,
    sink: IncomingMessageSinkProtocol,
    error_reporter: ErrorReporterProtocol,
) -> InboundProcessingResult:
    """Processa um webhook de DM.

    Sem logs com PII (texto da DM nunca é logado).

    Args:
        payload: Corpo do webhook
        correlation_id: ID de correlação para rastreamento
        adapter: Adapter do canal (filtro + tradução)
        sink: Destino das mensagens normalizadas
        error_reporter: Destino de erros de tradução

    Returns:
        InboundProcessingResult com o desfecho
    """
    if not has_direct_message_events(payload):
        logger.debug(
            "inbound_ignored",
            extra={"correlation_id": correlation_id, "reason": "no_direct_message_events"},
        )
        return InboundProcessingResult(status="no_events")

    try:
        message = _translate_unless_own(payload, adapter)
    except InboundTranslationError as error:
        error_reporter.report(error)
        logger.warning(
            "inbound_translation_failed",
            extra={
                "correlation_id": correlation_id,
                "error_type": type(error.original).__name__,
            },
        )
        return InboundProcessingResult(status="translation_failed")

    if message is None:
        logger.info(
            "inbound_ignored",
            extra={"correlation_id": correlation_id, "reason": "own_event"},
        )
        return InboundProcessingResult(status="own_event")

    await sink.emit(message)

    logger.info(
        "inbound_processed",
        extra={
            "correlation_id": correlation_id,
            "mid": message.message.mid,
            "has_text": message.message.text is not None,
        },
    )
    return InboundProcessingResult(status="emitted", message=message)


def _translate_unless_own(
    payload: dict[str, Any],
    adapter: MessageAdapterProtocol,
) -> IncomingMessage | None:
    """None para eco da própria conta; senão a mensagem normalizada.

    Raises:
        InboundTranslationError: Qualquer falha ao ler o payload.
    """
    try:
        if adapter.is_own_update(payload):
            return None
        return adapter.format_update(payload)
    except Exception as exc:
        raise InboundTranslationError("format_update", exc) from exc
