"""Runtime helpers para processamento do webhook Twitter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.routes.twitter.webhook_runtime_tasks import InboundTaskRunner
from app.coordinators.twitter.inbound.handler import process_inbound_payload

if TYPE_CHECKING:
    from app.protocols.error_reporter import ErrorReporterProtocol
    from app.protocols.message_adapter import MessageAdapterProtocol
    from app.protocols.message_sink import IncomingMessageSinkProtocol

logger = logging.getLogger(__name__)

_task_runner = InboundTaskRunner()


@dataclass(frozen=True, slots=True)
class InboundDependencies:
    """Colaboradores do processamento inbound."""

    adapter: MessageAdapterProtocol
    sink: IncomingMessageSinkProtocol
    error_reporter: ErrorReporterProtocol


_inbound_dependencies: InboundDependencies | None = None


def configure_inbound_dependencies(
    *,
    adapter: MessageAdapterProtocol | None = None,
    sink: IncomingMessageSinkProtocol | None = None,
    error_reporter: ErrorReporterProtocol | None = None,
) -> InboundDependencies:
    """Define os colaboradores inbound (hosts plugam aqui o próprio sink).

    Colaboradores omitidos usam as implementações padrão do bootstrap.
    """
    global _inbound_dependencies
    from app.bootstrap.twitter_factory import (
        create_error_reporter,
        create_message_sink,
        create_twitter_dm_adapter,
    )

    _inbound_dependencies = InboundDependencies(
        adapter=adapter or create_twitter_dm_adapter(),
        sink=sink or create_message_sink(),
        error_reporter=error_reporter or create_error_reporter(),
    )
    return _inbound_dependencies


def get_inbound_dependencies() -> InboundDependencies:
    """Obtém os colaboradores inbound (lazy-loading)."""
    if _inbound_dependencies is None:
        return configure_inbound_dependencies()
    return _inbound_dependencies


def reset_inbound_dependencies() -> None:
    global _inbound_dependencies
    _inbound_dependencies = None


async def process_inbound_payload_safe(
    *,
    payload: dict[str, Any],
    correlation_id: str,
    dependencies: InboundDependencies,
) -> None:
    """Executa processamento inbound; falhas do sink são logadas e propagadas."""
    try:
        await process_inbound_payload(
            payload=payload,
            correlation_id=correlation_id,
            adapter=dependencies.adapter,
            sink=dependencies.sink,
            error_reporter=dependencies.error_reporter,
        )
    except Exception:
        logger.exception(
            "webhook_processing_failed",
            extra={
                "channel": "twitter",
                "correlation_id": correlation_id,
            },
        )
        raise


async def dispatch_inbound_processing(
    *,
    payload: dict[str, Any],
    correlation_id: str,
    settings: Any,
) -> None:
    """Despacha processamento inline ou async conforme configuração."""
    dependencies = get_inbound_dependencies()

    processing_mode = (settings.webhook_processing_mode or "async").lower()
    if processing_mode == "inline":
        await process_inbound_payload_safe(
            payload=payload,
            correlation_id=correlation_id,
            dependencies=dependencies,
        )
        logger.info(
            "webhook_processing_completed",
            extra={
                "channel": "twitter",
                "correlation_id": correlation_id,
                "mode": "inline",
            },
        )
        return
    _schedule_async_processing(
        payload=payload,
        correlation_id=correlation_id,
        dependencies=dependencies,
    )


def _schedule_async_processing(
    *,
    payload: dict[str, Any],
    correlation_id: str,
    dependencies: InboundDependencies,
) -> None:
    _task_runner.schedule(
        correlation_id=correlation_id,
        coroutine=process_inbound_payload_safe(
            payload=payload,
            correlation_id=correlation_id,
            dependencies=dependencies,
        ),
    )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda tasks async pendentes durante shutdown do processo."""
    await _task_runner.drain(timeout_seconds=timeout_seconds)
