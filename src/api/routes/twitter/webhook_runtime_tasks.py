"""Processamento inbound em background (modo async do webhook Twitter).

O POST do webhook responde 200 antes de emitir a mensagem; a emissão roda
em uma task nomeada pelo correlation_id da requisição. O runner limita
quantas emissões rodam ao mesmo tempo e espera as pendentes no shutdown.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

MAX_CONCURRENT_TASKS = 100

TASK_NAME_PREFIX = "twitter-inbound-"


class InboundTaskRunner:
    """Tasks de processamento inbound com limite de concorrência.

    Tasks acima do limite ficam aguardando o semáforo; não são descartadas.
    """

    def __init__(self, max_concurrent: int = MAX_CONCURRENT_TASKS) -> None:
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._tasks: dict[asyncio.Task[None], str] = {}

    @property
    def pending(self) -> int:
        """Quantidade de tasks ainda não concluídas."""
        return len(self._tasks)

    def schedule(
        self,
        *,
        correlation_id: str,
        coroutine: Coroutine[Any, Any, None],
    ) -> asyncio.Task[None]:
        """Agenda o processamento de um webhook."""
        task = asyncio.create_task(
            self._run_limited(coroutine),
            name=f"{TASK_NAME_PREFIX}{correlation_id}",
        )
        self._tasks[task] = correlation_id
        task.add_done_callback(self._on_done)
        logger.info(
            "webhook_processing_scheduled",
            extra={
                "correlation_id": correlation_id,
                "mode": "async",
                "pending_tasks": self.pending,
            },
        )
        return task

    async def _run_limited(self, coroutine: Coroutine[Any, Any, None]) -> None:
        async with self._semaphore:
            await coroutine

    def _on_done(self, task: asyncio.Task[None]) -> None:
        correlation_id = self._tasks.pop(task, "")
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "webhook_processing_task_failed",
                extra={
                    "correlation_id": correlation_id,
                    "error_type": type(exc).__name__,
                    "pending_tasks": self.pending,
                },
            )

    async def drain(self, timeout_seconds: float = 30.0) -> int:
        """Espera as tasks pendentes; cancela as que passarem do timeout.

        Returns:
            Quantidade de tasks canceladas.
        """
        if not self._tasks:
            return 0

        pending_now = list(self._tasks)
        logger.info(
            "webhook_processing_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, still_pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not still_pending:
            return 0

        for task in still_pending:
            task.cancel()
        await asyncio.gather(*still_pending, return_exceptions=True)
        logger.warning(
            "webhook_processing_shutdown_cancelled",
            extra={
                "cancelled_tasks": len(still_pending),
                "correlation_ids": sorted(
                    task.get_name().removeprefix(TASK_NAME_PREFIX) for task in still_pending
                ),
            },
        )
        return len(still_pending)
