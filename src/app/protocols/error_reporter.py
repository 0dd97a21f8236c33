"""Protocolo de reporte de erros fora do ciclo request/response."""

from __future__ import annotations

from typing import Protocol


class ErrorReporterProtocol(Protocol):
    """Recebe erros que não podem afetar a resposta ao provedor."""

    def report(self, error: Exception) -> None: ...
